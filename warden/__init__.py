"""
Warden - organization and iteration ledger core

Multi-tenant monitoring organizations owning named wardens, member users
with roles, and the history of execution iterations holding the check
results produced by running the organization's watchers.
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
