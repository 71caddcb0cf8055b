"""Infrastructure layer - adapters for the application ports.

This layer contains:
- observability: structlog configuration and correlation IDs
- stubs: in-memory store implementations

Import rules:
- CAN import: domain, application
- CANNOT import: bootstrap
"""
