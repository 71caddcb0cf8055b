"""Base exception classes for the Warden domain layer."""


class WardenError(Exception):
    """Base exception for all domain errors.

    All domain-specific exceptions MUST inherit from this class, usually
    through one of the three error kinds in ``warden.domain.errors.kinds``:
    - InvalidArgumentError
    - NotFoundError
    - ConflictError
    """

    def __init__(self, message: str = "") -> None:
        """Initialize the exception with an optional message.

        Args:
            message: Human-readable error description.
        """
        super().__init__(message)
