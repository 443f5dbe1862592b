"""Custom exception classes."""


class InvalidInputError(ValueError):
    """Raised when person data fails validation."""

    def __init__(self, message: str, field: str):
        super().__init__(message)
        self.field = field
