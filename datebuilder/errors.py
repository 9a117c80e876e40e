from __future__ import annotations


class DateValidationError(ValueError):
    """Raised when an input cannot be normalized into a date."""

    name = "DateValidationError"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
