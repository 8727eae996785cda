from __future__ import annotations

class PhotoRenamerError(Exception):
    """Base exception for the application."""

class InvalidFormatError(PhotoRenamerError):
    """Raised when an input record does not match the expected line format.

    - field: which part of the record failed ("record", "filename", "city", "timestamp")
    - value: the offending text
    - line_number: 1-based input line, set by the pipeline once known
    """

    def __init__(self, message: str, field: str = "record", value: str = "", line_number: int | None = None) -> None:
        super().__init__(message)
        self.field = field
        self.value = value
        self.line_number = line_number

    def __str__(self) -> str:
        msg = super().__str__()
        if self.line_number is not None:
            return f"line {self.line_number}: {msg}"
        return msg
