"""
Errors raised while parsing or formatting route files.
"""
from typing import Optional


class RouteFileError(ValueError):
    """Base class for route file errors."""

    def __init__(self, message: str, filename: Optional[str] = None):
        self.filename = filename or ""
        if self.filename:
            message = f"{self.filename}: {message}"
        super().__init__(message)


class MalformedLineError(RouteFileError):
    """A route line could not be decomposed into its required fields."""

    def __init__(self, line_number: int, line: str, reason: str, filename: Optional[str] = None):
        """
        Args:
            line_number: 1-based line number in the source text
            line: The offending line as read
            reason: Human readable cause
            filename: Optional filename hint for messages
        """
        self.line_number = line_number
        self.line = line
        self.reason = reason
        super().__init__(f"malformed route on line {line_number} ({reason}): {line!r}", filename)


class MissingFieldError(RouteFileError):
    """A route lacks a mandatory field at format time."""

    def __init__(self, field: str, record_name: str, filename: Optional[str] = None):
        self.field = field
        self.record_name = record_name
        super().__init__(f"{record_name} does not have a {field}.", filename)
