from __future__ import annotations

from typing import Optional


class CharacterInformationError(Exception):
    """Base class for every error raised while reading a character dictionary."""


class FormatError(CharacterInformationError, ValueError):
    def __init__(self, message: str, field: Optional[str] = None, line_number: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.field = field
        self.line_number = line_number

    def with_line(self, line_number: Optional[int]) -> "FormatError":
        """Return a copy of this error tagged with the source line it came from."""
        return FormatError(self.message, field=self.field, line_number=line_number)

    def __str__(self) -> str:
        parts = []
        if self.line_number is not None:
            parts.append(f"line {self.line_number}")
        if self.field:
            parts.append(f"field '{self.field}'")
        if parts:
            return f"{self.message} ({', '.join(parts)})"
        return self.message


class InvalidVersionError(CharacterInformationError, ValueError):
    def __init__(self, message: str, major: Optional[int] = None, minor: Optional[int] = None):
        super().__init__(message)
        self.major = major
        self.minor = minor
