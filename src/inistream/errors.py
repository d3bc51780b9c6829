"""Exception classes for inistream.

Provides standardized exceptions for error handling throughout inistream.
Exceptions raised by handler callbacks or by the underlying line source are
never wrapped; they propagate out of the scan unchanged.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from inistream.location import Location


class IniError(Exception):
    """Base exception for all inistream errors.
    
    Subclass this for specific error categories.
    """

    pass


class SyntaxErrorKind(Enum):
    """The fixed set of syntax problems the scanner reports.

    Each member's value is the description text used in error messages.
    """

    UNCLOSED_HEADER = "unclosed section header"
    INVALID_SECTION = "invalid section name"
    EMPTY_KEY = "empty key"


class IniSyntaxError(IniError):
    """Malformed INI input.
    
    Raised when a line cannot be classified into a valid comment, section
    header, or key/value pair. Scanning stops at the first syntax error.
    """

    def __init__(self, location: Location, kind: SyntaxErrorKind, key: str = "") -> None:
        """Initialize syntax error.
        
        Args:
            location: Where the error occurred
            kind: Which syntax rule was violated
            key: The key or section name affected, if applicable
        """
        self.location = location
        self.kind = kind
        self.key = key

        message = f"{location}: {kind.value}"
        if key:
            message += f": {key}"
        super().__init__(message)

    @property
    def desc(self) -> str:
        """General description of the error."""
        return self.kind.value

    @property
    def lineno(self) -> int:
        """Line number where the error occurred (1-indexed)."""
        return self.location.line
