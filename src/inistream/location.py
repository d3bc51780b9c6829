"""Source location tracking for emitted events and error messages.

Thread Safety:
Location is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Location:
    """Physical location of an input element.
    
    Attributes:
        line: Line number (1-indexed)
        section: Name of the most recent section header, or "" if none yet
        source_file: Source file path (optional, for error messages)
    
    Examples:
            >>> loc = Location(line=3, section="user 1")
            >>> str(loc)
            'line 3'
    
            >>> str(Location(3, "", "users.ini"))
            'users.ini:3'
        
    """

    line: int
    section: str = ""
    source_file: str | None = None

    def __str__(self) -> str:
        if self.source_file:
            return f"{self.source_file}:{self.line}"
        return f"line {self.line}"
