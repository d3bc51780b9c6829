"""Line classification for the scanner.

Pure logic, no scanner state: given one raw line, decide what kind of
line it is. The scanner combines the result with its pending-key state.
"""

from __future__ import annotations

from enum import Enum, auto


class LineKind(Enum):
    """What a single physical line contains."""

    BLANK = auto()  # Empty or whitespace only
    COMMENT = auto()  # ; comment
    SECTION = auto()  # [name]
    BARE = auto()  # Text with no "=" (bare key or continuation)
    ASSIGNMENT = auto()  # key = value


def classify_line(clean: str, comment_prefixes: tuple[str, ...] = (";",)) -> LineKind:
    """Classify a line that has already been stripped of outer whitespace.

    Args:
        clean: Stripped line text
        comment_prefixes: Prefixes that start a comment

    Returns:
        The LineKind for the line
    """
    if not clean:
        return LineKind.BLANK
    if clean.startswith(comment_prefixes):
        return LineKind.COMMENT
    if clean[0] == "[":
        return LineKind.SECTION
    if "=" not in clean:
        return LineKind.BARE
    return LineKind.ASSIGNMENT


def is_indented(raw: str) -> bool:
    """Report whether the raw line begins with a space or tab."""
    return raw[:1] in (" ", "\t")


def normalize_whitespace(text: str) -> str:
    """Collapse each run of whitespace to one space and trim both ends.

    Used for keys and section names; values are never normalized.

    Example:
        >>> normalize_whitespace("  a   long\\tkey ")
        'a long key'
    """
    return " ".join(text.split())
