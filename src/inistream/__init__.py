"""
inistream: Streaming INI Parser for Python

Turns INI-style text into a stream of comment, section and key/value
events without building a document tree. Single pass, one line at a time,
zero runtime dependencies.

Quick Start:
    >>> from inistream import Handler, parse
    >>> def show(loc, key, values):
    ...     print(loc.line, loc.section, key, values)
    >>> parse("[user 1]\\nname = Alice Jones", Handler(on_key_value=show))
    2 user 1 name ('Alice Jones',)

    >>> # Or iterate over events directly
    >>> from inistream import scan
    >>> [type(e).__name__ for e in scan("; hi\\n[a]\\nk=v")]
    ['CommentEvent', 'SectionEvent', 'KeyValueEvent']

Syntax:
    ; whole-line comment
    [section name]
    key = value
    letter = alpha
        bravo
        charlie
    bare key

Whitespace runs inside keys and section names collapse to one space. Values
are trimmed but otherwise kept as written. An indented line with no "="
adds another value to the key above it. Duplicate keys and sections are not
checked; quoting and backslash continuations are not supported.
"""

from collections.abc import Iterable, Iterator

from inistream.config import (
    ScanConfig,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)
from inistream.errors import IniError, IniSyntaxError, SyntaxErrorKind
from inistream.events import CommentEvent, Event, KeyValueEvent, SectionEvent
from inistream.handler import Handler
from inistream.location import Location
from inistream.profiling import ScanAccumulator, get_scan_accumulator, profiled_scan
from inistream.scanner import LineKind, Scanner

__version__ = "0.1.0"


def scan(source: str | Iterable[str], *, source_file: str | None = None) -> Iterator[Event]:
    """Scan INI source into an event stream.

    Args:
        source: INI text, or an iterable of lines such as an open file
        source_file: Optional source file path for locations and errors

    Returns:
        Iterator of events in document order

    Raises:
        IniSyntaxError: When iteration reaches a malformed line

    Example:
        >>> for event in scan("[alpha]\\nkey = 1"):
        ...     print(event)
    """
    return Scanner(source, source_file=source_file).scan()


def parse(
    source: str | Iterable[str],
    handler: Handler | None = None,
    *,
    source_file: str | None = None,
) -> None:
    """Parse INI source and deliver each event to handler.

    Callbacks run synchronously in document order. If a callback raises,
    parsing stops immediately and the exception propagates unchanged.
    Errors raised while reading lines from source propagate the same way.

    Args:
        source: INI text, or an iterable of lines such as an open file
        handler: Callbacks to invoke; None discards all events
        source_file: Optional source file path for locations and errors

    Raises:
        IniSyntaxError: On the first malformed line, after the events for
            all earlier lines have been delivered

    Example:
        >>> with open("settings.ini", encoding="utf-8") as f:
        ...     parse(f, Handler(on_section=print), source_file="settings.ini")
    """
    if handler is None:
        handler = Handler()
    for event in Scanner(source, source_file=source_file).scan():
        handler.dispatch(event)


__all__ = [  # noqa: RUF022, grouped by category
    # Version
    "__version__",
    # Core API
    "parse",
    "scan",
    "Handler",
    "Scanner",
    "LineKind",
    # Events
    "Event",
    "CommentEvent",
    "SectionEvent",
    "KeyValueEvent",
    # Location
    "Location",
    # Errors
    "IniError",
    "IniSyntaxError",
    "SyntaxErrorKind",
    # Configuration (ContextVar-based)
    "ScanConfig",
    "get_scan_config",
    "set_scan_config",
    "reset_scan_config",
    "scan_config_context",
    # Profiling
    "ScanAccumulator",
    "get_scan_accumulator",
    "profiled_scan",
]
