"""Single-pass line scanner for INI text.

Reads one physical line at a time, classifies it, and yields events in
document order. Only the current line and one pending key group are held
in memory.

Thread Safety:
Scanner instances are single-use. Create one per source.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import NoReturn

from inistream.config import get_scan_config
from inistream.errors import IniSyntaxError, SyntaxErrorKind
from inistream.events import CommentEvent, Event, KeyValueEvent, SectionEvent
from inistream.location import Location
from inistream.profiling import get_scan_accumulator
from inistream.scanner.classify import LineKind, classify_line, is_indented, normalize_whitespace
from inistream.scanner.lines import iter_lines
from inistream.scanner.pending import EMPTY, Accumulating, PendingKey
from inistream.utils.logger import get_logger

logger = get_logger(__name__)


class Scanner:
    """State-machine scanner turning INI lines into events.

    For each line:
    1. Strip a copy and note whether the raw line is indented
    2. Classify the line (pure logic, no state changes)
    3. Update the pending key and yield any events it produces

    Usage:
            >>> scanner = Scanner("[user 1]\\nname=Alice Jones")
            >>> for event in scanner.scan():
            ...     print(event)
        SectionEvent(location=Location(line=1, section='', ...), name='user 1')
        KeyValueEvent(location=Location(line=2, section='user 1', ...), key='name', ...)

    Thread Safety:
        Scanner instances are single-use. Create one per source.

    """

    __slots__ = (
        "_lines",
        "_source_file",
        "_comment_prefixes",
        "_lineno",
        "_section",
        "_pending",
        "_event_count",
    )

    def __init__(self, source: str | Iterable[str], source_file: str | None = None) -> None:
        """Initialize scanner with source text.

        Args:
            source: INI text, or an iterable of lines such as an open file
            source_file: Optional source file path for locations and errors
        """
        self._lines = iter_lines(source)
        self._source_file = source_file
        self._comment_prefixes = get_scan_config().comment_prefixes
        self._lineno = 0
        self._section = ""
        self._pending: PendingKey = EMPTY
        self._event_count = 0

    def scan(self) -> Iterator[Event]:
        """Scan the source into an event stream.

        Yields:
            CommentEvent, SectionEvent and KeyValueEvent objects in order

        Raises:
            IniSyntaxError: On the first malformed line. Events for earlier
                lines have already been yielded.
        """
        for raw in self._lines:
            self._lineno += 1
            yield from self._scan_line(raw)

        yield from self._flush()

        logger.debug(
            "Scanned %d lines, %d events from %s",
            self._lineno,
            self._event_count,
            self._source_file or "<string>",
        )
        acc = get_scan_accumulator()
        if acc is not None:
            acc.record_scan(line_count=self._lineno, event_count=self._event_count)

    def _location(self) -> Location:
        return Location(self._lineno, self._section, self._source_file)

    def _emit(self, event: Event) -> Event:
        self._event_count += 1
        return event

    def _scan_line(self, raw: str) -> Iterator[Event]:
        clean = raw.strip()
        kind = classify_line(clean, self._comment_prefixes)

        if kind is LineKind.BLANK:
            return

        if kind is LineKind.COMMENT:
            yield from self._flush()
            yield self._emit(CommentEvent(self._location(), clean))
            return

        if kind is LineKind.SECTION:
            yield from self._scan_section(clean)
            return

        if kind is LineKind.BARE:
            pending = self._pending
            # Indented text continues the pending key
            if is_indented(raw) and isinstance(pending, Accumulating):
                pending.add_continuation(clean)
                return

            # Without "=" there is nothing to continue from, so the bare key
            # is emitted now instead of becoming pending.
            yield from self._flush()
            key = normalize_whitespace(clean)
            yield self._emit(KeyValueEvent(self._location(), key, ("",)))
            return

        yield from self._scan_assignment(clean)

    def _scan_section(self, clean: str) -> Iterator[Event]:
        if clean[-1] != "]":
            self._fail(SyntaxErrorKind.UNCLOSED_HEADER, clean[1:])

        name = normalize_whitespace(clean[1:-1])
        if not name or "[" in name or "]" in name:
            self._fail(SyntaxErrorKind.INVALID_SECTION, name)

        yield from self._flush()
        yield self._emit(SectionEvent(self._location(), name))
        self._section = name

    def _scan_assignment(self, clean: str) -> Iterator[Event]:
        raw_key, _, raw_value = clean.partition("=")
        key = normalize_whitespace(raw_key)
        if not key:
            self._fail(SyntaxErrorKind.EMPTY_KEY)

        pending = self._pending
        if not isinstance(pending, Accumulating) or pending.key != key:
            yield from self._flush()
            pending = Accumulating(key, self._location())
            self._pending = pending
        pending.values.append(raw_value.strip())

    def _flush(self) -> Iterator[Event]:
        """Yield the pending key group, if any, and clear it."""
        pending = self._pending
        if isinstance(pending, Accumulating):
            self._pending = EMPTY
            yield self._emit(pending.to_event())

    def _fail(self, kind: SyntaxErrorKind, key: str = "") -> NoReturn:
        error = IniSyntaxError(self._location(), kind, key)
        logger.debug("Scan aborted: %s", error)
        raise error
