"""Line-splitting primitive for the scanner.

Yields physical lines one at a time without their line terminators.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator


def _strip_terminator(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def iter_lines(source: str | Iterable[str]) -> Iterator[str]:
    """Yield the physical lines of source, in order.

    A str source is split on "\\n" only, so other Unicode line separators
    stay inside their line and do not shift line numbers. Any other
    iterable (an open text file, io.StringIO, a list) is consumed lazily,
    one item per line.

    One trailing "\\n" and one "\\r" before it are removed from each line.
    Errors raised by the underlying iterable propagate unchanged.

    Args:
        source: Text, or an iterable of lines

    Yields:
        Line text without terminator
    """
    if isinstance(source, str):
        pos = 0
        source_len = len(source)
        while pos < source_len:
            idx = source.find("\n", pos)
            if idx == -1:
                idx = source_len
            yield _strip_terminator(source[pos:idx])
            pos = idx + 1
        return

    for line in source:
        yield _strip_terminator(line)
