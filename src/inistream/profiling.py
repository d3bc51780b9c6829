"""inistream ScanAccumulator: opt-in profiling for INI scanning.

This module provides accumulated metrics during scanning:
- Total scan time
- Physical lines read
- Events emitted

Zero overhead when disabled (get_scan_accumulator() returns None).

Example:
    from inistream import parse
    from inistream.profiling import profiled_scan

    with profiled_scan() as metrics:
        parse(source, handler)

    print(metrics.summary())
    # {"total_ms": 0.4, "line_count": 26, "event_count": 16, "scan_calls": 1}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class ScanAccumulator:
    """Accumulated metrics during INI scanning.

    Attributes:
        start_time: Profiling start timestamp.
        line_count: Physical lines read across all recorded scans.
        event_count: Events emitted across all recorded scans.
        scan_calls: Number of completed scans recorded.

    """

    start_time: float = field(default_factory=perf_counter)
    line_count: int = 0
    event_count: int = 0
    scan_calls: int = 0

    def record_scan(self, line_count: int, event_count: int) -> None:
        """Record a completed scan.

        Args:
            line_count: Physical lines read by the scan.
            event_count: Events the scan emitted.

        """
        self.scan_calls += 1
        self.line_count += line_count
        self.event_count += event_count

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of scan metrics.

        Returns:
            Dict with total_ms, line_count, event_count, scan_calls.

        """
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "line_count": self.line_count,
            "event_count": self.event_count,
            "scan_calls": self.scan_calls,
        }


_accumulator: ContextVar[ScanAccumulator | None] = ContextVar(
    "scan_accumulator",
    default=None,
)


def get_scan_accumulator() -> ScanAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_scan() -> Iterator[ScanAccumulator]:
    """Context manager for profiled scanning.

    Creates a ScanAccumulator and makes it available via
    get_scan_accumulator() for the duration of the with block.
    Only scans that run to completion are recorded.

    Yields:
        ScanAccumulator that will be populated during scans.

    """
    acc = ScanAccumulator()
    token: Token[ScanAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)
