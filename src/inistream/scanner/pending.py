"""Pending-key state for the scanner.

At most one key accumulates values at a time. The slot is either Empty or
Accumulating; the scanner replaces it with EMPTY after each flush.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Final

from inistream.events import KeyValueEvent
from inistream.location import Location


@dataclass(frozen=True, slots=True)
class Empty:
    """No key is waiting for values."""


EMPTY: Final = Empty()


@dataclass(slots=True)
class Accumulating:
    """A key collecting values until the next flush.

    Attributes:
        key: Normalized key name
        origin: Location where the key first appeared
        values: Values collected so far
    """

    key: str
    origin: Location
    values: list[str] = field(default_factory=list)

    def add_continuation(self, text: str) -> None:
        """Attach an indented continuation line.

        A lone empty value (from "key=") is replaced by the first
        continuation instead of being kept.
        """
        if self.values == [""]:
            self.values[0] = text
        else:
            self.values.append(text)

    def to_event(self) -> KeyValueEvent:
        return KeyValueEvent(self.origin, self.key, tuple(self.values))


type PendingKey = Empty | Accumulating
