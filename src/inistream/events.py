"""Event types produced by the scanner.

The scanner produces a stream of events in document order. The three event
kinds are unrelated in shape and share no base class; use pattern matching
or isinstance checks to tell them apart.

Thread Safety:
All events are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass

from inistream.location import Location


@dataclass(frozen=True, slots=True)
class CommentEvent:
    """A whole-line comment.

    Attributes:
        location: Where the comment occurred
        text: Comment text including the leading delimiter, with leading and
            trailing whitespace removed
    """

    location: Location
    text: str


@dataclass(frozen=True, slots=True)
class SectionEvent:
    """A section header.

    ``location.section`` holds the name of the section that was active
    before this header, not this one.

    Attributes:
        location: Where the header occurred
        name: Section name with whitespace normalized
    """

    location: Location
    name: str


@dataclass(frozen=True, slots=True)
class KeyValueEvent:
    """All values collected for one key.

    Attributes:
        location: Where the key first appeared
        key: Key name with whitespace normalized
        values: One or more values in input order; a key with no value
            has the single value ""
    """

    location: Location
    key: str
    values: tuple[str, ...]


type Event = CommentEvent | SectionEvent | KeyValueEvent
