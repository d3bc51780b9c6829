"""Callback bundle used by parse() to deliver events.

A Handler holds up to three callbacks. Any callback left as None is skipped
without error. If a callback raises, scanning stops and the exception
propagates to the caller of parse() unchanged.

Example:
    >>> sections = []
    >>> handler = Handler(on_section=lambda loc, name: sections.append(name))
    >>> parse("[alpha]\\n[bravo]", handler)
    >>> sections
    ['alpha', 'bravo']

"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from inistream.events import CommentEvent, Event, KeyValueEvent, SectionEvent
from inistream.location import Location

CommentCallback = Callable[[Location, str], Any]
SectionCallback = Callable[[Location, str], Any]
KeyValueCallback = Callable[[Location, str, Sequence[str]], Any]


@dataclass(frozen=True, slots=True)
class Handler:
    """Optional callbacks invoked for each event, in document order.

    Attributes:
        on_comment: Called with (location, text) for each comment
        on_section: Called with (location, name) for each section header
        on_key_value: Called with (location, key, values) for each key

    Return values of callbacks are ignored.
    """

    on_comment: CommentCallback | None = None
    on_section: SectionCallback | None = None
    on_key_value: KeyValueCallback | None = None

    @classmethod
    def from_object(cls, obj: object) -> Handler:
        """Build a Handler from an object's on_comment/on_section/on_key_value methods.

        Methods the object does not define are left as None.
        """
        return cls(
            on_comment=getattr(obj, "on_comment", None),
            on_section=getattr(obj, "on_section", None),
            on_key_value=getattr(obj, "on_key_value", None),
        )

    def dispatch(self, event: Event) -> None:
        """Deliver a single event to the matching callback."""
        match event:
            case CommentEvent(location=loc, text=text):
                if self.on_comment is not None:
                    self.on_comment(loc, text)
            case SectionEvent(location=loc, name=name):
                if self.on_section is not None:
                    self.on_section(loc, name)
            case KeyValueEvent(location=loc, key=key, values=values):
                if self.on_key_value is not None:
                    self.on_key_value(loc, key, values)
            case _:
                raise TypeError(f"Unknown event type: {type(event).__name__}")
