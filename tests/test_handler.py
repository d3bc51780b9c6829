"""Tests for Handler callback bundling and dispatch."""

import pytest

from inistream import CommentEvent, Handler, KeyValueEvent, Location, SectionEvent, parse


class TestHandlerDispatch:
    """Handler.dispatch routes each event kind to its callback."""

    def test_dispatch_comment(self) -> None:
        calls: list[tuple] = []
        handler = Handler(on_comment=lambda loc, text: calls.append((loc, text)))
        handler.dispatch(CommentEvent(Location(1), "; hi"))
        assert calls == [(Location(1), "; hi")]

    def test_dispatch_section(self) -> None:
        calls: list[tuple] = []
        handler = Handler(on_section=lambda loc, name: calls.append((loc, name)))
        handler.dispatch(SectionEvent(Location(2, "prev"), "next"))
        assert calls == [(Location(2, "prev"), "next")]

    def test_dispatch_key_value(self) -> None:
        calls: list[tuple] = []
        handler = Handler(on_key_value=lambda loc, key, values: calls.append((key, values)))
        handler.dispatch(KeyValueEvent(Location(3), "k", ("a", "b")))
        assert calls == [("k", ("a", "b"))]

    def test_missing_callbacks_are_noops(self) -> None:
        handler = Handler()
        handler.dispatch(CommentEvent(Location(1), ";"))
        handler.dispatch(SectionEvent(Location(1), "s"))
        handler.dispatch(KeyValueEvent(Location(1), "k", ("",)))

    def test_callback_return_value_ignored(self) -> None:
        handler = Handler(on_section=lambda loc, name: "ignored")
        parse("[a]\n[b]", handler)

    def test_unknown_event_rejected(self) -> None:
        with pytest.raises(TypeError, match="str"):
            Handler().dispatch("not an event")  # type: ignore[arg-type]

    def test_immutability(self) -> None:
        handler = Handler()
        with pytest.raises(AttributeError):
            handler.on_comment = print  # type: ignore[misc]


class TestHandlerFromObject:
    """Handler.from_object picks up callbacks by method name."""

    def test_all_methods(self) -> None:
        class Recorder:
            def __init__(self) -> None:
                self.seen: list[str] = []

            def on_comment(self, loc: Location, text: str) -> None:
                self.seen.append(f"comment {text}")

            def on_section(self, loc: Location, name: str) -> None:
                self.seen.append(f"section {name}")

            def on_key_value(self, loc: Location, key: str, values) -> None:
                self.seen.append(f"{key}={','.join(values)}")

        recorder = Recorder()
        parse("; top\n[s]\nk = 1\n  2", Handler.from_object(recorder))
        assert recorder.seen == ["comment ; top", "section s", "k=1,2"]

    def test_partial_methods(self) -> None:
        class SectionsOnly:
            def __init__(self) -> None:
                self.names: list[str] = []

            def on_section(self, loc: Location, name: str) -> None:
                self.names.append(name)

        obj = SectionsOnly()
        handler = Handler.from_object(obj)
        assert handler.on_comment is None
        assert handler.on_key_value is None

        parse("; c\n[one]\nk=v\n[two]", handler)
        assert obj.names == ["one", "two"]
