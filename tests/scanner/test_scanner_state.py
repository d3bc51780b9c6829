"""Tests for Scanner state: locations, current section and flush order."""

from inistream import CommentEvent, KeyValueEvent, Location, SectionEvent
from inistream.scanner import Scanner


class TestLocations:
    """Event locations carry line numbers and the enclosing section."""

    def test_section_location_holds_previous_section(self) -> None:
        events = list(Scanner("[one]\n[two]\n[three]").scan())
        assert [e.location for e in events] == [
            Location(1, ""),
            Location(2, "one"),
            Location(3, "two"),
        ]

    def test_key_location_is_first_line(self) -> None:
        events = list(Scanner("[s]\n\nk = 1\n  2\n\n  3\nk = 4").scan())
        assert events[1] == KeyValueEvent(Location(3, "s"), "k", ("1", "2", "3", "4"))

    def test_key_section_is_section_when_key_began(self) -> None:
        events = list(Scanner("[s1]\na = 1\n[s2]\nb = 2").scan())
        assert events == [
            SectionEvent(Location(1, ""), "s1"),
            KeyValueEvent(Location(2, "s1"), "a", ("1",)),
            SectionEvent(Location(3, "s1"), "s2"),
            KeyValueEvent(Location(4, "s2"), "b", ("2",)),
        ]

    def test_comment_location(self) -> None:
        events = list(Scanner("[s]\n\n  ; note").scan())
        assert events[1] == CommentEvent(Location(3, "s"), "; note")

    def test_source_file_on_every_location(self) -> None:
        events = list(Scanner("; c\n[s]\nk=v", source_file="x.ini").scan())
        assert {e.location.source_file for e in events} == {"x.ini"}


class TestFlushOrder:
    """The pending key is emitted before the event that ends it."""

    def test_flush_before_comment(self) -> None:
        events = list(Scanner("k = v\n; c").scan())
        assert [type(e) for e in events] == [KeyValueEvent, CommentEvent]

    def test_flush_before_section(self) -> None:
        events = list(Scanner("k = v\n[s]").scan())
        assert [type(e) for e in events] == [KeyValueEvent, SectionEvent]
        assert events[0].location.section == ""

    def test_flush_before_bare_key(self) -> None:
        events = list(Scanner("k = v\nbare").scan())
        assert [(e.key, e.values) for e in events] == [("k", ("v",)), ("bare", ("",))]

    def test_flush_at_end_of_input(self) -> None:
        events = list(Scanner("k = v\n  w\n\n").scan())
        assert events == [KeyValueEvent(Location(1), "k", ("v", "w"))]

    def test_blank_lines_do_not_flush(self) -> None:
        events = list(Scanner("k = 1\n\n\n  2\n\nk = 3").scan())
        assert events == [KeyValueEvent(Location(1), "k", ("1", "2", "3"))]


class TestSingleUse:
    def test_second_scan_yields_nothing(self) -> None:
        scanner = Scanner("[a]")
        assert len(list(scanner.scan())) == 1
        assert list(scanner.scan()) == []
