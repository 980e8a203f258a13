"""Tests for the HistoryNavigator recall state machine."""

from __future__ import annotations

from webterm.interface.history import HistoryNavigator


def _history(*lines: str) -> HistoryNavigator:
    history = HistoryNavigator()
    for line in lines:
        history.record(line)
    return history


class TestRecord:
    def test_adjacent_duplicates_are_suppressed(self) -> None:
        assert _history("a", "a", "b").entries == ("a", "b")

    def test_non_adjacent_duplicates_are_kept(self) -> None:
        assert _history("a", "b", "a").entries == ("a", "b", "a")

    def test_blank_lines_are_not_recorded(self) -> None:
        history = _history("a", "   ", "")
        assert history.entries == ("a",)
        assert history.cursor == 1

    def test_cursor_resets_after_record(self) -> None:
        history = _history("a", "b")
        history.recall_previous()
        history.recall_previous()
        history.record("c")
        assert history.cursor == 3 == len(history)

    def test_lines_are_stored_verbatim(self) -> None:
        assert _history("  kv list ").entries == ("  kv list ",)


class TestRecall:
    def test_empty_history(self) -> None:
        history = HistoryNavigator()
        assert history.recall_previous() is None
        assert history.recall_next() is None
        assert history.cursor == 0

    def test_previous_stops_at_oldest(self) -> None:
        history = _history("a", "b")
        assert history.recall_previous() == "b"
        assert history.recall_previous() == "a"
        assert history.recall_previous() == "a"
        assert history.recall_previous() == "a"
        assert history.cursor == 0

    def test_next_walks_forward_then_blank_then_noop(self) -> None:
        history = _history("a", "b", "c")
        history.recall_previous()
        history.recall_previous()
        history.recall_previous()

        assert history.recall_next() == "b"
        assert history.recall_next() == "c"
        assert history.recall_next() == ""
        assert history.recall_next() is None
        assert history.recall_next() is None
        assert history.cursor == 3

    def test_next_while_composing_is_noop(self) -> None:
        history = _history("a")
        assert history.recall_next() is None
        assert history.cursor == 1

    def test_previous_after_falling_off_the_end(self) -> None:
        history = _history("a", "b")
        history.recall_previous()
        assert history.recall_next() == ""
        assert history.recall_previous() == "b"
