from __future__ import annotations

from typing import List, Sequence

import pytest

from kblib.config import Row
from kbtui.controller import InteractionController, KeyOutcome, Keymap
from kbtui.models.interaction_state import InteractionState, Mode

ROWS = [
    Row("visual", "y", "yank (copy) selection"),
    Row("normal", "gd", "go to definition"),
    Row("normal", "dd", "delete (cut) current line"),
]


class FakeTable:
    def __init__(self) -> None:
        self.rows: List[Row] = []
        self.focus_calls = 0

    def set_rows(self, rows: Sequence[Row]) -> None:
        self.rows = list(rows)

    def focus(self) -> "FakeTable":
        self.focus_calls += 1
        return self


class FakeSearch:
    def __init__(self) -> None:
        self.value = "stale"
        self.focused = False

    def focus(self) -> "FakeSearch":
        self.focused = True
        return self

    def blur(self) -> "FakeSearch":
        self.focused = False
        return self

    def set_value(self, value: str) -> None:
        self.value = value


@pytest.fixture
def controller():
    return InteractionController(ROWS, table=FakeTable(), search=FakeSearch())


def type_query(controller: InteractionController, text: str) -> None:
    for i in range(1, len(text) + 1):
        assert controller.handle_key(text[i - 1]) is KeyOutcome.TO_SEARCH
        controller.search.set_value(text[:i])
        controller.update_query(text[:i])


def test_starts_browsing_with_all_rows(controller):
    assert controller.mode is Mode.BROWSING
    assert controller.visible_rows == ROWS


def test_navigation_keys_go_to_table_while_browsing(controller):
    for key in ("j", "k", "up", "down", "enter", "escape"):
        assert controller.handle_key(key) is KeyOutcome.TO_TABLE
    assert controller.mode is Mode.BROWSING


def test_slash_starts_search(controller):
    assert controller.handle_key("slash") is KeyOutcome.CONSUMED
    assert controller.mode is Mode.SEARCHING
    assert controller.search.focused
    assert controller.search.value == ""
    assert controller.state.query == ""


def test_quit_while_browsing(controller):
    assert controller.handle_key("q") is KeyOutcome.QUIT


def test_q_is_text_while_searching(controller):
    controller.handle_key("slash")
    assert controller.handle_key("q") is KeyOutcome.TO_SEARCH
    assert controller.mode is Mode.SEARCHING


@pytest.mark.parametrize("start_search", [False, True])
def test_interrupt_quits_in_both_modes(controller, start_search):
    if start_search:
        controller.handle_key("slash")
    assert controller.handle_key("ctrl+c") is KeyOutcome.QUIT


def test_typing_filters_rows(controller):
    controller.handle_key("slash")
    type_query(controller, "GD")
    assert controller.table.rows == [ROWS[1]]
    assert controller.state.query == "GD"


def test_commit_keeps_filter_and_query(controller):
    controller.handle_key("slash")
    type_query(controller, "d")

    assert controller.handle_key("enter") is KeyOutcome.CONSUMED

    assert controller.mode is Mode.BROWSING
    assert controller.state.query == "d"
    assert controller.table.rows == [ROWS[1], ROWS[2]]
    assert not controller.search.focused
    assert controller.table.focus_calls == 1
    assert controller.state.get_status_line() == "Filtered by: d"


def test_cancel_restores_all_rows_in_order(controller):
    controller.handle_key("slash")
    type_query(controller, "gd")
    assert controller.table.rows == [ROWS[1]]

    assert controller.handle_key("escape") is KeyOutcome.CONSUMED

    assert controller.mode is Mode.BROWSING
    assert controller.state.query == ""
    assert controller.search.value == ""
    assert controller.table.rows == ROWS
    assert controller.state.get_status_line() == ""


def test_cancel_after_commit_and_new_search_restores_rows(controller):
    controller.handle_key("slash")
    type_query(controller, "dd")
    controller.handle_key("enter")

    controller.handle_key("slash")
    assert controller.table.rows == ROWS
    type_query(controller, "zzz")
    assert controller.table.rows == []
    controller.handle_key("escape")

    assert controller.table.rows == ROWS


def test_query_updates_ignored_while_browsing(controller):
    controller.update_query("gd")
    assert controller.visible_rows == ROWS
    assert controller.state.query == ""


def test_commit_and_cancel_are_noops_while_browsing(controller):
    controller.commit_search()
    controller.cancel_search()
    assert controller.mode is Mode.BROWSING
    assert controller.table.focus_calls == 0


def test_source_rows_never_change(controller):
    controller.handle_key("slash")
    type_query(controller, "y")
    controller.handle_key("enter")
    assert controller.all_rows == ROWS


def test_custom_keymap():
    keymap = Keymap(search="f", quit="x")
    controller = InteractionController(ROWS, FakeTable(), FakeSearch(), keymap=keymap)
    assert controller.handle_key("slash") is KeyOutcome.TO_TABLE
    assert controller.handle_key("f") is KeyOutcome.CONSUMED
    controller.handle_key("escape")
    assert controller.handle_key("x") is KeyOutcome.QUIT


def test_keymap_help_text():
    assert Keymap().help_text() == "Press '/' to search | j/k to move | q to quit"


def test_interaction_state_transitions():
    state = InteractionState()
    assert state.get_status_line() == ""

    state.begin_search()
    state.query = "gd"
    assert state.searching
    assert state.get_status_line() == "Search: "

    state.commit()
    assert state.mode is Mode.BROWSING
    assert state.get_status_line() == "Filtered by: gd"

    state.begin_search()
    assert state.query == ""
    state.cancel()
    assert (state.mode, state.query) == (Mode.BROWSING, "")
