"""Key dispatch for the keybinding screen, independent of the widget toolkit."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Protocol, Sequence

from kblib.config import Row
from kblib.filtering import filter_rows

from .models.interaction_state import InteractionState, Mode

logger = logging.getLogger(__name__)


class KeyOutcome(Enum):
    """What the screen should do with a key after the controller saw it."""
    QUIT = "quit"
    CONSUMED = "consumed"
    TO_TABLE = "table"
    TO_SEARCH = "search"


@dataclass(frozen=True)
class Keymap:
    """Key names, as reported by Textual, that drive mode changes."""
    search: str = "slash"
    quit: str = "q"
    interrupt: str = "ctrl+c"
    commit: str = "enter"
    cancel: str = "escape"

    def help_text(self) -> str:
        search = "/" if self.search == "slash" else self.search
        return f"Press '{search}' to search | j/k to move | {self.quit} to quit"


class RowSink(Protocol):
    def set_rows(self, rows: Sequence[Row]) -> None: ...

    def focus(self) -> object: ...


class QueryField(Protocol):
    def focus(self) -> object: ...

    def blur(self) -> object: ...

    def set_value(self, value: str) -> None: ...


class InteractionController:
    """Owns the browsing/searching mode and routes keys accordingly."""

    def __init__(
        self,
        rows: Sequence[Row],
        table: RowSink,
        search: QueryField,
        keymap: Keymap = Keymap(),
    ) -> None:
        self._all_rows: List[Row] = list(rows)
        self.table = table
        self.search = search
        self.keymap = keymap
        self.state = InteractionState()
        self.visible_rows: List[Row] = list(self._all_rows)

    @property
    def all_rows(self) -> List[Row]:
        return list(self._all_rows)

    @property
    def mode(self) -> Mode:
        return self.state.mode

    def handle_key(self, key: str) -> KeyOutcome:
        """Apply ``key`` to the current mode and say where it goes next."""
        if key == self.keymap.interrupt:
            return KeyOutcome.QUIT

        if self.state.mode is Mode.SEARCHING:
            if key == self.keymap.commit:
                self.commit_search()
                return KeyOutcome.CONSUMED
            if key == self.keymap.cancel:
                self.cancel_search()
                return KeyOutcome.CONSUMED
            return KeyOutcome.TO_SEARCH

        if key == self.keymap.search:
            self.start_search()
            return KeyOutcome.CONSUMED
        if key == self.keymap.quit:
            return KeyOutcome.QUIT
        return KeyOutcome.TO_TABLE

    def start_search(self) -> None:
        self.state.begin_search()
        self.search.set_value("")
        self.search.focus()
        self._show(self._all_rows)
        logger.debug("Search started")

    def commit_search(self) -> None:
        if not self.state.searching:
            return
        self.state.commit()
        self.search.blur()
        self.table.focus()
        logger.debug("Search committed with query %r (%d rows)", self.state.query, len(self.visible_rows))

    def cancel_search(self) -> None:
        if not self.state.searching:
            return
        self.state.cancel()
        self.search.blur()
        self.search.set_value("")
        self.table.focus()
        self._show(self._all_rows)
        logger.debug("Search cancelled")

    def update_query(self, text: str) -> None:
        """Re-filter the table for ``text`` while searching."""
        if not self.state.searching:
            return
        self.state.query = text
        self._show(filter_rows(self._all_rows, text))

    def _show(self, rows: List[Row]) -> None:
        self.visible_rows = list(rows)
        self.table.set_rows(self.visible_rows)
