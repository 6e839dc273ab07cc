"""Keybinding screen: table, search bar and help footer."""

import logging
from typing import Optional

from rich.text import Text
from textual import events
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import Screen
from textual.widgets import Input, Label, Static

from kblib.config import Config

from ..controller import InteractionController, KeyOutcome, Keymap
from ..models.interaction_state import FILTER_PREFIX, SEARCH_PREFIX
from ..theme import ColorScheme
from ..widgets.keybind_table import KeybindTable
from ..widgets.search_input import SearchInput

logger = logging.getLogger(__name__)


class KeybindScreen(Screen):
    """Screen listing keybindings with live search."""

    BINDINGS = [
        Binding("ctrl+c", "interrupt", "Quit", show=False, priority=True),
    ]

    def __init__(
        self,
        config: Config,
        color_scheme: ColorScheme,
        keymap: Keymap,
        **kwargs,
    ):
        super().__init__(**kwargs)
        self.config = config
        self.color_scheme = color_scheme
        self.keymap = keymap
        self.data_table: Optional[KeybindTable] = None
        self.search_input: Optional[SearchInput] = None
        self.controller: Optional[InteractionController] = None

    def compose(self):
        """Compose the screen layout."""
        with Vertical():
            yield KeybindTable(id="keybind-table")
            with Horizontal(id="search-bar"):
                yield Label(SEARCH_PREFIX, id="search-prompt")
                yield SearchInput(id="search-input")
            yield Static("", id="filter-line")
            yield Static(self.keymap.help_text(), id="help-line")

    def on_mount(self) -> None:
        """Fill the table and start in browsing mode."""
        self.data_table = self.query_one("#keybind-table", KeybindTable)
        self.search_input = self.query_one("#search-input", SearchInput)

        self.data_table.set_columns(self.config.columns, self.config.height)
        self.controller = InteractionController(
            self.config.rows,
            table=self.data_table,
            search=self.search_input,
            keymap=self.keymap,
        )
        self.data_table.set_rows(self.controller.visible_rows)
        self.data_table.focus()
        self.refresh_status()
        logger.info("Showing %d keybindings", len(self.config.rows))

    def refresh_status(self) -> None:
        """Show the search bar or the active filter for the current mode."""
        if self.controller is None:
            return
        state = self.controller.state

        self.query_one("#search-bar").display = state.searching

        filter_line = self.query_one("#filter-line", Static)
        filter_line.display = bool(not state.searching and state.query)
        if filter_line.display:
            status = Text(state.get_status_line())
            status.stylize(self.color_scheme.accent_style, 0, len(FILTER_PREFIX))
            filter_line.update(status)

    def dispatch_key_to_controller(self, key: str) -> KeyOutcome:
        """Run ``key`` through the controller and act on the outcome."""
        outcome = self.controller.handle_key(key)
        if outcome is KeyOutcome.QUIT:
            logger.info("Quit requested with %r", key)
            self.app.exit()
        elif outcome is KeyOutcome.CONSUMED:
            self.refresh_status()
        return outcome

    def on_key(self, event: events.Key) -> None:
        """Handle mode keys before the focused widget's bindings see them."""
        if self.controller is None:
            return
        if self.controller.state.searching and event.key in ("tab", "shift+tab"):
            # focus stays in the search field until commit or cancel
            event.stop()
            event.prevent_default()
            return
        outcome = self.dispatch_key_to_controller(event.key)
        if outcome in (KeyOutcome.QUIT, KeyOutcome.CONSUMED):
            event.stop()
            event.prevent_default()

    def on_descendant_focus(self, event: events.DescendantFocus) -> None:
        """A click on the table while searching commits the search."""
        if self.controller is None or not self.controller.state.searching:
            return
        if event.widget is self.data_table:
            self.controller.commit_search()
            self.refresh_status()

    def action_interrupt(self) -> None:
        """Quit from any mode."""
        if self.controller is None:
            self.app.exit()
            return
        self.dispatch_key_to_controller(self.keymap.interrupt)

    def on_search_input_filter_changed(self, event: SearchInput.FilterChanged) -> None:
        """Handle search filter changes."""
        if self.controller:
            self.controller.update_query(event.filter_text)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Enter in the search field commits the search."""
        if self.controller:
            self.controller.commit_search()
            self.refresh_status()
