"""Browsing/searching state for the keybinding TUI."""

from dataclasses import dataclass
from enum import Enum

SEARCH_PREFIX = "Search: "
FILTER_PREFIX = "Filtered by: "


class Mode(Enum):
    """Input modes of the keybinding screen."""
    BROWSING = "browsing"
    SEARCHING = "searching"


@dataclass
class InteractionState:
    """Current mode plus the search query typed so far."""

    mode: Mode = Mode.BROWSING
    query: str = ""

    @property
    def searching(self) -> bool:
        return self.mode is Mode.SEARCHING

    def begin_search(self) -> None:
        """Enter search mode with an empty query."""
        self.mode = Mode.SEARCHING
        self.query = ""

    def commit(self) -> None:
        """Leave search mode, keeping the query and its filtered view."""
        self.mode = Mode.BROWSING

    def cancel(self) -> None:
        """Leave search mode and drop the query."""
        self.mode = Mode.BROWSING
        self.query = ""

    def get_status_line(self) -> str:
        """Text for the line between the table and the help footer."""
        if self.mode is Mode.SEARCHING:
            return SEARCH_PREFIX
        if self.query:
            return f"{FILTER_PREFIX}{self.query}"
        return ""
