"""Keybinding table widget for the TUI."""

from typing import List, Optional, Sequence

from textual.binding import Binding
from textual.widgets import DataTable

from kblib.config import Column, Row
from kblib.table import row_cells, table_columns


class KeybindTable(DataTable):
    """Data table showing keybinding rows, navigable with j/k."""

    BINDINGS = [
        Binding("j", "cursor_down", "Down", show=False),
        Binding("k", "cursor_up", "Up", show=False),
    ]

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self._keybind_columns: List[Column] = []
        self._keybind_rows: List[Row] = []
        self.cursor_type = "row"

    def set_columns(self, columns: Sequence[Column], visible_rows: int) -> None:
        """Replace the columns and size the table to ``visible_rows`` rows."""
        self._keybind_columns = list(columns)
        self.clear(columns=True)
        for title, width in table_columns(self._keybind_columns):
            self.add_column(title, width=width)
        # header row plus top and bottom border
        self.styles.height = visible_rows + 3

    def set_rows(self, rows: Sequence[Row]) -> None:
        """Show ``rows`` in place of the current ones."""
        self._keybind_rows = list(rows)
        self.clear(columns=False)
        for row in self._keybind_rows:
            self.add_row(*row_cells(row, len(self._keybind_columns)))

    @property
    def rows_shown(self) -> List[Row]:
        return list(self._keybind_rows)

    def get_selected_row(self) -> Optional[Row]:
        """Get the row under the cursor."""
        if not self._keybind_rows or self.cursor_row < 0:
            return None
        if self.cursor_row >= len(self._keybind_rows):
            return None
        return self._keybind_rows[self.cursor_row]
