"""Search filtering over keybinding rows."""

from __future__ import annotations

from typing import Iterable, List

from .config import Row


def row_matches(row: Row, query: str) -> bool:
    """True if any cell of ``row`` contains ``query``, ignoring case."""
    needle = query.lower()
    return any(needle in cell.lower() for cell in row.cells)


def filter_rows(rows: Iterable[Row], query: str) -> List[Row]:
    """Return the rows matching ``query``, case-insensitively, in order.

    An empty query keeps every row. ``rows`` is never modified.
    """
    if not query:
        return list(rows)
    return [row for row in rows if row_matches(row, query)]
