"""Convert config columns and rows into plain table cells."""

from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

from .config import Column, Row


def table_columns(columns: Iterable[Column]) -> List[Tuple[str, int]]:
    """Return ``(title, width)`` pairs in display order."""
    return [(column.title, column.width) for column in columns]


def row_cells(row: Row, column_count: int) -> List[str]:
    """Return the cells of ``row`` fitted to ``column_count`` columns.

    Extra cells are dropped and missing ones are filled with "".
    """
    cells = list(row.cells[:column_count])
    cells.extend("" for _ in range(column_count - len(cells)))
    return cells


def table_rows(rows: Iterable[Row], columns: Sequence[Column]) -> List[List[str]]:
    return [row_cells(row, len(columns)) for row in rows]
