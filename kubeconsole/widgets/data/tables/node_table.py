"""DataTable-based node list widget with sort indicators.

CSS Classes: widget-node-table
"""

from __future__ import annotations

from typing import Any

from textual.widgets import DataTable

from kubeconsole.constants.enums import SortDirection

_SORT_INDICATORS: dict[SortDirection, str] = {
    SortDirection.ASCENDING: " [+]",
    SortDirection.DESCENDING: " [-]",
    SortDirection.NONE: "",
}


class NodeTable(DataTable):
    """A node table repopulated from presenter rows on every change."""

    DEFAULT_CSS = """
    NodeTable {
        height: 1fr;
        margin: 0 1;
    }
    """

    def __init__(self, columns: list[tuple[str, str, int]], **kwargs: Any) -> None:
        kwargs.setdefault("classes", "widget-node-table")
        kwargs.setdefault("cursor_type", "cell")
        super().__init__(**kwargs)
        self._column_defs = columns
        self._sort_column: str | None = None
        self._sort_direction = SortDirection.NONE

    def on_mount(self) -> None:
        self._add_columns()

    def _add_columns(self) -> None:
        for key, label, width in self._column_defs:
            self.add_column(self.column_label(key, label), width=width, key=key)

    def column_label(self, key: str, label: str) -> str:
        """Get column label with sort indicator if sorted."""
        if key == self._sort_column:
            return f"{label}{_SORT_INDICATORS[self._sort_direction]}"
        return label

    def set_sort_indicator(self, column_key: str | None, direction: SortDirection) -> None:
        self._sort_column = column_key
        self._sort_direction = direction

    def replace_data(self, rows: list[tuple[str, tuple[Any, ...]]]) -> None:
        """Clear and repopulate with ``(row_key, cells)`` rows."""
        cursor = self.cursor_coordinate
        self.clear(columns=True)
        self._add_columns()
        for row_key, cells in rows:
            self.add_row(*cells, key=row_key)
        if rows:
            self.move_cursor(
                row=min(cursor.row, len(rows) - 1),
                column=cursor.column,
                animate=False,
            )
