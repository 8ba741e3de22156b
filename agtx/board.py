"""Selection state for the kanban board view."""

from __future__ import annotations

from typing import Any, Hashable, Iterable, Optional, Sequence


class BoardState:
    """Tasks on the board plus the currently selected column and row.

    ``columns`` is the ordered sequence of statuses shown as columns. Each task
    is any object with a ``status`` attribute that matches one of them.
    """

    def __init__(self, columns: Sequence[Hashable], tasks: Optional[Iterable[Any]] = None) -> None:
        self.columns = tuple(columns)
        self.tasks: list[Any] = list(tasks) if tasks is not None else []
        self.selected_column = 0
        self.selected_row = 0

    def __repr__(self) -> str:
        return (
            f"BoardState(columns={self.columns!r}, tasks={self.tasks!r}, "
            f"selected_column={self.selected_column}, selected_row={self.selected_row})"
        )

    def tasks_in_column(self, column: int) -> list[Any]:
        """Tasks whose status matches the given column; empty for an unknown column."""
        if not 0 <= column < len(self.columns):
            return []
        status = self.columns[column]
        return [task for task in self.tasks if task.status == status]

    def selected_task(self) -> Optional[Any]:
        """The task under the selection, or None."""
        column_tasks = self.tasks_in_column(self.selected_column)
        if 0 <= self.selected_row < len(column_tasks):
            return column_tasks[self.selected_row]
        return None

    def move_left(self) -> None:
        """Move the selection one column to the left."""
        if self.selected_column > 0:
            self.selected_column -= 1
            self._clamp_row()

    def move_right(self) -> None:
        """Move the selection one column to the right."""
        if self.selected_column < len(self.columns) - 1:
            self.selected_column += 1
            self._clamp_row()

    def move_up(self) -> None:
        """Move the selection one row up."""
        if self.selected_row > 0:
            self.selected_row -= 1

    def move_down(self) -> None:
        """Move the selection one row down."""
        column_count = len(self.tasks_in_column(self.selected_column))
        if self.selected_row < max(column_count - 1, 0):
            self.selected_row += 1

    def _clamp_row(self) -> None:
        column_count = len(self.tasks_in_column(self.selected_column))
        if column_count == 0:
            self.selected_row = 0
        elif self.selected_row >= column_count:
            self.selected_row = column_count - 1