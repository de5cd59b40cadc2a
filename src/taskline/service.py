"""Task-list operations over the persistent store."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from .errors import StorageError, TaskNotFoundError
from .models import Deadline, Event, Task, Todo, parse_datetime
from .store import TaskRow, TaskStore

logger = logging.getLogger(__name__)

KIND_TODO = "todo"
KIND_DEADLINE = "deadline"
KIND_EVENT = "event"


@dataclass(frozen=True)
class TaskChange:
    """A task that was added or removed, with the list size after the change."""

    task: Task
    task_count: int


class TaskService:
    """Coordinates task creation, lookup and updates against the store.

    Positions handed in are zero-based and refer to the current listing
    order; anything outside ``0..count-1`` raises ``TaskNotFoundError``.
    """

    def __init__(self, db_path: Path | str) -> None:
        self.store = TaskStore(db_path)

    def list_tasks(self) -> list[Task]:
        """Return all tasks in listing order."""
        return [_task_from_row(row) for row in self.store.list_rows()]

    def count(self) -> int:
        return self.store.count()

    def find(self, query: str) -> list[tuple[int, Task]]:
        """Return (1-based position, task) pairs whose description contains ``query``."""
        return [
            (position, task)
            for position, task in enumerate(self.list_tasks(), start=1)
            if query in task.description
        ]

    def add_todo(self, description: str) -> TaskChange:
        return self._insert(KIND_TODO, description)

    def add_deadline(self, description: str, date_token: str) -> TaskChange:
        """Add a deadline due at ``date_token`` (``YYYY-MM-DD HH:MM``)."""
        return self._insert(KIND_DEADLINE, description, parse_datetime(date_token).isoformat())

    def add_event(self, description: str, date_token: str) -> TaskChange:
        """Add an event happening at ``date_token`` (``YYYY-MM-DD HH:MM``)."""
        return self._insert(KIND_EVENT, description, parse_datetime(date_token).isoformat())

    def delete(self, index: int) -> TaskChange:
        """Remove the task at ``index``; returns it with the remaining count."""
        rows = self.store.list_rows()
        row = _row_at(rows, index)
        if not self.store.delete(row.id):
            raise StorageError(f"Task {index + 1} vanished before it could be deleted.", operation="delete")
        return TaskChange(_task_from_row(row), len(rows) - 1)

    def mark_done(self, index: int) -> Task:
        """Mark the task at ``index`` done and return the updated task."""
        row = _row_at(self.store.list_rows(), index)
        if not self.store.mark_done(row.id):
            raise StorageError(f"Task {index + 1} vanished before it could be updated.", operation="update")
        return _task_from_row(row).mark_done()

    def close(self) -> None:
        """Close underlying store."""
        self.store.close()

    def _insert(self, kind: str, description: str, scheduled_at: str | None = None) -> TaskChange:
        # Size is read before the write so nothing can fail after the commit.
        size = self.store.count()
        row = self.store.insert(kind, description, scheduled_at)
        logger.debug("Added %s %d", kind, row.id)
        return TaskChange(_task_from_row(row), size + 1)


def _row_at(rows: list[TaskRow], index: int) -> TaskRow:
    if not (0 <= index < len(rows)):
        raise TaskNotFoundError(index, size=len(rows))
    return rows[index]


def _task_from_row(row: TaskRow) -> Task:
    scheduled = datetime.fromisoformat(row.scheduled_at) if row.scheduled_at else None
    if row.kind == KIND_DEADLINE:
        return Deadline(row.description, row.done, by=scheduled)
    if row.kind == KIND_EVENT:
        return Event(row.description, row.done, at=scheduled)
    return Todo(row.description, row.done)
