"""SQLite persistence for the task list."""

from __future__ import annotations

import logging
import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path

from .errors import StorageError

logger = logging.getLogger(__name__)

SCHEMA_VERSION = 1


@dataclass(frozen=True)
class TaskRow:
    """One stored task row."""

    id: int
    kind: str
    description: str
    done: bool
    scheduled_at: str | None


class TaskStore:
    """Database access layer for tasks, kept in insertion order."""

    def __init__(self, db_path: Path | str) -> None:
        """Open the database and bring its schema up to date."""
        if isinstance(db_path, Path):
            db_path.parent.mkdir(parents=True, exist_ok=True)
            target = str(db_path)
        else:
            target = db_path
        try:
            self._conn = sqlite3.connect(target)
        except sqlite3.Error as exc:
            raise StorageError(f"Could not open task database {target}: {exc}", operation="open") from exc
        self._conn.row_factory = sqlite3.Row
        with self._guard("migrate"):
            self._apply_migrations()

    @contextmanager
    def _guard(self, operation: str) -> Iterator[None]:
        try:
            yield
        except sqlite3.Error as exc:
            logger.warning("Task store %s failed: %s", operation, exc)
            raise StorageError(str(exc), operation=operation) from exc

    def _apply_migrations(self) -> None:
        """Apply forward-only schema migrations to latest version."""
        current = int(self._conn.execute("PRAGMA user_version").fetchone()[0])
        if current > SCHEMA_VERSION:
            raise StorageError(
                f"Database schema version {current} is newer than supported {SCHEMA_VERSION}.",
                operation="migrate",
            )

        with self._conn:
            self._conn.execute("""
                CREATE TABLE IF NOT EXISTS schema_migrations (
                    version INTEGER PRIMARY KEY,
                    applied_at TEXT NOT NULL
                )
                """)

        for version in range(current + 1, SCHEMA_VERSION + 1):
            if version == 1:
                self._migrate_to_v1()
            with self._conn:
                self._conn.execute(f"PRAGMA user_version = {version}")
                self._conn.execute(
                    "INSERT OR REPLACE INTO schema_migrations (version, applied_at) VALUES (?, ?)",
                    (version, datetime.now(UTC).isoformat()),
                )
            logger.debug("Task store migrated to schema version %d", version)

    def _migrate_to_v1(self) -> None:
        with self._conn:
            self._conn.execute("""
                CREATE TABLE IF NOT EXISTS tasks (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    kind TEXT NOT NULL,
                    description TEXT NOT NULL,
                    done INTEGER NOT NULL DEFAULT 0,
                    scheduled_at TEXT,
                    created_at TEXT NOT NULL
                )
                """)

    def list_rows(self) -> list[TaskRow]:
        """Return every task in insertion order."""
        with self._guard("list"):
            rows = self._conn.execute(
                "SELECT id, kind, description, done, scheduled_at FROM tasks ORDER BY id"
            ).fetchall()
        return [_row_to_task_row(row) for row in rows]

    def count(self) -> int:
        with self._guard("count"):
            return int(self._conn.execute("SELECT COUNT(*) FROM tasks").fetchone()[0])

    def insert(self, kind: str, description: str, scheduled_at: str | None = None) -> TaskRow:
        """Append a new task."""
        now = datetime.now(UTC).isoformat()
        with self._guard("insert"), self._conn:
            cursor = self._conn.execute(
                "INSERT INTO tasks (kind, description, done, scheduled_at, created_at) VALUES (?, ?, 0, ?, ?)",
                (kind, description, scheduled_at, now),
            )
        row_id = cursor.lastrowid
        if row_id is None:
            raise StorageError("Could not create task.", operation="insert")
        return TaskRow(id=int(row_id), kind=kind, description=description, done=False, scheduled_at=scheduled_at)

    def delete(self, row_id: int) -> bool:
        """Delete one task by row id."""
        with self._guard("delete"), self._conn:
            cursor = self._conn.execute("DELETE FROM tasks WHERE id = ?", (row_id,))
        return cursor.rowcount > 0

    def mark_done(self, row_id: int) -> bool:
        """Set the done flag on one task."""
        with self._guard("update"), self._conn:
            cursor = self._conn.execute("UPDATE tasks SET done = 1 WHERE id = ?", (row_id,))
        return cursor.rowcount > 0

    def close(self) -> None:
        """Close database connection."""
        self._conn.close()

    def __del__(self) -> None:  # pragma: no cover
        try:
            self.close()
        except Exception:
            pass


def _row_to_task_row(row: sqlite3.Row) -> TaskRow:
    return TaskRow(
        id=int(row["id"]),
        kind=str(row["kind"]),
        description=str(row["description"]),
        done=bool(row["done"]),
        scheduled_at=str(row["scheduled_at"]) if row["scheduled_at"] is not None else None,
    )
