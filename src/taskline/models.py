"""Task domain models."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from datetime import datetime

DATETIME_INPUT_FORMAT = "%Y-%m-%d %H:%M"
_DATETIME_INPUT_SHAPE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2} [0-9]{2}:[0-9]{2}")
DATETIME_DISPLAY_FORMAT = "%b %d %Y %H:%M"


def parse_datetime(token: str) -> datetime:
    """Parse a ``YYYY-MM-DD HH:MM`` token; raises ValueError otherwise.

    Every field must have exactly its width in ASCII digits, separated by a
    single space, before the calendar check runs.
    """
    if _DATETIME_INPUT_SHAPE.fullmatch(token) is None:
        raise ValueError(f"{token!r} does not match YYYY-MM-DD HH:MM")
    return datetime.strptime(token, DATETIME_INPUT_FORMAT)


def format_datetime(value: datetime) -> str:
    return value.strftime(DATETIME_DISPLAY_FORMAT)


@dataclass(frozen=True)
class Task:
    """Base task with a description and completion flag."""

    description: str
    done: bool = False

    kind_code = "?"

    @property
    def status_icon(self) -> str:
        return "X" if self.done else " "

    def mark_done(self) -> Task:
        return replace(self, done=True)

    def __str__(self) -> str:
        return f"[{self.kind_code}][{self.status_icon}] {self.description}"


@dataclass(frozen=True)
class Todo(Task):
    kind_code = "T"


@dataclass(frozen=True)
class Deadline(Task):
    """Task that must be finished by a given time."""

    by: datetime | None = None

    kind_code = "D"

    def __str__(self) -> str:
        when = format_datetime(self.by) if self.by is not None else "?"
        return f"{super().__str__()} (by: {when})"


@dataclass(frozen=True)
class Event(Task):
    """Task that happens at a given time."""

    at: datetime | None = None

    kind_code = "E"

    def __str__(self) -> str:
        when = format_datetime(self.at) if self.at is not None else "?"
        return f"{super().__str__()} (at: {when})"
