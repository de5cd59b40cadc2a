"""Error conditions reported to the user, and exceptions raised by the task list."""

from __future__ import annotations

from dataclasses import dataclass


class TaskListError(Exception):
    """Base exception for failures inside task-list operations."""


class TaskNotFoundError(TaskListError):
    """Raised when a zero-based index points outside the task list."""

    def __init__(self, index: int, size: int | None = None):
        self.index = index
        self.size = size
        super().__init__(f"Task {index + 1} does not exist")


class StorageError(TaskListError):
    """Raised when the task database cannot be read or written."""

    def __init__(self, message: str, operation: str | None = None):
        self.operation = operation
        super().__init__(message)


@dataclass(frozen=True)
class ErrorCondition:
    """Why one input line could not be dispatched."""


@dataclass(frozen=True)
class EmptyDescription(ErrorCondition):
    label: str


@dataclass(frozen=True)
class MissingKeyword(ErrorCondition):
    delimiter: str


@dataclass(frozen=True)
class UnknownInput(ErrorCondition):
    raw_text: str


@dataclass(frozen=True)
class InvalidDateFormat(ErrorCondition):
    raw_token: str


@dataclass(frozen=True)
class InvalidTaskIndex(ErrorCondition):
    """A delete/done line carried no digits to use as a task number."""

    raw_text: str


@dataclass(frozen=True)
class TaskListFailure(ErrorCondition):
    """An exception raised by the task list, carried to the reporter."""

    error: TaskListError
