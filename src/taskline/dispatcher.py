"""Route one raw input line to a task-list operation or an error report."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol

from .arguments import extract
from .commands import (
    AddDeadline,
    AddEvent,
    AddTodo,
    Bye,
    Command,
    Delete,
    Done,
    Find,
    ListTasks,
    classify,
)
from .errors import ErrorCondition, TaskListError, TaskListFailure
from .validation import validate

logger = logging.getLogger(__name__)


class TaskListOperations(Protocol):
    """Operations the dispatcher may invoke, one per accepted line."""

    def stop(self) -> None: ...

    def list(self) -> None: ...

    def find(self, query: str) -> None: ...

    def delete(self, index: int) -> None: ...

    def mark_done(self, index: int) -> None: ...

    def add_todo(self, description: str) -> None: ...

    def add_deadline(self, description: str, date_token: str) -> None: ...

    def add_event(self, description: str, date_token: str) -> None: ...


class ErrorReporter(Protocol):
    def report(self, error: ErrorCondition) -> None: ...


@dataclass(frozen=True)
class DispatchOutcome:
    """Result of handling one line."""

    should_stop: bool = False
    error: ErrorCondition | None = None


class Dispatcher:
    """Classify, validate and route input lines one at a time.

    Every failure is handed to the reporter; nothing raised by the task
    list as a ``TaskListError`` escapes ``process``.
    """

    def __init__(self, tasks: TaskListOperations, reporter: ErrorReporter) -> None:
        self.tasks = tasks
        self.reporter = reporter

    def process(self, line: str) -> DispatchOutcome:
        """Handle one user-submitted line."""
        kind = classify(line)
        logger.debug("Classified %r as %s", line, kind.name)
        result = validate(kind, line, extract(line, kind))
        if isinstance(result, ErrorCondition):
            return self._fail(result)
        try:
            self._route(result)
        except TaskListError as exc:
            return self._fail(TaskListFailure(exc))
        return DispatchOutcome(should_stop=isinstance(result, Bye))

    def _fail(self, error: ErrorCondition) -> DispatchOutcome:
        logger.info("Reporting %s", error)
        self.reporter.report(error)
        return DispatchOutcome(error=error)

    def _route(self, command: Command) -> None:
        if isinstance(command, Bye):
            self.tasks.stop()
        elif isinstance(command, ListTasks):
            self.tasks.list()
        elif isinstance(command, Find):
            self.tasks.find(command.query)
        elif isinstance(command, Delete):
            self.tasks.delete(command.index)
        elif isinstance(command, Done):
            self.tasks.mark_done(command.index)
        elif isinstance(command, AddTodo):
            self.tasks.add_todo(command.description)
        elif isinstance(command, AddDeadline):
            self.tasks.add_deadline(command.description, command.date_token)
        elif isinstance(command, AddEvent):
            self.tasks.add_event(command.description, command.date_token)
        else:  # pragma: no cover
            raise TypeError(f"Unhandled command: {command!r}")
