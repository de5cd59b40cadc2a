"""Console replies for task-list operations and error conditions."""

from __future__ import annotations

from collections.abc import Callable

from .errors import (
    EmptyDescription,
    ErrorCondition,
    InvalidDateFormat,
    InvalidTaskIndex,
    MissingKeyword,
    StorageError,
    TaskListFailure,
    TaskNotFoundError,
    UnknownInput,
)
from .service import TaskChange, TaskService

PrintFn = Callable[[str], None]

OOPS = "☹ OOPS!!!"
GREETING = "Hello! I'm Taskline.\nWhat can I do for you?"
FAREWELL = "Bye. Hope to see you again soon!"


def render_error(error: ErrorCondition) -> str:
    """Return the user-facing message for one error condition."""
    if isinstance(error, EmptyDescription):
        return f"{OOPS} The description of a {error.label} cannot be empty."
    if isinstance(error, MissingKeyword):
        return f"{OOPS} The keyword '{error.delimiter}' is missing."
    if isinstance(error, UnknownInput):
        return f"{OOPS} I'm sorry, but I don't know what that means :-("
    if isinstance(error, InvalidDateFormat):
        return f"{OOPS} Ensure that the datetime input is in the format YYYY-MM-DD HH:MM"
    if isinstance(error, InvalidTaskIndex):
        return f"{OOPS} Please give the task number in digits."
    if isinstance(error, TaskListFailure):
        cause = error.error
        if isinstance(cause, TaskNotFoundError):
            return f"{OOPS} Task {cause.index + 1} does not exist."
        if isinstance(cause, StorageError):
            return f"{OOPS} Could not save your tasks: {cause}"
        return f"{OOPS} {cause}"
    return f"{OOPS} Something went wrong."


def _task_count_line(count: int) -> str:
    noun = "task" if count == 1 else "tasks"
    return f"Now you have {count} {noun} in the list."


class ConsoleUI:
    """Carries out task-list operations and prints the replies."""

    def __init__(self, service: TaskService, print_fn: PrintFn = print) -> None:
        self.service = service
        self.print_fn = print_fn

    def greet(self) -> None:
        self.print_fn(GREETING)

    def stop(self) -> None:
        self.print_fn(FAREWELL)

    def list(self) -> None:
        tasks = self.service.list_tasks()
        if not tasks:
            self.print_fn("Your task list is empty.")
            return
        self.print_fn("Here are the tasks in your list:")
        for position, task in enumerate(tasks, start=1):
            self.print_fn(f"{position}.{task}")

    def find(self, query: str) -> None:
        matches = self.service.find(query)
        if not matches:
            self.print_fn("No matching tasks found.")
            return
        self.print_fn("Here are the matching tasks in your list:")
        for position, task in matches:
            self.print_fn(f"{position}.{task}")

    def delete(self, index: int) -> None:
        change = self.service.delete(index)
        self.print_fn("Noted. I've removed this task:")
        self.print_fn(f"  {change.task}")
        self.print_fn(_task_count_line(change.task_count))

    def mark_done(self, index: int) -> None:
        task = self.service.mark_done(index)
        self.print_fn("Nice! I've marked this task as done:")
        self.print_fn(f"  {task}")

    def add_todo(self, description: str) -> None:
        self._added(self.service.add_todo(description))

    def add_deadline(self, description: str, date_token: str) -> None:
        self._added(self.service.add_deadline(description, date_token))

    def add_event(self, description: str, date_token: str) -> None:
        self._added(self.service.add_event(description, date_token))

    def report(self, error: ErrorCondition) -> None:
        self.print_fn(render_error(error))

    def _added(self, change: TaskChange) -> None:
        self.print_fn("Got it. I've added this task:")
        self.print_fn(f"  {change.task}")
        self.print_fn(_task_count_line(change.task_count))
