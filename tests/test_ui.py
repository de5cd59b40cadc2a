import pytest

from taskline.dispatcher import Dispatcher
from taskline.errors import (
    EmptyDescription,
    InvalidDateFormat,
    InvalidTaskIndex,
    MissingKeyword,
    StorageError,
    TaskListFailure,
    TaskNotFoundError,
    UnknownInput,
)
from taskline.service import TaskService
from taskline.ui import ConsoleUI, render_error


@pytest.mark.parametrize(
    ("error", "text"),
    [
        (EmptyDescription("todo"), "☹ OOPS!!! The description of a todo cannot be empty."),
        (MissingKeyword("/by "), "☹ OOPS!!! The keyword '/by ' is missing."),
        (UnknownInput("blah"), "☹ OOPS!!! I'm sorry, but I don't know what that means :-("),
        (InvalidDateFormat("x"), "☹ OOPS!!! Ensure that the datetime input is in the format YYYY-MM-DD HH:MM"),
        (InvalidTaskIndex("delete x"), "☹ OOPS!!! Please give the task number in digits."),
        (TaskListFailure(TaskNotFoundError(6)), "☹ OOPS!!! Task 7 does not exist."),
        (TaskListFailure(StorageError("disk full")), "☹ OOPS!!! Could not save your tasks: disk full"),
    ],
)
def test_each_error_has_distinct_message(error: object, text: str) -> None:
    assert render_error(error) == text


def test_add_list_done_delete_replies(service: TaskService, outputs: list[str]) -> None:
    ui = ConsoleUI(service, outputs.append)
    dispatcher = Dispatcher(ui, ui)

    dispatcher.process("todo read book")
    assert outputs == ["Got it. I've added this task:", "  [T][ ] read book", "Now you have 1 task in the list."]

    outputs.clear()
    dispatcher.process("deadline return book /by 2024-06-06 18:00")
    assert outputs[1] == "  [D][ ] return book (by: Jun 06 2024 18:00)"
    assert outputs[2] == "Now you have 2 tasks in the list."

    outputs.clear()
    dispatcher.process("done 1")
    assert outputs == ["Nice! I've marked this task as done:", "  [T][X] read book"]

    outputs.clear()
    dispatcher.process("list")
    assert outputs == [
        "Here are the tasks in your list:",
        "1.[T][X] read book",
        "2.[D][ ] return book (by: Jun 06 2024 18:00)",
    ]

    outputs.clear()
    dispatcher.process("find return")
    assert outputs == ["Here are the matching tasks in your list:", "2.[D][ ] return book (by: Jun 06 2024 18:00)"]

    outputs.clear()
    dispatcher.process("delete 1")
    assert outputs == ["Noted. I've removed this task:", "  [T][X] read book", "Now you have 1 task in the list."]


def test_empty_list_and_no_matches(service: TaskService, outputs: list[str]) -> None:
    ui = ConsoleUI(service, outputs.append)
    ui.list()
    ui.find("x")
    assert outputs == ["Your task list is empty.", "No matching tasks found."]


def test_missing_task_is_reported_not_raised(service: TaskService, outputs: list[str]) -> None:
    ui = ConsoleUI(service, outputs.append)
    outcome = Dispatcher(ui, ui).process("delete 3")
    assert outputs == ["☹ OOPS!!! Task 3 does not exist."]
    assert isinstance(outcome.error, TaskListFailure)
    assert service.count() == 0


def test_bye_prints_farewell(service: TaskService, outputs: list[str]) -> None:
    ui = ConsoleUI(service, outputs.append)
    outcome = Dispatcher(ui, ui).process("bye")
    assert outcome.should_stop is True
    assert outputs == ["Bye. Hope to see you again soon!"]


def test_failure_before_insert_leaves_list_unchanged(
    service: TaskService, outputs: list[str], monkeypatch: pytest.MonkeyPatch
) -> None:
    def locked() -> int:
        raise StorageError("database is locked", operation="count")

    monkeypatch.setattr(service.store, "count", locked)
    ui = ConsoleUI(service, outputs.append)
    outcome = Dispatcher(ui, ui).process("todo read book")

    assert outputs == ["☹ OOPS!!! Could not save your tasks: database is locked"]
    assert isinstance(outcome.error, TaskListFailure)
    assert service.list_tasks() == []


def test_delete_count_comes_from_listing(
    service: TaskService, outputs: list[str], monkeypatch: pytest.MonkeyPatch
) -> None:
    service.add_todo("a")
    service.add_todo("b")

    def unreachable() -> int:
        raise AssertionError("count queried after delete")

    monkeypatch.setattr(service.store, "count", unreachable)
    ui = ConsoleUI(service, outputs.append)
    outcome = Dispatcher(ui, ui).process("delete 1")

    assert outcome.error is None
    assert outputs[-1] == "Now you have 1 task in the list."
    assert [task.description for task in service.list_tasks()] == ["b"]
