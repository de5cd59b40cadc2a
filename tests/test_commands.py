import pytest

from taskline.commands import COMMAND_SYNTAX, CommandKind, classify, is_stop, syntax_for


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("bye", CommandKind.BYE),
        ("list", CommandKind.LIST),
        ("find book", CommandKind.FIND),
        ("find ", CommandKind.FIND),
        ("delete 3", CommandKind.DELETE),
        ("delete", CommandKind.DELETE),
        ("deletex", CommandKind.DELETE),
        ("done 1", CommandKind.DONE),
        ("todo read book", CommandKind.TODO),
        ("deadline return book /by 2024-06-06 18:00", CommandKind.DEADLINE),
        ("event meeting /at 2024-06-07 14:00", CommandKind.EVENT),
    ],
)
def test_classify_recognized_prefixes(line: str, expected: CommandKind) -> None:
    assert classify(line) is expected


@pytest.mark.parametrize(
    "line",
    ["", "bye ", "Bye", "lists", "list all", "find", "done", "donex", "todo", "deadline", "event", "blah", " todo x"],
)
def test_classify_falls_through_to_unrecognized(line: str) -> None:
    assert classify(line) is CommandKind.UNRECOGNIZED


def test_priority_order_is_fixed() -> None:
    assert [syntax.kind for syntax in COMMAND_SYNTAX] == [
        CommandKind.BYE,
        CommandKind.LIST,
        CommandKind.FIND,
        CommandKind.DELETE,
        CommandKind.DONE,
        CommandKind.TODO,
        CommandKind.DEADLINE,
        CommandKind.EVENT,
    ]


def test_syntax_for_unrecognized_is_none() -> None:
    assert syntax_for(CommandKind.UNRECOGNIZED) is None
    deadline = syntax_for(CommandKind.DEADLINE)
    assert deadline is not None
    assert deadline.delimiter == "/by "
    assert deadline.description_offset == len("deadline ")


def test_is_stop_only_for_exact_bye() -> None:
    assert is_stop("bye") is True
    assert is_stop("bye now") is False
    assert is_stop("list") is False
