"""Turn a classified line and its extracted arguments into a command or an error."""

from __future__ import annotations

from .arguments import ParsedArguments
from .commands import (
    AddDeadline,
    AddEvent,
    AddTodo,
    Bye,
    Command,
    CommandKind,
    Delete,
    Done,
    Find,
    ListTasks,
    syntax_for,
)
from .errors import (
    EmptyDescription,
    ErrorCondition,
    InvalidDateFormat,
    InvalidTaskIndex,
    MissingKeyword,
    UnknownInput,
)
from .models import parse_datetime


def validate(kind: CommandKind, line: str, parsed: ParsedArguments | None) -> Command | ErrorCondition:
    """Check one line's arguments.

    Pure function of its inputs. Checks run in a fixed order per command:
    description presence, then delimiter presence, then date syntax.
    """
    if kind is CommandKind.BYE:
        return Bye()
    if kind is CommandKind.LIST:
        return ListTasks()
    if kind is CommandKind.UNRECOGNIZED:
        return UnknownInput(line)

    syntax = syntax_for(kind)
    assert syntax is not None

    if kind in (CommandKind.DELETE, CommandKind.DONE):
        if parsed is None or parsed.index is None:
            return InvalidTaskIndex(line)
        return Delete(parsed.index) if kind is CommandKind.DELETE else Done(parsed.index)

    if len(line) <= syntax.min_length:
        return EmptyDescription(syntax.label)

    if kind is CommandKind.FIND:
        assert parsed is not None
        return Find(parsed.description)
    if kind is CommandKind.TODO:
        assert parsed is not None
        return AddTodo(parsed.description)

    assert syntax.delimiter is not None
    if parsed is None or parsed.date_token is None:
        return MissingKeyword(syntax.delimiter)
    if not parsed.description:
        return EmptyDescription(syntax.label)
    try:
        parse_datetime(parsed.date_token)
    except ValueError:
        return InvalidDateFormat(parsed.date_token)

    if kind is CommandKind.DEADLINE:
        return AddDeadline(parsed.description, parsed.date_token)
    return AddEvent(parsed.description, parsed.date_token)
