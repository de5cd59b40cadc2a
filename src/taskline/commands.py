"""Command keywords, their syntax, and the validated command variants."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class CommandKind(Enum):
    """Verb recognized at the start of an input line."""

    BYE = "bye"
    LIST = "list"
    FIND = "find"
    DELETE = "delete"
    DONE = "done"
    TODO = "todo"
    DEADLINE = "deadline"
    EVENT = "event"
    UNRECOGNIZED = "unrecognized"


@dataclass(frozen=True)
class CommandSyntax:
    """How one command keyword is matched and where its arguments start.

    ``keyword`` is compared against the whole line when ``exact`` is set,
    otherwise against its start. ``min_length`` is the line length at or
    below which the command carries no description. ``description_offset``
    is where the free text begins; ``delimiter`` splits it from the
    date/time token.
    """

    kind: CommandKind
    keyword: str
    exact: bool = False
    label: str = ""
    min_length: int = 0
    description_offset: int | None = None
    delimiter: str | None = None

    def matches(self, line: str) -> bool:
        if self.exact:
            return line == self.keyword
        return line.startswith(self.keyword)

    @property
    def takes_arguments(self) -> bool:
        return not self.exact


FIND_QUERY_OFFSET = 5
# Starts after the separator space of "todo ". Earlier releases used offset 4
# and stored that space as the first character of every todo description.
TODO_DESCRIPTION_OFFSET = 5
DEADLINE_DESCRIPTION_OFFSET = 9
EVENT_DESCRIPTION_OFFSET = 6

BY_DELIMITER = "/by "
AT_DELIMITER = "/at "

# Checked in order; first match wins. "delete" matches without a trailing
# space while "done " needs one, so "deletex" is a delete and "donex" is not.
COMMAND_SYNTAX: tuple[CommandSyntax, ...] = (
    CommandSyntax(CommandKind.BYE, "bye", exact=True),
    CommandSyntax(CommandKind.LIST, "list", exact=True),
    CommandSyntax(
        CommandKind.FIND,
        "find ",
        label="find query",
        min_length=5,
        description_offset=FIND_QUERY_OFFSET,
    ),
    CommandSyntax(CommandKind.DELETE, "delete", label="delete"),
    CommandSyntax(CommandKind.DONE, "done ", label="done"),
    CommandSyntax(
        CommandKind.TODO,
        "todo ",
        label="todo",
        min_length=5,
        description_offset=TODO_DESCRIPTION_OFFSET,
    ),
    CommandSyntax(
        CommandKind.DEADLINE,
        "deadline ",
        label="deadline",
        min_length=9,
        description_offset=DEADLINE_DESCRIPTION_OFFSET,
        delimiter=BY_DELIMITER,
    ),
    CommandSyntax(
        CommandKind.EVENT,
        "event ",
        label="event",
        min_length=6,
        description_offset=EVENT_DESCRIPTION_OFFSET,
        delimiter=AT_DELIMITER,
    ),
)

_SYNTAX_BY_KIND = {syntax.kind: syntax for syntax in COMMAND_SYNTAX}


def classify(line: str) -> CommandKind:
    """Return the command kind for a raw input line; never fails."""
    for syntax in COMMAND_SYNTAX:
        if syntax.matches(line):
            return syntax.kind
    return CommandKind.UNRECOGNIZED


def syntax_for(kind: CommandKind) -> CommandSyntax | None:
    """Return matching rules for a kind, or None for UNRECOGNIZED."""
    return _SYNTAX_BY_KIND.get(kind)


def is_stop(line: str) -> bool:
    """Return whether a line ends the session."""
    return classify(line) is CommandKind.BYE


@dataclass(frozen=True)
class Bye:
    """End the session."""


@dataclass(frozen=True)
class ListTasks:
    """Show every task."""


@dataclass(frozen=True)
class Find:
    query: str


@dataclass(frozen=True)
class Delete:
    """Remove the task at a zero-based position."""

    index: int


@dataclass(frozen=True)
class Done:
    """Mark the task at a zero-based position as done."""

    index: int


@dataclass(frozen=True)
class AddTodo:
    description: str


@dataclass(frozen=True)
class AddDeadline:
    description: str
    date_token: str


@dataclass(frozen=True)
class AddEvent:
    description: str
    date_token: str


Command = Bye | ListTasks | Find | Delete | Done | AddTodo | AddDeadline | AddEvent
