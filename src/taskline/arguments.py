"""Slice descriptions, date tokens and task numbers out of raw command lines."""

from __future__ import annotations

import re
from dataclasses import dataclass

from .commands import CommandKind, CommandSyntax, syntax_for

_NON_DIGITS = re.compile(r"[^0-9]+")


@dataclass(frozen=True)
class ParsedArguments:
    """Arguments pulled from one line before validation."""

    description: str = ""
    date_token: str | None = None
    index: int | None = None


def find_delimiter(line: str, delimiter: str) -> int | None:
    """Return the offset of the first occurrence of ``delimiter``, if any."""
    position = line.find(delimiter)
    return position if position >= 0 else None


def parse_task_index(line: str) -> int | None:
    """Turn the digits of a line into a zero-based task index.

    Every non-digit character is dropped first, so ``"delete 3"`` and
    ``"delete #3!"`` both give 2. Returns None when no digits remain.
    """
    digits = _NON_DIGITS.sub("", line)
    if not digits:
        return None
    return int(digits) - 1


def extract(line: str, kind: CommandKind) -> ParsedArguments | None:
    """Extract arguments for commands that take them.

    Returns None for commands without arguments and when a required
    delimiter is absent from the line.
    """
    syntax = syntax_for(kind)
    if syntax is None or not syntax.takes_arguments:
        return None
    if kind in (CommandKind.DELETE, CommandKind.DONE):
        return ParsedArguments(index=parse_task_index(line))
    if syntax.delimiter is not None:
        return _split_on_delimiter(line, syntax)
    assert syntax.description_offset is not None
    return ParsedArguments(description=line[syntax.description_offset :])


def _split_on_delimiter(line: str, syntax: CommandSyntax) -> ParsedArguments | None:
    assert syntax.delimiter is not None and syntax.description_offset is not None
    position = find_delimiter(line, syntax.delimiter)
    if position is None:
        return None
    description = line[syntax.description_offset : position]
    date_token = line[position + len(syntax.delimiter) :]
    return ParsedArguments(description=description.strip(), date_token=date_token)
