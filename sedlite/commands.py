"""
# Sedlite: commands.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Edit command grammar.

An edit command is parsed as one of
- a substitution `s«delimiter»«pattern»«delimiter»«replacement»«delimiter»`;
- an append `/«prefix»/a«text»`;
- anything else, which is unrecognised (and ignored by the engines).
"""

from typing import NamedTuple, Optional, Union

from sedlite.constants import SEPARATOR_WHITESPACE_CHARACTERS
from sedlite.exceptions import InvalidEditSyntaxException
from sedlite.utilities import encode_command_text


class SubstituteCommand(NamedTuple):
    edit_command: str
    pattern: bytes
    replacement: bytes


class AppendCommand(NamedTuple):
    edit_command: str
    prefix: bytes
    text: bytes


class UnrecognisedCommand(NamedTuple):
    edit_command: str


EditCommand = Union[SubstituteCommand, AppendCommand, UnrecognisedCommand]


def parse_substitute_command(edit_command: str) -> Optional[SubstituteCommand]:
    """
    Parse a substitution `s«delimiter»«pattern»«delimiter»«replacement»«delimiter»`.

    Returns None if the edit command does not have the outer shape of a substitution,
    i.e. `s`, then «delimiter» (any character other than a newline),
    then a single-line body, then the same «delimiter».
    Raises InvalidEditSyntaxException if the body does not split into exactly two parts
    on «delimiter», or if «pattern» is empty.
    """
    if len(edit_command) < 3 or '\n' in edit_command:
        return None

    if edit_command[0] != 's':
        return None

    delimiter = edit_command[1]
    if edit_command[-1] != delimiter:
        return None

    body = edit_command[2:-1]
    parts = body.split(delimiter)
    if len(parts) != 2:
        raise InvalidEditSyntaxException(edit_command, f'invalid edit body, `{edit_command}`')

    pattern, replacement = parts
    if pattern == '':
        raise InvalidEditSyntaxException(edit_command, f'empty pattern in edit, `{edit_command}`')

    return SubstituteCommand(edit_command, encode_command_text(pattern), encode_command_text(replacement))


def parse_append_command(edit_command: str) -> Optional[AppendCommand]:
    """
    Parse an append `/«prefix»/a«text»`.

    «prefix» must be non-empty and free of slashes.
    ASCII whitespace (space, tab, newline, form feed, carriage return)
    is permitted between the closing slash and `a`,
    whereas whitespace after `a` belongs to «text» and is kept verbatim.
    «text» runs to the end of the edit command, or to its first newline.
    Returns None if the edit command is not of this form.
    """
    if not edit_command.startswith('/'):
        return None

    closing_slash_index = edit_command.find('/', 1)
    if closing_slash_index <= 1:
        return None

    prefix = edit_command[1:closing_slash_index]
    remainder = edit_command[closing_slash_index + 1:].lstrip(SEPARATOR_WHITESPACE_CHARACTERS)
    if not remainder.startswith('a'):
        return None

    text = remainder[1:].split('\n', 1)[0]

    return AppendCommand(edit_command, encode_command_text(prefix), encode_command_text(text))


def parse_edit_command(edit_command: str) -> EditCommand:
    substitute_command = parse_substitute_command(edit_command)
    if substitute_command is not None:
        return substitute_command

    append_command = parse_append_command(edit_command)
    if append_command is not None:
        return append_command

    return UnrecognisedCommand(edit_command)
