"""
# Sedlite: bases.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Base class for edit engines.
"""

import abc
from typing import Iterable

from sedlite.commands import EditCommand, parse_edit_command
from sedlite.constants import VERBOSE_MODE_DIVIDER_SYMBOL_COUNT
from sedlite.utilities import decode_for_display


class Edit(abc.ABC):
    """
    Base class for an edit engine.

    An engine captures the full list of edit commands once, on construction,
    parsing every one of them and keeping those of its own `command_type` (in list order).
    Commands of any other type are ignored.
    Parsing happens here, so that a malformed command is reported
    before any buffer is touched.
    """
    _edit_commands: tuple[str, ...]
    _parsed_commands: tuple[EditCommand, ...]
    _effective_commands: tuple[EditCommand, ...]
    _verbose_mode_enabled: bool

    def __init__(self, edit_commands: Iterable[str], verbose_mode_enabled: bool = False):
        self._edit_commands = tuple(edit_commands)
        self._parsed_commands = tuple(parse_edit_command(edit_command) for edit_command in self._edit_commands)
        self._effective_commands = tuple(
            command
            for command in self._parsed_commands
            if isinstance(command, self.command_type)
        )
        self._verbose_mode_enabled = verbose_mode_enabled

    @property
    @abc.abstractmethod
    def name(self) -> str:
        raise NotImplementedError

    @property
    @abc.abstractmethod
    def command_type(self) -> type:
        raise NotImplementedError

    @property
    def parsed_commands(self) -> tuple[EditCommand, ...]:
        return self._parsed_commands

    @property
    def edit_commands(self) -> tuple[str, ...]:
        return self._edit_commands

    @property
    def effective_commands(self) -> tuple[EditCommand, ...]:
        return self._effective_commands

    def apply(self, buffer: bytes) -> bytes:
        buffer_before = buffer
        buffer = self._apply(buffer)
        buffer_after = buffer

        if self._verbose_mode_enabled:
            self.print_verbose_dump(buffer_before, buffer_after)

        return buffer_after

    def print_verbose_dump(self, buffer_before: bytes, buffer_after: bytes):
        if buffer_before == buffer_after:
            no_change_indicator = ' (no change)'
        else:
            no_change_indicator = ''

        commands_string = ' '.join(f'`{command.edit_command}`' for command in self._effective_commands)
        if commands_string == '':
            commands_string = '(no commands)'

        print('<' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + f' BEFORE {self.name} {commands_string}')
        print(decode_for_display(buffer_before))
        print('=' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + no_change_indicator)
        print(decode_for_display(buffer_after))
        print('>' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + f' AFTER {self.name}')
        print('\n\n')

    @abc.abstractmethod
    def _apply(self, buffer: bytes) -> bytes:
        """
        Apply the effective commands to a buffer, returning a new buffer.
        """
        raise NotImplementedError
