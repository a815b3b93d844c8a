"""
# Sedlite: engines.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Edit engines.
"""

import io

from sedlite.bases import Edit
from sedlite.commands import AppendCommand, SubstituteCommand
from sedlite.exceptions import ScanException
from sedlite.utilities import ensure_trailing_newline


def open_line_reader(buffer: bytes) -> io.BytesIO:
    return io.BytesIO(buffer)


class SubstitutionEngine(Edit):
    """
    An engine for substitutions.

    Edit command syntax:
    ````
    s«delimiter»«pattern»«delimiter»«replacement»«delimiter»
    ````

    Every occurrence of «pattern» is replaced by «replacement»,
    matching literally, case-sensitively, leftmost-first and without overlap.
    Substitutions are applied in list order,
    each to the result of the one before.
    """

    @property
    def name(self) -> str:
        return 'SubstitutionEngine'

    @property
    def command_type(self) -> type:
        return SubstituteCommand

    def _apply(self, buffer: bytes) -> bytes:
        for command in self._effective_commands:
            buffer = buffer.replace(command.pattern, command.replacement)

        return buffer


class AppendEngine(Edit):
    """
    An engine for appends.

    Edit command syntax:
    ````
    /«prefix»/a«text»
    ````

    After every line beginning with «prefix», a line consisting of «text» is inserted.
    Lines are compared including their terminating newline.
    Where several appends match the same line, their lines are inserted in list order.
    Inserted lines are not themselves scanned.

    The buffer is first made to end in a newline,
    so the result is always newline-terminated.
    """

    @property
    def name(self) -> str:
        return 'AppendEngine'

    @property
    def command_type(self) -> type:
        return AppendCommand

    def _apply(self, buffer: bytes) -> bytes:
        buffer = ensure_trailing_newline(buffer)

        lines: list[bytes] = []
        try:
            with open_line_reader(buffer) as reader:
                for line in reader:
                    lines.append(line)

                    for command in self._effective_commands:
                        if line.startswith(command.prefix):
                            lines.append(command.text + b'\n')
        except (OSError, ValueError) as scan_error:
            raise ScanException(f'failed to scan buffer: {scan_error}') from scan_error

        return b''.join(lines)
