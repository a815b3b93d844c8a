"""
# Sedlite: core.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Core editing logic.

A buffer is edited in two fixed phases:
````
«buffer»
  --> SubstitutionEngine (every `s«delimiter»...` command, in list order)
  --> AppendEngine (every `/«prefix»/a...` command, in list order, in one pass)
````
The same command list is given to both phases; each ignores commands it does not understand.
"""

import contextlib
import os
import stat
from typing import Iterable

from sedlite.configuration import EditConfiguration
from sedlite.constants import NEW_FILE_PERMISSIONS
from sedlite.engines import AppendEngine, SubstitutionEngine
from sedlite.exceptions import FileAccessException


def edit_buffer(buffer: bytes, edit_commands: Iterable[str], verbose_mode_enabled: bool = False) -> bytes:
    """
    Apply edit commands to a buffer, substitutions first, then appends.

    Both engines are built before either is applied,
    so that a malformed substitution aborts before any work is done.
    """
    edit_commands = tuple(edit_commands)

    substitution_engine = SubstitutionEngine(edit_commands, verbose_mode_enabled)
    append_engine = AppendEngine(edit_commands, verbose_mode_enabled)

    buffer = substitution_engine.apply(buffer)
    buffer = append_engine.apply(buffer)

    return buffer


def read_buffer(file_name: str) -> bytes:
    try:
        with open(file_name, 'rb') as file:
            return file.read()
    except OSError as os_error:
        raise FileAccessException(file_name, f'cannot read file `{file_name}`: {os_error}') from os_error


def open_with_new_file_permissions(path: str, flags: int) -> int:
    return os.open(path, flags, NEW_FILE_PERMISSIONS)


def copy_existing_permissions(file_name: str, temporary_file_name: str):
    try:
        mode = os.stat(file_name).st_mode
    except FileNotFoundError:
        return

    os.chmod(temporary_file_name, stat.S_IMODE(mode))


def write_buffer(file_name: str, buffer: bytes):
    """
    Write a buffer to a file, replacing its content in one step.

    The buffer goes to a temporary file beside the target, which then replaces the target,
    so that a failed write leaves the target as it was.
    An existing target keeps its permissions; a new one is created with `NEW_FILE_PERMISSIONS`.
    """
    temporary_file_name = f'{file_name}.{os.getpid()}.tmp'
    temporary_file_created = False
    try:
        with open(temporary_file_name, 'xb', opener=open_with_new_file_permissions) as temporary_file:
            temporary_file_created = True
            temporary_file.write(buffer)

        copy_existing_permissions(file_name, temporary_file_name)
        os.replace(temporary_file_name, file_name)
    except OSError as os_error:
        if temporary_file_created:
            with contextlib.suppress(OSError):
                os.remove(temporary_file_name)

        raise FileAccessException(file_name, f'cannot write to file `{file_name}`: {os_error}') from os_error


def edit_file(configuration: EditConfiguration):
    """
    Edit a file in place.

    Nothing is written unless every edit succeeds.
    """
    buffer = read_buffer(configuration.file_name)
    buffer = edit_buffer(buffer, configuration.edit_commands, configuration.verbose_mode_enabled)
    write_buffer(configuration.file_name, buffer)
