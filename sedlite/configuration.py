"""
# Sedlite: configuration.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Run configuration.
"""

from typing import NamedTuple


class EditConfiguration(NamedTuple):
    """
    Everything one run needs: the file to edit in place, and the ordered edit commands.

    Built once from the command line and passed by value into `core.edit_file`.
    """
    file_name: str
    edit_commands: tuple[str, ...]
    verbose_mode_enabled: bool = False
