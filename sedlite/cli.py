"""
# Sedlite: cli.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Command-line interface.
"""

import argparse
import sys
from typing import Optional, Sequence

from sedlite._version import __version__
from sedlite.configuration import EditConfiguration
from sedlite.constants import EDIT_COMMAND_SYNTAX_HELP, GENERIC_ERROR_EXIT_CODE
from sedlite.core import edit_file
from sedlite.exceptions import SedliteException

DESCRIPTION = '''
    Minimal implementation of sed, editing a file in place
    (for environments without a full sed).
'''
INPUT_FILE_NAME_HELP = '''
    input file to edit
'''
EDIT_COMMAND_HELP = '''
    appends sed style editing command (may be repeated; applied in order)
'''
VERBOSE_MODE_HELP = '''
    run in verbose mode (prints the buffer before and after each edit phase)
'''


def parse_command_line_arguments(arguments: Optional[Sequence[str]] = None) -> argparse.Namespace:
    argument_parser = argparse.ArgumentParser(
        description=DESCRIPTION,
        epilog=EDIT_COMMAND_SYNTAX_HELP,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    argument_parser.add_argument(
        '-v', '--version',
        action='version',
        version=f'{argument_parser.prog} version {__version__}',
    )
    argument_parser.add_argument(
        '-i',
        dest='file_name',
        help=INPUT_FILE_NAME_HELP,
        metavar='file',
        required=True,
    )
    argument_parser.add_argument(
        '-e',
        dest='edit_commands',
        action='append',
        default=[],
        help=EDIT_COMMAND_HELP,
        metavar='edit',
    )
    argument_parser.add_argument(
        '-x', '--verbose',
        dest='verbose_mode_enabled',
        action='store_true',
        help=VERBOSE_MODE_HELP,
    )

    return argument_parser.parse_args(arguments)


def build_configuration(parsed_arguments: argparse.Namespace) -> EditConfiguration:
    return EditConfiguration(
        file_name=parsed_arguments.file_name,
        edit_commands=tuple(parsed_arguments.edit_commands),
        verbose_mode_enabled=parsed_arguments.verbose_mode_enabled,
    )


def main(arguments: Optional[Sequence[str]] = None):
    parsed_arguments = parse_command_line_arguments(arguments)
    configuration = build_configuration(parsed_arguments)

    try:
        edit_file(configuration)
    except SedliteException as sedlite_exception:
        print(f'error: {sedlite_exception}', file=sys.stderr)
        sys.exit(GENERIC_ERROR_EXIT_CODE)


if __name__ == '__main__':
    main()
