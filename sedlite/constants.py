"""
# Sedlite: constants.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Constants.
"""

GENERIC_ERROR_EXIT_CODE = 1
VERBOSE_MODE_DIVIDER_SYMBOL_COUNT = 48

NEW_FILE_PERMISSIONS = 0o644
COMMAND_ENCODING = 'utf-8'
COMMAND_ENCODING_ERRORS = 'surrogateescape'
SEPARATOR_WHITESPACE_CHARACTERS = ' \t\n\f\r'

EDIT_COMMAND_SYNTAX_HELP = '''\
An edit command must be one of the following:
(1) a substitution (`s«delimiter»«pattern»«delimiter»«replacement»«delimiter»`);
(2) an append (`/«prefix»/a«text»`).
- Note for (1): «delimiter» is any single character other than a newline,
  and must not occur in «pattern» or «replacement».
  «pattern» must be non-empty, and is matched literally.
- Note for (2): «prefix» must be non-empty and free of slashes.
  «text» is inserted as a new line after every line beginning with «prefix».
Edit commands of any other form are ignored.
'''
