"""
# Sedlite: exceptions.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Exception classes.
"""


class SedliteException(Exception):
    pass


class FileAccessException(SedliteException):
    _file_name: str

    def __init__(self, file_name: str, message: str):
        super().__init__(message)
        self._file_name = file_name

    @property
    def file_name(self) -> str:
        return self._file_name


class InvalidEditSyntaxException(SedliteException):
    _edit_command: str

    def __init__(self, edit_command: str, message: str):
        super().__init__(message)
        self._edit_command = edit_command

    @property
    def edit_command(self) -> str:
        return self._edit_command


class ScanException(SedliteException):
    pass
