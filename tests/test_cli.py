"""
# Sedlite: test_cli.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Perform unit testing for `cli.py`.
"""

import contextlib
import io
import os
import tempfile
import unittest

from sedlite.cli import build_configuration, main, parse_command_line_arguments
from sedlite.configuration import EditConfiguration
from sedlite.constants import GENERIC_ERROR_EXIT_CODE


class TestCli(unittest.TestCase):
    def setUp(self):
        self._temporary_directory = tempfile.TemporaryDirectory()
        self.addCleanup(self._temporary_directory.cleanup)

    def make_file(self, content: bytes) -> str:
        file_name = os.path.join(self._temporary_directory.name, 'file.txt')
        with open(file_name, 'wb') as file:
            file.write(content)
        return file_name

    @staticmethod
    def read_file(file_name: str) -> bytes:
        with open(file_name, 'rb') as file:
            return file.read()

    def test_build_configuration(self):
        parsed_arguments = parse_command_line_arguments(['-i', 'file.txt', '-e', 's/a/b/', '-e', '/b/ac'])
        self.assertEqual(
            build_configuration(parsed_arguments),
            EditConfiguration('file.txt', ('s/a/b/', '/b/ac'), False),
        )

        parsed_arguments = parse_command_line_arguments(['-x', '-i', 'file.txt'])
        self.assertEqual(build_configuration(parsed_arguments), EditConfiguration('file.txt', (), True))

    def test_missing_input_file_option(self):
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as context:
                parse_command_line_arguments(['-e', 's/a/b/'])
        self.assertEqual(context.exception.code, 2)

    def test_main(self):
        file_name = self.make_file(b'hello world\nfoo bar\n')
        output = io.StringIO()
        with contextlib.redirect_stdout(output):
            main(['-i', file_name, '-e', 's/world/earth/', '-e', '/foo/aINSERTED'])
        self.assertEqual(output.getvalue(), '')
        self.assertEqual(self.read_file(file_name), b'hello earth\nfoo bar\nINSERTED\n')

    def test_main_invalid_syntax(self):
        file_name = self.make_file(b'a\n')
        error_output = io.StringIO()
        with contextlib.redirect_stderr(error_output):
            with self.assertRaises(SystemExit) as context:
                main(['-i', file_name, '-e', 's/a/b/c/'])
        self.assertEqual(context.exception.code, GENERIC_ERROR_EXIT_CODE)
        self.assertEqual(error_output.getvalue(), 'error: invalid edit body, `s/a/b/c/`\n')
        self.assertEqual(self.read_file(file_name), b'a\n')

    def test_main_missing_file(self):
        file_name = os.path.join(self._temporary_directory.name, 'missing.txt')
        error_output = io.StringIO()
        with contextlib.redirect_stderr(error_output):
            with self.assertRaises(SystemExit) as context:
                main(['-i', file_name, '-e', 's/a/b/'])
        self.assertEqual(context.exception.code, GENERIC_ERROR_EXIT_CODE)
        self.assertTrue(error_output.getvalue().startswith(f'error: cannot read file `{file_name}`'))
        self.assertFalse(os.path.exists(file_name))


if __name__ == '__main__':
    unittest.main()
