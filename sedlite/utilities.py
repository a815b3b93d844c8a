"""
# Sedlite: utilities.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Common utility functions.
"""

from sedlite.constants import COMMAND_ENCODING, COMMAND_ENCODING_ERRORS


def ensure_trailing_newline(buffer: bytes) -> bytes:
    """
    Ensure a buffer ends in a newline.

    An empty buffer becomes a single newline,
    so that the result always has at least one terminated line.
    """
    if buffer.endswith(b'\n'):
        return buffer

    return buffer + b'\n'


def encode_command_text(text: str) -> bytes:
    """
    Encode part of an edit command for matching against a buffer.

    Uses `surrogateescape` so that command-line arguments
    decoded by the OS from non-UTF-8 bytes are restored exactly.
    """
    return text.encode(COMMAND_ENCODING, errors=COMMAND_ENCODING_ERRORS)


def decode_for_display(buffer: bytes) -> str:
    return buffer.decode(COMMAND_ENCODING, errors='replace')
