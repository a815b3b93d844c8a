"""
# Sedlite: __init__.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Minimal in-place stream editor.
"""

from sedlite._version import __version__
