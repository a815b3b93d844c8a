"""
# Sedlite: __main__.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Entry point for `python -m sedlite`.
"""

from sedlite.cli import main

if __name__ == '__main__':
    main()
