"""
Package entry point.

Allows running the client via:

    python -m timeedit

This simply forwards execution to timeedit.cli.main().
"""

from timeedit.cli import main

if __name__ == "__main__":
    main()
