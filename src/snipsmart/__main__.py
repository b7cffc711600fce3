"""Entry point module for executing snipsmart as a Python module.

This module enables running snipsmart via `python -m snipsmart`, which
delegates to the CLI main function.
"""

from snipsmart.cli import main

if __name__ == "__main__":
    main()
