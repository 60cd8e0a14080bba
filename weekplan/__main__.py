"""
Package entry point.

Allows running the application via:

    python -m weekplan

This simply forwards execution to weekplan.cli.main().
"""

from weekplan.cli import main

if __name__ == "__main__":
    main()
