"""
Main entry point for running smartgrid as a module.

Usage:
    python -m smartgrid ITEMS [options]
"""

from .cli import main

if __name__ == "__main__":
    import sys

    sys.exit(main())
