"""
Main entry point for running line_opener as a module.

This allows the package to be run with: python -m line_opener
"""

from .src.cli import main

if __name__ == '__main__':
    main()
