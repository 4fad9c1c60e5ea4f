"""
fathex Command-Line Interface
=============================

This package provides the command-line tool for fathex:

- **ihexrec**: Create, inspect and convert single Intel HEX records

The tool is implemented as a Click-based CLI application with
comprehensive help and error reporting.
"""

__all__ = ["ihexrec"]
