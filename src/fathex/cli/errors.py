"""
ihexrec Error Handling
======================

Maps the exceptions raised while building or decoding records to the exit
codes and stderr messages of the ihexrec command. Codec failures
(fathex.errors.FatHexError and its RecordError subclasses) exit with
RECORD_ERROR, bad command-line values with INVALID_ARGS, and anything else
with INTERNAL_ERROR.
"""

import sys
import traceback
from enum import IntEnum
from typing import NoReturn

import click


class ExitCode(IntEnum):
    """Exit codes of the ihexrec command."""
    SUCCESS = 0
    RECORD_ERROR = 1     # Record could not be created, parsed or verified
    INVALID_ARGS = 2     # Invalid arguments
    INTERNAL_ERROR = 3   # Unexpected internal error


def handle_cli_exception(
    error: Exception,
    verbose: bool = False,
    error_type: str | None = None
) -> NoReturn:
    """
    Report an error from an ihexrec command and exit.

    A FatHexError (bad address, payload, record line or checksum) prints
    its message, which names the offending record or value. A
    click.BadParameter from an ADDRESS, TYPE or DATA_HEX argument is a
    usage error. Any other exception is unexpected; its traceback is
    printed in verbose mode.

    Args:
        error: The exception that was raised
        verbose: If True, print full traceback for internal errors
        error_type: Optional prefix for the error message (e.g., "Parse")

    Raises:
        SystemExit: Always exits with an appropriate exit code
    """
    from fathex.errors import FatHexError

    if isinstance(error, FatHexError):
        prefix = f"{error_type} error: " if error_type else "Error: "
        click.echo(f"{prefix}{error}", err=True)
        sys.exit(ExitCode.RECORD_ERROR)

    elif isinstance(error, click.BadParameter):
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    else:
        click.echo(f"Internal error: {error}", err=True)
        if verbose:
            traceback.print_exc()
        sys.exit(ExitCode.INTERNAL_ERROR)
