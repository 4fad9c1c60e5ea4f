"""
ihexrec - Intel HEX Record Command-Line Interface
=================================================

This module implements the command-line interface for the record codec.
It creates, inspects and converts single Intel HEX records, including the
custom record types used to build fat binaries.

Commands
--------
- **create**: Create a record from address, type and data
- **parse**: Show the fields of a record
- **type**: Show the record type of a record
- **convert**: Re-tag a record as Custom Data
- **eof**: Print the End Of File record
- **ela**: Create an Extended Linear Address record
- **block-start**: Create a Block Start record
- **block-end**: Create a Block End record
- **pad**: Create a Padded Data record

Usage Examples
--------------
Create a data record:
    $ ihexrec create 0xF870 data 00000000
    :04F870000000000094

Inspect a record and check its checksum:
    $ ihexrec parse --verify :0400000A9901C0DEBA

Start a block for board 0x9901:
    $ ihexrec block-start 0x9901
    :0400000A9901C0DEBA
"""

import logging
from typing import Optional

import click

from fathex import __version__
from fathex.cli.errors import handle_cli_exception
from fathex.ihex import (
    RecordType,
    block_end_record,
    block_start_record,
    convert_record_to_custom_data,
    create_record,
    end_of_file_record,
    ext_lin_address_record,
    get_record_type,
    padded_data_record,
    parse_record,
    verify_record,
)
from fathex.utils import byte_array_to_hex_str, hex_str_to_bytes


# =============================================================================
# CLI Context
# =============================================================================

class Context:
    """Shared context for CLI commands."""

    def __init__(self) -> None:
        self.verbose: bool = False

    def setup_logging(self) -> None:
        """Configure logging based on verbosity."""
        level = logging.DEBUG if self.verbose else logging.WARNING
        logging.basicConfig(
            level=level,
            format="%(levelname)s: %(message)s" if self.verbose else "%(message)s",
        )


pass_context = click.make_pass_decorator(Context, ensure=True)


# =============================================================================
# Parameter Types
# =============================================================================

class IntegerLiteral(click.ParamType):
    """
    Click parameter type for integers written in decimal or hex.

    Accepts: 4096, 0x1000, 0o10000, 0b1000000000000
    """
    name = "integer"

    def convert(self, value: str, param: Optional[click.Parameter],
                ctx: Optional[click.Context]) -> int:
        """Convert string to int, honouring base prefixes."""
        if isinstance(value, int):
            return value
        try:
            return int(value, 0)
        except ValueError:
            self.fail(f"'{value}' is not a valid integer", param, ctx)


class RecordTypeChoice(click.ParamType):
    """
    Click parameter type for record type selection.

    Accepts a type name (data, end_of_file, block_start, ...; dashes or
    underscores, any case) or a number. Numbers are passed through
    unchecked so the codec reports invalid types.
    """
    name = "record_type"

    TYPE_MAP = {member.name.lower(): member for member in RecordType}

    def convert(self, value: str, param: Optional[click.Parameter],
                ctx: Optional[click.Context]) -> int:
        """Convert string to a record type value."""
        if isinstance(value, int):
            return value

        key = value.lower().replace("-", "_")
        if key in self.TYPE_MAP:
            return self.TYPE_MAP[key]
        try:
            return int(value, 0)
        except ValueError:
            self.fail(
                f"Invalid record type '{value}'. "
                f"Choose from: {', '.join(self.TYPE_MAP.keys())} or a number",
                param, ctx
            )


class HexData(click.ParamType):
    """Click parameter type for a data field given as hex digits."""
    name = "hex"

    def convert(self, value: str, param: Optional[click.Parameter],
                ctx: Optional[click.Context]) -> bytes:
        """Convert hex digits to bytes."""
        if isinstance(value, bytes):
            return value
        try:
            return hex_str_to_bytes(value)
        except ValueError as e:
            self.fail(str(e), param, ctx)


INTEGER = IntegerLiteral()
RECORD_TYPE = RecordTypeChoice()
HEX_DATA = HexData()


# =============================================================================
# Main CLI Group
# =============================================================================

@click.group()
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Enable verbose output",
)
@click.version_option(__version__, "--version", "-V", prog_name="ihexrec")
@pass_context
def main(ctx: Context, verbose: bool) -> None:
    """
    Intel HEX record tool with fat binary support.

    Create and inspect single Intel HEX records, including the custom
    Block Start, Block End, Padded Data and Custom Data records.

    \b
    Examples:
      ihexrec create 0xF870 data 00000000
      ihexrec parse :04F870000000000094
      ihexrec block-start 0x9901
      ihexrec convert :105D3000E060E3802046FFF765FF0123A1881A4653
    """
    ctx.verbose = verbose
    ctx.setup_logging()


# =============================================================================
# Codec Commands
# =============================================================================

@main.command("create")
@click.argument("address", type=INTEGER)
@click.argument("record_type", metavar="TYPE", type=RECORD_TYPE)
@click.argument("data", type=HEX_DATA, default="")
@pass_context
def cmd_create(ctx: Context, address: int, record_type: int, data: bytes) -> None:
    """
    Create a record.

    ADDRESS is the 16-bit address field, TYPE a record type name or
    number, DATA up to 16 bytes as hex digits.

    \b
    Examples:
      ihexrec create 0x4290 data 6427002003
      ihexrec create 0 block_start 9901C0DE
    """
    try:
        click.echo(create_record(address, record_type, data))
    except Exception as e:
        handle_cli_exception(e, verbose=ctx.verbose, error_type="Record")


@main.command("parse")
@click.argument("line")
@click.option(
    "--verify",
    is_flag=True,
    help="Fail if the checksum does not match the record contents",
)
@pass_context
def cmd_parse(ctx: Context, line: str, verify: bool) -> None:
    """
    Show the fields of a record.

    The checksum is only checked with --verify.

    \b
    Example:
      ihexrec parse --verify :04F870000000000094
    """
    try:
        record = verify_record(line) if verify else parse_record(line)

        click.echo(f"Byte count:  {record.byte_count}")
        click.echo(f"Address:     0x{record.address:04X}")
        click.echo(f"Record type: {record.get_type_name()} (0x{record.record_type:02X})")
        click.echo(f"Data:        {byte_array_to_hex_str(record.data)}")
        click.echo(f"Checksum:    0x{record.checksum:02X}")
        if verify:
            click.echo("Checksum verified")
    except Exception as e:
        handle_cli_exception(e, verbose=ctx.verbose, error_type="Parse")


@main.command("type")
@click.argument("line")
@pass_context
def cmd_type(ctx: Context, line: str) -> None:
    """
    Show the record type of a record.

    \b
    Example:
      ihexrec type :00000001FF
    """
    try:
        record_type = get_record_type(line)
        click.echo(f"{RecordType.get_name(record_type)} (0x{record_type:02X})")
    except Exception as e:
        handle_cli_exception(e, verbose=ctx.verbose, error_type="Parse")


@main.command("convert")
@click.argument("line")
@pass_context
def cmd_convert(ctx: Context, line: str) -> None:
    """
    Re-tag a record as Custom Data, keeping its address and data.
    """
    try:
        click.echo(convert_record_to_custom_data(line))
    except Exception as e:
        handle_cli_exception(e, verbose=ctx.verbose, error_type="Convert")


# =============================================================================
# Builder Commands
# =============================================================================

@main.command("eof")
def cmd_eof() -> None:
    """Print the End Of File record."""
    click.echo(end_of_file_record())


@main.command("ela")
@click.argument("address", type=INTEGER)
@pass_context
def cmd_ela(ctx: Context, address: int) -> None:
    """
    Create an Extended Linear Address record for a 32-bit ADDRESS.

    Only the upper 16 bits of ADDRESS are stored in the record.
    """
    try:
        click.echo(ext_lin_address_record(address))
    except Exception as e:
        handle_cli_exception(e, verbose=ctx.verbose, error_type="Record")


@main.command("block-start")
@click.argument("board_id", type=INTEGER)
@pass_context
def cmd_block_start(ctx: Context, board_id: int) -> None:
    """Create a Block Start record for BOARD_ID (0 to 0xFFFF)."""
    try:
        click.echo(block_start_record(board_id))
    except Exception as e:
        handle_cli_exception(e, verbose=ctx.verbose, error_type="Record")


@main.command("block-end")
@click.argument("pad_bytes", type=INTEGER, default=0)
@pass_context
def cmd_block_end(ctx: Context, pad_bytes: int) -> None:
    """Create a Block End record with PAD_BYTES bytes of padding."""
    try:
        click.echo(block_end_record(pad_bytes))
    except Exception as e:
        handle_cli_exception(e, verbose=ctx.verbose, error_type="Record")


@main.command("pad")
@click.argument("pad_bytes", type=INTEGER)
@pass_context
def cmd_pad(ctx: Context, pad_bytes: int) -> None:
    """Create a Padded Data record with PAD_BYTES bytes of padding."""
    try:
        click.echo(padded_data_record(pad_bytes))
    except Exception as e:
        handle_cli_exception(e, verbose=ctx.verbose, error_type="Record")


# =============================================================================
# Entry Point
# =============================================================================

if __name__ == "__main__":
    main()
