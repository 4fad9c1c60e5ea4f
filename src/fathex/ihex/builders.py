"""
Record Builders
===============

Convenience constructors for the records a fat binary writer needs.

A fat binary is a single Intel HEX stream that packs several firmware
images. Each image sits inside a block:

    :0400000A9901C0DEBA          Block Start, board ID 0x9901
    :020000040000FA              Extended Linear Address
    :10000000...                 Data records for this board
    :0C00000BFFFFFFFFFFFF...     Block End, data field is padding

Blocks are padded to a fixed size (typically 512 bytes) with Padded Data
records and the padding bytes of the Block End record, so a flashing tool
can skip whole blocks meant for other boards. Data that belongs to another
board can be re-tagged as Custom Data with convert_record_to_custom_data().

All builders go through create_record() and raise the same errors.
"""

import logging

from fathex.errors import (
    AddressOutOfRangeError,
    BoardIdOutOfRangeError,
    PaddingLengthError,
)
from fathex.ihex.codec import create_record, parse_record
from fathex.ihex.records import RECORD_DATA_MAX_BYTES, RecordType

logger = logging.getLogger(__name__)

# Magic value following the board ID in a Block Start record
BLOCK_START_MAGIC = bytes([0xC0, 0xDE])

PADDING_BYTE = 0xFF


def end_of_file_record() -> str:
    """
    Create an End Of File record.

    Returns:
        The End Of File record, without line terminator
    """
    # This record never changes, no need to go through create_record()
    return ":00000001FF"


def ext_lin_address_record(address: int) -> str:
    """
    Create an Extended Linear Address record from a 32-bit address.

    Only the upper 16 bits of the address are stored; they apply to every
    Data record that follows until the next Extended Linear Address record.

    Args:
        address: Full 32-bit address

    Returns:
        The Extended Linear Address record

    Raises:
        AddressOutOfRangeError: If address is not in 0-0xFFFFFFFF

    Example:
        >>> ext_lin_address_record(0x10000)
        ':020000040001F9'
    """
    if address < 0 or address > 0xFFFFFFFF:
        raise AddressOutOfRangeError(
            address,
            RecordType.EXTENDED_LINEAR_ADDRESS,
            message=f"Address '{address}' for Extended Linear Address record "
                    f"is out of range.",
        )
    return create_record(
        0,
        RecordType.EXTENDED_LINEAR_ADDRESS,
        bytes([(address >> 24) & 0xFF, (address >> 16) & 0xFF]),
    )


def block_start_record(board_id: int) -> str:
    """
    Create a Block Start (custom) record.

    Args:
        board_id: Board ID to embed into the record, 0 to 0xFFFF

    Returns:
        The Block Start record

    Raises:
        BoardIdOutOfRangeError: If board_id does not fit in 16 bits
    """
    if board_id < 0 or board_id > 0xFFFF:
        raise BoardIdOutOfRangeError(board_id)
    return create_record(
        0,
        RecordType.BLOCK_START,
        bytes([(board_id >> 8) & 0xFF, board_id & 0xFF]) + BLOCK_START_MAGIC,
    )


def block_end_record(pad_bytes_len: int) -> str:
    """
    Create a Block End (custom) record.

    The data field of this record is ignored and can be used for padding.

    Args:
        pad_bytes_len: Number of 0xFF bytes to put in the data field

    Returns:
        The Block End record
    """
    return create_record(
        0, RecordType.BLOCK_END, _padding(pad_bytes_len, RecordType.BLOCK_END)
    )


def padded_data_record(pad_bytes_len: int) -> str:
    """
    Create a Padded Data (custom) record.

    Used only to pad a block to its fixed size; the flashing tool ignores
    its contents.

    Args:
        pad_bytes_len: Number of 0xFF bytes to put in the data field

    Returns:
        The Padded Data record
    """
    return create_record(
        0, RecordType.PADDED_DATA, _padding(pad_bytes_len, RecordType.PADDED_DATA)
    )


def record_padding_capacity() -> int:
    """
    Get how many padding bytes fit in a Block End or Padded Data record.

    Callers use this to work out how many padding records are needed to
    reach a block boundary.
    """
    return RECORD_DATA_MAX_BYTES


def convert_record_to_custom_data(line: str) -> str:
    """
    Change the record type of a record to Custom Data.

    Address and data are kept; the checksum changes with the type.

    Args:
        line: Intel HEX record line, with or without line terminator

    Returns:
        A Custom Data record with the same address and data field

    Example:
        >>> convert_record_to_custom_data(":105D3000E060E3802046FFF765FF0123A1881A4653")
        ':105D300DE060E3802046FFF765FF0123A1881A4646'
    """
    record = parse_record(line)
    logger.debug(
        f"Converting {record.get_type_name()} record at 0x{record.address:04X} "
        f"to Custom Data"
    )
    return create_record(record.address, RecordType.CUSTOM_DATA, record.data)


def _padding(pad_bytes_len: int, record_type: RecordType) -> bytes:
    """Build a padding data field; the upper bound is left to create_record()."""
    if pad_bytes_len < 0:
        raise PaddingLengthError(pad_bytes_len, record_type)
    return bytes([PADDING_BYTE]) * pad_bytes_len
