"""
Intel HEX Checksum Calculations
===============================

The checksum of a record is the least significant byte of the two's
complement of the sum of every byte before it (byte count, both address
bytes, record type and data). Adding all the bytes of a correct record,
checksum included, gives 0 modulo 256.

Decoding a record does not check its checksum. The functions in this module
let a caller verify records explicitly when it wants to.
"""

import logging
from typing import Iterable

from fathex.errors import ChecksumMismatchError
from fathex.ihex.records import Record

logger = logging.getLogger(__name__)


def calc_checksum_byte(data: Iterable[int]) -> int:
    """
    Calculate the Intel HEX checksum of a byte sequence.

    Args:
        data: The record bytes to sum (byte count, address, type, data)

    Returns:
        Checksum byte (0x00 - 0xFF)

    Example:
        >>> calc_checksum_byte(bytes([0x00, 0x00, 0x00, 0x01]))
        255
    """
    return -sum(data) & 0xFF


def verify_checksum(record: Record) -> bool:
    """
    Check a decoded record's stored checksum against its contents.

    Args:
        record: A record returned by parse_record()

    Returns:
        True if the stored checksum matches the calculated one
    """
    return calc_checksum_byte(record.content_bytes()) == record.checksum


def verify_record(line: str) -> Record:
    """
    Parse a record line and verify its checksum.

    Args:
        line: Intel HEX record line, with or without line terminator

    Returns:
        The decoded Record

    Raises:
        ChecksumMismatchError: If the stored checksum is wrong
        RecordError: Any error raised by parse_record()
    """
    from fathex.ihex.codec import parse_record

    record = parse_record(line)
    expected = calc_checksum_byte(record.content_bytes())
    if expected != record.checksum:
        logger.debug(
            f"Checksum mismatch: stored 0x{record.checksum:02X}, "
            f"calculated 0x{expected:02X}"
        )
        raise ChecksumMismatchError(
            line.rstrip("\r\n"), expected, record.checksum,
            record_type=record.record_type,
        )
    return record
