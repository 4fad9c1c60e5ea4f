"""
Intel HEX Record Codec
======================

This module converts between the fields of an Intel HEX record and its
text form, one record at a time.

Encoding
--------
create_record() takes an address, a record type and up to 16 data bytes
and returns the record line (uppercase, no line terminator):

    >>> create_record(0, RecordType.END_OF_FILE, b"")
    ':00000001FF'

Decoding
--------
parse_record() splits a line back into a Record. Line terminators at the
end are ignored. The checksum is reported but NOT verified; use
verify_checksum() or verify_record() from fathex.ihex.checksum for that.

    >>> record = parse_record(":0400000A9901C0DEBA")
    >>> record.record_type
    <RecordType.BLOCK_START: 10>

Errors
------
All failures raise a subclass of fathex.errors.RecordError. Nothing is
recovered here: whether a bad line is skipped or aborts a file is up to
the caller reading the file.
"""

import logging

from fathex.errors import (
    AddressOutOfRangeError,
    InvalidHexDigitError,
    InvalidRecordTypeError,
    LengthMismatchError,
    MissingStartCodeError,
    NotStartingWithColonError,
    OddHexLengthError,
    PayloadTooLargeError,
    RecordTooLongError,
    RecordTooShortError,
)
from fathex.ihex.checksum import calc_checksum_byte
from fathex.ihex.records import (
    ADDRESS_STR_LEN,
    BYTE_COUNT_STR_LEN,
    CHECKSUM_STR_LEN,
    MAX_ADDRESS,
    MAX_RECORD_STR_LEN,
    MIN_RECORD_STR_LEN,
    RECORD_DATA_MAX_BYTES,
    RECORD_TYPE_STR_LEN,
    RECORD_TYPE_STR_START,
    START_CODE,
    Record,
    RecordType,
)
from fathex.utils import (
    byte_array_to_hex_str,
    byte_to_hex_str,
    concat_byte_arrays,
    hex_str_to_bytes,
)

logger = logging.getLogger(__name__)

LINE_TERMINATORS = "\r\n"


# =============================================================================
# Encoding
# =============================================================================

def create_record(address: int, record_type: int, data: bytes) -> str:
    """
    Create an Intel HEX record with a standard or custom record type.

    Args:
        address: The two least significant bytes of the data address
        record_type: One of the standard types or any of the custom types
            used to form fat binaries
        data: The bytes for the data field (0 to 16 bytes)

    Returns:
        The record line, without line terminator

    Raises:
        AddressOutOfRangeError: If address is not in 0x0000-0xFFFF
        PayloadTooLargeError: If data has more than 16 bytes
        InvalidRecordTypeError: If record_type is not a valid type

    Example:
        >>> create_record(0x4290, RecordType.DATA, bytes.fromhex("64270020"))
        ':04429000642700207F'
    """
    if address < 0 or address > MAX_ADDRESS:
        raise AddressOutOfRangeError(address, record_type)
    data = bytes(data)
    byte_count = len(data)
    if byte_count > RECORD_DATA_MAX_BYTES:
        raise PayloadTooLargeError(byte_count, record_type)
    if not RecordType.is_valid(record_type):
        raise InvalidRecordTypeError(record_type)

    record_content = concat_byte_arrays([
        bytes([byte_count]),
        bytes([address >> 8, address & 0xFF]),
        bytes([record_type]),
        data,
    ])
    content_str = byte_array_to_hex_str(record_content)
    checksum_str = byte_to_hex_str(calc_checksum_byte(record_content))
    return f"{START_CODE}{content_str}{checksum_str}"


# =============================================================================
# Validation
# =============================================================================

def validate_record(line: str) -> None:
    """
    Check that a record line has a valid length and starts with a colon.

    Trailing line terminators are ignored.

    Args:
        line: Single Intel HEX record line

    Raises:
        RecordTooShortError: If the line is shorter than an empty record
        RecordTooLongError: If the line is longer than a 16-byte record
        MissingStartCodeError: If the line does not start with ':'
    """
    record_str = _check_record_length(line)
    if record_str[0] != START_CODE:
        raise MissingStartCodeError(record_str)


def _check_record_length(line: str) -> str:
    """Check the line length bounds and return the line without terminators."""
    record_str = line.rstrip(LINE_TERMINATORS)
    if len(record_str) < MIN_RECORD_STR_LEN:
        raise RecordTooShortError(record_str)
    if len(record_str) > MAX_RECORD_STR_LEN:
        raise RecordTooLongError(record_str)
    return record_str


# =============================================================================
# Decoding
# =============================================================================

def get_record_type(line: str) -> RecordType:
    """
    Read the record type of a record line without decoding the rest.

    Neither the byte count nor the checksum are checked.

    Args:
        line: Intel HEX record line, with or without line terminator

    Returns:
        The RecordType

    Raises:
        InvalidRecordTypeError: If the type field is not a valid type
        RecordError: Any error raised by validate_record()
    """
    validate_record(line)
    type_str = line[RECORD_TYPE_STR_START:RECORD_TYPE_STR_START + RECORD_TYPE_STR_LEN]
    try:
        type_byte = hex_str_to_bytes(type_str)[0]
    except ValueError:
        raise InvalidRecordTypeError(type_str, record=line.rstrip(LINE_TERMINATORS))
    if not RecordType.is_valid(type_byte):
        raise InvalidRecordTypeError(type_str, record=line.rstrip(LINE_TERMINATORS))
    return RecordType(type_byte)


def parse_record(line: str) -> Record:
    """
    Parse an Intel HEX record line into its fields.

    The checksum field is returned as stored; it is not compared with the
    record contents.

    Args:
        line: Intel HEX record line, with or without line terminator

    Returns:
        New Record with the decoded fields

    Raises:
        RecordTooShortError: If the line is shorter than an empty record
        RecordTooLongError: If the line is longer than a 16-byte record
        NotStartingWithColonError: If the line does not start with ':'
        OddHexLengthError: If the hex digits do not form whole bytes
        InvalidHexDigitError: If the line holds a non-hex character
        LengthMismatchError: If the line length disagrees with the byte count
        InvalidRecordTypeError: If the type field is not a valid type
    """
    record_str = _check_record_length(line)
    if record_str[0] != START_CODE:
        raise NotStartingWithColonError(record_str)

    hex_str = record_str[len(START_CODE):]
    if len(hex_str) % 2 != 0:
        logger.debug(f"Odd hex length ({len(hex_str)}) in record {record_str}")
        raise OddHexLengthError(record_str, len(hex_str))
    try:
        record_bytes = hex_str_to_bytes(hex_str)
    except ValueError as e:
        logger.debug(f"Invalid hex in record {record_str}: {e}")
        raise InvalidHexDigitError(record_str, str(e)) from e

    byte_count_index = 0
    byte_count = record_bytes[byte_count_index]

    address_index = byte_count_index + BYTE_COUNT_STR_LEN // 2
    address = (record_bytes[address_index] << 8) + record_bytes[address_index + 1]

    record_type_index = address_index + ADDRESS_STR_LEN // 2
    type_byte = record_bytes[record_type_index]

    data_index = record_type_index + RECORD_TYPE_STR_LEN // 2
    checksum_index = data_index + byte_count
    total_length = checksum_index + CHECKSUM_STR_LEN // 2
    if len(record_bytes) != total_length:
        logger.debug(
            f"Byte count mismatch in record {record_str}: "
            f"expected {total_length} bytes, got {len(record_bytes)}"
        )
        raise LengthMismatchError(
            record_str, total_length, len(record_bytes), record_type=type_byte
        )

    if not RecordType.is_valid(type_byte):
        raise InvalidRecordTypeError(f"{type_byte:02X}", record=record_str)

    return Record(
        byte_count=byte_count,
        address=address,
        record_type=RecordType(type_byte),
        data=record_bytes[data_index:checksum_index],
        checksum=record_bytes[checksum_index],
    )


# =============================================================================
# Splitting
# =============================================================================

def ihex_to_record_strs(ihex_str: str) -> list[str]:
    """
    Separate the text of an Intel HEX file into record lines.

    Carriage returns are removed and empty lines dropped. The lines are not
    validated.

    Args:
        ihex_str: Intel HEX file contents as a string

    Returns:
        List of record lines without terminators

    Example:
        >>> ihex_to_record_strs(":0400000A9901C0DEBA\\r\\n\\r\\n:00000001FF\\r\\n")
        [':0400000A9901C0DEBA', ':00000001FF']
    """
    lines = ihex_str.replace("\r", "").split("\n")
    return [line for line in lines if line]
