"""
fathex Error Hierarchy
======================

This module defines the exception hierarchy for the fathex package.
All exceptions inherit from FatHexError, allowing callers to catch all
codec-related errors with a single except clause if desired.

Exception Hierarchy
-------------------
FatHexError (base)
└── RecordError (single Intel HEX record)
    ├── AddressOutOfRangeError - address outside its bit width
    ├── PayloadTooLargeError - more than 16 data bytes
    ├── PaddingLengthError - negative padding length
    ├── InvalidRecordTypeError - type outside the known ranges
    ├── RecordTooShortError - line shorter than the minimum record
    ├── RecordTooLongError - line longer than the maximum record
    ├── MissingStartCodeError - line does not start with ':'
    │   └── NotStartingWithColonError - same condition, decoder check
    ├── OddHexLengthError - hex text cannot be split into byte pairs
    ├── InvalidHexDigitError - hex text holds a non-hex character
    ├── LengthMismatchError - decoded length disagrees with byte count
    ├── BoardIdOutOfRangeError - Block Start board ID outside 16 bits
    └── ChecksumMismatchError - stored checksum differs from calculated

Every error keeps the offending input (``value``) and, where known, the
record type, so the caller can produce a precise diagnostic or decide
whether to skip a line or abort a whole file.
"""

from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class FatHexError(Exception):
    """
    Base exception for all fathex errors.

    All exceptions in the package inherit from this class, allowing callers
    to catch every codec error with a single except clause:

        try:
            record = parse_record(line)
        except FatHexError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Record Exceptions
# =============================================================================

class RecordError(FatHexError):
    """
    Base exception for errors creating or reading a single record.

    Attributes:
        message: The error description
        value: The offending input (record line, address, payload, ...)
        record_type: The record type involved, when known
    """

    def __init__(
        self,
        message: str,
        value: object = None,
        record_type: Optional[int] = None,
    ):
        self.message = message
        self.value = value
        self.record_type = record_type
        super().__init__(message)


class AddressOutOfRangeError(RecordError):
    """
    Address does not fit in its field.

    Raised for record addresses outside 0x0000-0xFFFF and for Extended
    Linear Address inputs outside 0x00000000-0xFFFFFFFF.
    """

    def __init__(self, address: int, record_type: Optional[int] = None,
                 message: str = ""):
        if not message:
            message = f"Record ({_type_str(record_type)}) address out of range: {address}"
        super().__init__(message, value=address, record_type=record_type)


class PayloadTooLargeError(RecordError):
    """Record data has more bytes than a record can carry."""

    def __init__(self, byte_count: int, record_type: Optional[int] = None):
        super().__init__(
            f"Record ({_type_str(record_type)}) data has too many bytes ({byte_count}).",
            value=byte_count,
            record_type=record_type,
        )


class PaddingLengthError(RecordError):
    """Requested a negative number of padding bytes."""

    def __init__(self, pad_bytes_len: int, record_type: Optional[int] = None):
        super().__init__(
            f"Record ({_type_str(record_type)}) padding length cannot be negative: {pad_bytes_len}",
            value=pad_bytes_len,
            record_type=record_type,
        )


class InvalidRecordTypeError(RecordError):
    """
    Record type outside the standard (0x00-0x05) and custom (0x0A-0x0E)
    ranges.
    """

    def __init__(self, record_type: object, record: Optional[str] = None):
        self.record = record
        super().__init__(
            f"Record type '{record_type}' is not valid.",
            value=record if record is not None else record_type,
            record_type=record_type if isinstance(record_type, int) else None,
        )


class RecordTooShortError(RecordError):
    """Record line is shorter than an empty-payload record."""

    def __init__(self, record: str):
        self.record = record
        super().__init__(f"Record length too small: {record}", value=record)


class RecordTooLongError(RecordError):
    """Record line is longer than a record with a full payload."""

    def __init__(self, record: str):
        self.record = record
        super().__init__(f"Record length is too large: {record}", value=record)


class MissingStartCodeError(RecordError):
    """Record line does not begin with the ':' start code."""

    def __init__(self, record: str, message: str = ""):
        self.record = record
        if not message:
            message = f'Record does not start with a ":": {record}'
        super().__init__(message, value=record)


class NotStartingWithColonError(MissingStartCodeError):
    """
    Start code missing, as detected by the record decoder.

    The decoder checks the start code on its own before running the shared
    line validation, so callers of ``parse_record`` see this subclass while
    callers of ``validate_record`` see the base class.
    """

    def __init__(self, record: str):
        super().__init__(
            record,
            f'Could not parse Intel Hex record, it does not start with a ":": {record}',
        )


class OddHexLengthError(RecordError):
    """Hex text after the start code has an odd number of characters."""

    def __init__(self, record: str, length: int):
        self.record = record
        self.length = length
        super().__init__(
            f'Could not parse Intel Hex record "{record}": '
            f"hex string length {length} is not divisible by 2.",
            value=record,
        )


class InvalidHexDigitError(RecordError):
    """Hex text after the start code holds a non-hexadecimal character."""

    def __init__(self, record: str, reason: str = ""):
        self.record = record
        message = f'Could not parse Intel Hex record "{record}"'
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, value=record)


class LengthMismatchError(RecordError):
    """
    Decoded record length disagrees with its byte count field.

    Attributes:
        expected: Length implied by the byte count (fields + data + checksum)
        actual: Number of bytes actually decoded from the line
    """

    def __init__(self, record: str, expected: int, actual: int,
                 record_type: Optional[int] = None):
        self.record = record
        self.expected = expected
        self.actual = actual
        size = "larger" if actual > expected else "smaller"
        super().__init__(
            f'Parsed record "{record}" is {size} than indicated by the byte count.'
            f"\n\tExpected: {expected}; Length: {actual}.",
            value=record,
            record_type=record_type,
        )


class BoardIdOutOfRangeError(RecordError):
    """Board ID for a Block Start record does not fit in 16 bits."""

    def __init__(self, board_id: int):
        self.board_id = board_id
        super().__init__(
            f"Board ID out of range when creating Block Start record: {board_id}",
            value=board_id,
        )


class ChecksumMismatchError(RecordError):
    """
    Stored record checksum does not match the calculated one.

    Only raised by explicit verification; ``parse_record`` reports the
    checksum without checking it.
    """

    def __init__(self, record: str, expected: int, actual: int,
                 record_type: Optional[int] = None):
        self.record = record
        self.expected = expected
        self.actual = actual
        super().__init__(
            f'Checksum mismatch in record "{record}": '
            f"expected {expected:02X}, got {actual:02X}",
            value=record,
            record_type=record_type,
        )


def _type_str(record_type: object) -> str:
    """Format a record type for error messages."""
    if record_type is None:
        return "?"
    if isinstance(record_type, int):
        # IntEnum members print their plain number
        return str(int(record_type))
    return str(record_type)
