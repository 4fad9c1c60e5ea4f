"""
Intel HEX Record Definitions
============================

This module defines the record types and the decoded record structure for
Intel HEX files, including the custom record types used to build fat
binaries (several firmware images packed into a single HEX stream).

Record Format
-------------
Every record is one line of text:

    :BBAAAATTDD...DDCC

    :       Start code
    BB      Byte count, number of data bytes (2 hex digits)
    AAAA    Address, big-endian 16-bit offset (4 hex digits)
    TT      Record type (2 hex digits)
    DD...   Data, BB bytes (2*BB hex digits)
    CC      Checksum, two's complement of the sum of all previous bytes

Record Types
------------
Standard:
- $00: Data
- $01: End Of File
- $02: Extended Segment Address
- $03: Start Segment Address
- $04: Extended Linear Address (upper 16 bits of a 32-bit address)
- $05: Start Linear Address

Custom (fat binaries):
- $0A: Block Start (board ID + C0DE magic)
- $0B: Block End (data field is padding)
- $0C: Padded Data (padding, ignored by the flashing tool)
- $0D: Custom Data (data for a different target)
- $0E: Other Data

Reference
---------
- Intel Hexadecimal Object File Format Specification, Rev. A (1988)
"""

from dataclasses import dataclass
from enum import IntEnum


# =============================================================================
# Field Constants
# =============================================================================

# The format allows up to 0xFF data bytes per record; 16 and 32 are the
# usual sizes and only 16 is supported here
RECORD_DATA_MAX_BYTES = 16

START_CODE = ":"
START_CODE_STR_LEN = len(START_CODE)
BYTE_COUNT_STR_LEN = 2
ADDRESS_STR_LEN = 4
RECORD_TYPE_STR_LEN = 2
DATA_STR_LEN_MIN = 0
CHECKSUM_STR_LEN = 2

MIN_RECORD_STR_LEN = (
    START_CODE_STR_LEN
    + BYTE_COUNT_STR_LEN
    + ADDRESS_STR_LEN
    + RECORD_TYPE_STR_LEN
    + DATA_STR_LEN_MIN
    + CHECKSUM_STR_LEN
)
MAX_RECORD_STR_LEN = (
    START_CODE_STR_LEN
    + BYTE_COUNT_STR_LEN
    + ADDRESS_STR_LEN
    + RECORD_TYPE_STR_LEN
    + RECORD_DATA_MAX_BYTES * 2
    + CHECKSUM_STR_LEN
)

# Offset of the record type digits within a line
RECORD_TYPE_STR_START = START_CODE_STR_LEN + BYTE_COUNT_STR_LEN + ADDRESS_STR_LEN

MAX_ADDRESS = 0xFFFF


# =============================================================================
# Enumeration Types
# =============================================================================

class RecordType(IntEnum):
    """
    Values for the Record Type field, including the fat binary custom types.

    The valid values form two contiguous ranges ($00-$05 and $0A-$0E), so
    validity is checked with range comparisons rather than a member lookup.
    """
    DATA = 0x00
    END_OF_FILE = 0x01
    EXTENDED_SEGMENT_ADDRESS = 0x02
    START_SEGMENT_ADDRESS = 0x03
    EXTENDED_LINEAR_ADDRESS = 0x04
    START_LINEAR_ADDRESS = 0x05
    BLOCK_START = 0x0A
    BLOCK_END = 0x0B
    PADDED_DATA = 0x0C
    CUSTOM_DATA = 0x0D
    OTHER_DATA = 0x0E

    @classmethod
    def is_valid(cls, type_byte: object) -> bool:
        """Check if a value is a standard or custom record type."""
        if not isinstance(type_byte, int) or isinstance(type_byte, bool):
            return False
        return (
            cls.DATA <= type_byte <= cls.START_LINEAR_ADDRESS
            or cls.BLOCK_START <= type_byte <= cls.OTHER_DATA
        )

    @classmethod
    def is_custom(cls, type_byte: int) -> bool:
        """Check if a value is one of the fat binary custom types."""
        return cls.BLOCK_START <= type_byte <= cls.OTHER_DATA

    @classmethod
    def get_name(cls, type_byte: int) -> str:
        """Get a human-readable name for a record type."""
        names = {
            0x00: "Data",
            0x01: "End Of File",
            0x02: "Extended Segment Address",
            0x03: "Start Segment Address",
            0x04: "Extended Linear Address",
            0x05: "Start Linear Address",
            0x0A: "Block Start",
            0x0B: "Block End",
            0x0C: "Padded Data",
            0x0D: "Custom Data",
            0x0E: "Other Data",
        }
        if type_byte in names:
            return names[type_byte]
        return f"Unknown (0x{type_byte:02X})"


# =============================================================================
# Decoded Record
# =============================================================================

@dataclass(frozen=True)
class Record:
    """
    The fields of a single Intel HEX record.

    Records are plain values: two records with the same fields are equal.

    Attributes:
        byte_count: Declared number of data bytes (equals len(data))
        address: 16-bit address offset
        record_type: The record type
        data: Data field bytes
        checksum: Checksum byte as stored in the record
    """
    byte_count: int
    address: int
    record_type: RecordType
    data: bytes
    checksum: int

    def content_bytes(self) -> bytes:
        """Get the bytes covered by the checksum, in wire order."""
        return bytes([
            self.byte_count,
            (self.address >> 8) & 0xFF,
            self.address & 0xFF,
            self.record_type,
        ]) + self.data

    def get_type_name(self) -> str:
        """Get a human-readable name for this record type."""
        return RecordType.get_name(self.record_type)
