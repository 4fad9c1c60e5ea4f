"""
Intel HEX Records for Fat Binaries
==================================

This module encodes and decodes single Intel HEX records, including the
custom record types used to pack several firmware images into one HEX
stream (a "fat binary").

This module provides:
- **RecordType**: Standard and custom record type values
- **Record**: The decoded fields of one record
- **Codec**: create_record(), parse_record(), get_record_type(),
  validate_record()
- **Builders**: End Of File, Extended Linear Address, Block Start,
  Block End, Padded Data and Custom Data records
- **Checksum utilities**: Calculate and (optionally) verify checksums

Quick Start
-----------
Creating records:

    >>> from fathex.ihex import create_record, RecordType, block_start_record
    >>> create_record(0, RecordType.END_OF_FILE, b"")
    ':00000001FF'
    >>> block_start_record(0x9901)
    ':0400000A9901C0DEBA'

Reading a record:

    >>> from fathex.ihex import parse_record, verify_checksum
    >>> record = parse_record(":04F870000000000094")
    >>> hex(record.address), record.data
    ('0xf870', b'\\x00\\x00\\x00\\x00')
    >>> verify_checksum(record)
    True

Each record stands alone. Splitting a file into lines and joining records
with line terminators is left to the caller (ihex_to_record_strs() helps
with the former).
"""

# =============================================================================
# Public API Exports
# =============================================================================

# Record type definitions and constants
from fathex.ihex.records import (
    RecordType,
    Record,
    RECORD_DATA_MAX_BYTES,
    MIN_RECORD_STR_LEN,
    MAX_RECORD_STR_LEN,
)

# Checksum utilities
from fathex.ihex.checksum import (
    calc_checksum_byte,
    verify_checksum,
    verify_record,
)

# Encoding and decoding
from fathex.ihex.codec import (
    create_record,
    validate_record,
    get_record_type,
    parse_record,
    ihex_to_record_strs,
)

# Convenience constructors
from fathex.ihex.builders import (
    end_of_file_record,
    ext_lin_address_record,
    block_start_record,
    block_end_record,
    padded_data_record,
    record_padding_capacity,
    convert_record_to_custom_data,
)

__all__ = [
    # Records
    "RecordType",
    "Record",
    "RECORD_DATA_MAX_BYTES",
    "MIN_RECORD_STR_LEN",
    "MAX_RECORD_STR_LEN",
    # Checksum
    "calc_checksum_byte",
    "verify_checksum",
    "verify_record",
    # Codec
    "create_record",
    "validate_record",
    "get_record_type",
    "parse_record",
    "ihex_to_record_strs",
    # Builders
    "end_of_file_record",
    "ext_lin_address_record",
    "block_start_record",
    "block_end_record",
    "padded_data_record",
    "record_padding_capacity",
    "convert_record_to_custom_data",
]
