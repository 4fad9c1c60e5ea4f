"""
fathex - Intel HEX Record Codec with Fat Binary Support
=======================================================

This package encodes and decodes Intel HEX records, the text format used
by most firmware flashing tools, together with a set of custom record
types that allow several firmware images to live in a single HEX stream
("fat binaries").

Main Components
---------------
- **ihex**: Record codec
    Creates record lines from address, type and data, and parses them back

- **utils**: Hex string helpers
    Conversions between byte sequences and uppercase hex text

- **cli**: Command-line tool (ihexrec)
    Creates and inspects single records from the shell

Quick Start
-----------
    >>> from fathex import create_record, parse_record, RecordType
    >>> line = create_record(0xF870, RecordType.DATA, bytes(4))
    >>> line
    ':04F870000000000094'
    >>> parse_record(line).address
    63600

Or use the command-line tool:
    $ ihexrec create 0xF870 data 00000000
    $ ihexrec parse :04F870000000000094

Version History
---------------
1.0.0 - Initial release with record codec, fat binary builders and ihexrec
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from fathex.errors import (
    FatHexError,
    RecordError,
    AddressOutOfRangeError,
    PayloadTooLargeError,
    PaddingLengthError,
    InvalidRecordTypeError,
    RecordTooShortError,
    RecordTooLongError,
    MissingStartCodeError,
    NotStartingWithColonError,
    OddHexLengthError,
    InvalidHexDigitError,
    LengthMismatchError,
    BoardIdOutOfRangeError,
    ChecksumMismatchError,
)

from fathex.ihex import (
    RecordType,
    Record,
    calc_checksum_byte,
    verify_checksum,
    verify_record,
    create_record,
    validate_record,
    get_record_type,
    parse_record,
    ihex_to_record_strs,
    end_of_file_record,
    ext_lin_address_record,
    block_start_record,
    block_end_record,
    padded_data_record,
    record_padding_capacity,
    convert_record_to_custom_data,
)

__all__ = [
    "__version__",
    # Errors
    "FatHexError",
    "RecordError",
    "AddressOutOfRangeError",
    "PayloadTooLargeError",
    "PaddingLengthError",
    "InvalidRecordTypeError",
    "RecordTooShortError",
    "RecordTooLongError",
    "MissingStartCodeError",
    "NotStartingWithColonError",
    "OddHexLengthError",
    "InvalidHexDigitError",
    "LengthMismatchError",
    "BoardIdOutOfRangeError",
    "ChecksumMismatchError",
    # Records
    "RecordType",
    "Record",
    # Codec
    "calc_checksum_byte",
    "verify_checksum",
    "verify_record",
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
