"""
Hex String and Byte Helpers
===========================

Small stateless helpers used by the record codec to move between byte
sequences and their hexadecimal text form.

All text produced here is uppercase with no separators, which is the form
Intel HEX records use on the wire. Decoding accepts either case.
"""

import re
from typing import Iterable

_HEX_RE = re.compile(r"[0-9A-Fa-f]*")

# Precomputed "00".."FF" lookup table
_BYTE_TO_HEX = tuple(f"{i:02X}" for i in range(256))


def byte_to_hex_str(value: int) -> str:
    """
    Convert a single byte to two uppercase hex digits.

    Args:
        value: Integer in the range 0-255

    Returns:
        Two-character hex string

    Raises:
        ValueError: If value does not fit in a byte

    Example:
        >>> byte_to_hex_str(0x0A)
        '0A'
    """
    if not 0 <= value <= 0xFF:
        raise ValueError(f"Value does not fit in a byte: {value}")
    return _BYTE_TO_HEX[value]


def byte_array_to_hex_str(data: bytes) -> str:
    """
    Convert a byte sequence to an uppercase hex string.

    Example:
        >>> byte_array_to_hex_str(bytes([0xC0, 0xDE]))
        'C0DE'
    """
    return "".join(_BYTE_TO_HEX[b] for b in data)


def hex_str_to_bytes(text: str) -> bytes:
    """
    Convert a hex string (no separators) to bytes.

    Args:
        text: Hex digits, upper or lower case

    Returns:
        The decoded bytes

    Raises:
        ValueError: If the length is odd or a character is not a hex digit
    """
    if len(text) % 2 != 0:
        raise ValueError(
            f"Hex string length {len(text)} is not divisible by 2: {text}"
        )
    # bytes.fromhex() skips whitespace, which is not valid inside a record
    if not _HEX_RE.fullmatch(text):
        raise ValueError(f"String contains invalid hex characters: {text}")
    return bytes.fromhex(text)


def concat_byte_arrays(arrays: Iterable[bytes]) -> bytes:
    """Concatenate byte sequences into a single bytes object."""
    result = bytearray()
    for array in arrays:
        result.extend(array)
    return bytes(result)
