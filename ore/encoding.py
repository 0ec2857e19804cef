"""
Hex wire format for ORE tokens.

- Left token: bytes [offset, key] as 4 lowercase hex characters
- Right token: any byte sequence (DOMAIN_SIZE bytes in practice) as
  2 * len lowercase hex characters, most significant nibble first
"""

import string
from typing import Sequence

from .params import LEFT_TOKEN_SIZE, check_domain_value

_HEX_DIGITS = frozenset(string.hexdigits)


def _decode_hex(hex_string: str) -> list[int]:
    """Strictly decode a hex string to a list of byte values."""
    if not isinstance(hex_string, str):
        raise ValueError(f"Token must be a str, got {type(hex_string).__name__}")
    if len(hex_string) % 2 != 0:
        raise ValueError(f"Odd-length hex string ({len(hex_string)} characters)")
    # bytes.fromhex tolerates whitespace, the wire format does not
    bad = set(hex_string) - _HEX_DIGITS
    if bad:
        raise ValueError(f"Non-hex characters in token: {sorted(bad)!r}")
    return list(bytes.fromhex(hex_string))


def left_ciphertext(key: int, offset: int) -> str:
    """
    Serialize a left token.

    Note the argument order (key, offset) differs from the byte order
    (offset, key).
    """
    check_domain_value(key, "key")
    check_domain_value(offset, "offset")
    return bytes([offset, key]).hex()


def read_left_ciphertext(hex_string: str) -> list[int]:
    """
    Parse a left token.

    Returns:
        [offset, key]

    Raises:
        ValueError: If the token is malformed or not exactly 2 bytes
    """
    data = _decode_hex(hex_string)
    if len(data) != LEFT_TOKEN_SIZE:
        raise ValueError(
            f"Left token must be {LEFT_TOKEN_SIZE} bytes, got {len(data)}"
        )
    return data


def right_ciphertext(encryptions: Sequence[int]) -> str:
    """Serialize a right token."""
    return bytes(encryptions).hex()


def read_right_ciphertext(hex_string: str) -> list[int]:
    """Parse a right token into its byte values."""
    return _decode_hex(hex_string)
