"""
Comparator vector and signed byte conversion.

A comparison result is one of -1 (less), 0 (equal), +1 (greater). Before it
can be masked with a key byte it is stored as an unsigned byte, with -1
wrapping to 255. Decrypted results are read back as signed int8.
"""

from .params import DOMAIN_SIZE, check_domain_value


def to_byte(value: int) -> int:
    """Reinterpret a signed int8 as an unsigned byte (-1 -> 255)."""
    if value < -128 or value > 255:
        raise ValueError(f"Value {value} does not fit in a byte")
    return value & 0xFF


def from_byte(byte: int) -> int:
    """Reinterpret an unsigned byte as a signed int8 (255 -> -1)."""
    check_domain_value(byte, "byte")
    return byte - 256 if byte >= 128 else byte


def compare_to_all(plaintext: int) -> list[int]:
    """
    Three-way comparison of every domain value against plaintext.

    Entry i is -1 if i < plaintext, 0 if i == plaintext, +1 if i > plaintext.

    Args:
        plaintext: Domain value

    Returns:
        DOMAIN_SIZE signed values, index-aligned with the domain
    """
    check_domain_value(plaintext, "plaintext")
    return [(other > plaintext) - (other < plaintext) for other in range(DOMAIN_SIZE)]
