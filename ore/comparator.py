"""
Comparison of ORE tokens.

compare(left(a), right(b)) reads slot offset = prp[a] of b's shuffled vector
and unmasks it with keys[a]. Since shuffled_b[j] = enc_b[prp[j]], the slot
read is enc_b[prp[prp[a]]]:
- prp an involution: slot a, result is sign(a - b)
- general prp: only meaningful where prp[prp[a]] == a
"""

from .comparison import from_byte
from .encoding import read_left_ciphertext, read_right_ciphertext


def compare(left_token: str, right_token: str) -> int:
    """
    Recover a three-way comparison from a left and a right token.

    Args:
        left_token: Hex left token of value a
        right_token: Hex right token of value b

    Returns:
        -1, 0 or +1 when both tokens share key material (sign(a - b) under
        an involutive prp). Arbitrary int8 otherwise.

    Raises:
        ValueError: If either token is malformed
        IndexError: If the offset is past the end of the right token
    """
    offset, key = read_left_ciphertext(left_token)
    right = read_right_ciphertext(right_token)

    if offset >= len(right):
        raise IndexError(
            f"Offset {offset} out of range for right token of {len(right)} bytes"
        )
    return from_byte(right[offset] ^ key)
