"""
Token encoder for the ORE scheme.

Encoding a plaintext p under KeyMaterial (keys, prp):
1. c = compare_to_all(p)                 # c[i] = sign(i - p)
2. enc[i] = c[i] XOR keys[i]             # -1 stored as 255
3. shuffled[j] = enc[prp[j]]             # permutation by lookup
4. left = (prp[p], keys[p]), right = shuffled, both hex encoded
"""

from typing import Sequence

from .comparison import compare_to_all, to_byte
from .encoding import left_ciphertext, right_ciphertext
from .params import check_domain_value
from .utils import xor_bytes


def encrypt(value: int, key: int) -> int:
    """
    Mask a single byte: value XOR key.

    Signed values are stored as bytes first, so encrypt(-1, k) == 255 ^ k.
    """
    return to_byte(value) ^ check_domain_value(key, "key")


def decrypt(ciphertext: int, key: int) -> int:
    """Unmask a single byte. XOR is self-inverse, so this is encrypt."""
    return encrypt(ciphertext, key)


def encrypt_with_keys(comparisons: Sequence[int], keys: bytes) -> bytes:
    """
    Position-wise encryption of a comparator vector.

    Args:
        comparisons: Signed comparison values
        keys: Key bytes, same length as comparisons

    Returns:
        enc with enc[i] = encrypt(comparisons[i], keys[i])
    """
    return xor_bytes(bytes(to_byte(c) for c in comparisons), bytes(keys))


def shuffle(prp: Sequence[int], array: Sequence[int]) -> bytes:
    """
    Reorder array by lookup: result[j] = array[prp[j]].

    Every entry of array appears exactly once when prp is a permutation.
    """
    return bytes(array[idx] for idx in prp)


def encrypt_plaintext(keys: bytes, prp: bytes, plaintext: int) -> tuple[str, str]:
    """
    Encode plaintext into its (left, right) token pair.

    Args:
        keys: Per-slot key bytes
        prp: Slot permutation
        plaintext: Domain value

    Returns:
        Tuple of (left_token_hex, right_token_hex)
    """
    comparisons = compare_to_all(plaintext)
    encryptions = encrypt_with_keys(comparisons, keys)
    shuffled = shuffle(prp, encryptions)
    return (
        left_ciphertext(keys[plaintext], prp[plaintext]),
        right_ciphertext(shuffled),
    )
