"""
Messages for the ORE scheme.

These are what leave the key holder: everything a comparing party sees.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Ciphertext:
    """
    Encoded plaintext.

    A comparing party pairs the left token of one ciphertext with the right
    token of another.
    """

    left: str   # 4 hex chars: offset || key
    right: str  # 512 hex chars: shuffled masked comparator vector
