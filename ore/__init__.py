"""
ORE: a toy order-revealing encoding over the byte domain [0, 255].

Each plaintext byte is encoded into a pair of tokens. A third party holding
the left token of one value and the right token of another can recover the
order of the two values without learning either plaintext, provided it
does not hold the secret key material.

This is a teaching scheme. Per-position keys are reused across every
plaintext encoded under one KeyMaterial, so right tokens leak the XOR of
their comparison vectors to an observer. Regenerate key material for any
encode that matters.

Modules:
- params: Domain constants and validation
- keys: KeyMaterial generation (keys and permutation)
- comparison: Comparator vector and signed byte conversion
- cipher: Token encoder
- encoding: Hex wire format of left and right tokens
- comparator: Token comparison
- scheme: ORE facade over a single KeyMaterial
"""

from .params import DOMAIN_SIZE
from .keys import KeyMaterial, generate_keys, generate_prp, generate_involution
from .comparison import compare_to_all
from .cipher import encrypt, decrypt, encrypt_with_keys, shuffle, encrypt_plaintext
from .encoding import (
    left_ciphertext,
    read_left_ciphertext,
    right_ciphertext,
    read_right_ciphertext,
)
from .comparator import compare
from .protocol import Ciphertext
from .scheme import ORE

__version__ = "0.1.0"
__all__ = [
    "DOMAIN_SIZE",
    "KeyMaterial",
    "generate_keys",
    "generate_prp",
    "generate_involution",
    "compare_to_all",
    "encrypt",
    "decrypt",
    "encrypt_with_keys",
    "shuffle",
    "encrypt_plaintext",
    "left_ciphertext",
    "read_left_ciphertext",
    "right_ciphertext",
    "read_right_ciphertext",
    "compare",
    "Ciphertext",
    "ORE",
]
