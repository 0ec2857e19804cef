from functools import cmp_to_key
from typing import Iterable, Optional

from .cipher import encrypt_plaintext
from .comparator import compare
from .keys import KeyMaterial, RandomSource
from .protocol import Ciphertext


class ORE:
    """
    Order-revealing encoder over a single KeyMaterial.

    The key holder encrypts; anyone holding ciphertexts can compare and
    sort them without the key material.
    """

    def __init__(
        self,
        key_material: Optional[KeyMaterial] = None,
        rng: Optional[RandomSource] = None,
    ):
        """
        Initialize encoder.

        Args:
            key_material: Existing key material. If None, generates fresh
                key material with an involutive prp.
            rng: Randomness source for key generation (default: OS CSPRNG)
        """
        self._rng = rng
        if key_material is None:
            key_material = KeyMaterial.generate(rng)
        self.key_material = key_material

    def encrypt(self, plaintext: int) -> Ciphertext:
        """
        Encrypt a domain value.

        Args:
            plaintext: Value in [0, 256)

        Returns:
            Ciphertext holding the left and right tokens
        """
        left, right = encrypt_plaintext(
            self.key_material.keys, self.key_material.prp, plaintext
        )
        return Ciphertext(left=left, right=right)

    def encrypt_many(self, plaintexts: Iterable[int]) -> list[Ciphertext]:
        """Encrypt each plaintext in order."""
        return [self.encrypt(p) for p in plaintexts]

    @staticmethod
    def compare(a: Ciphertext, b: Ciphertext) -> int:
        """
        Compare two ciphertexts: sign(a - b) for their plaintexts.

        Uses a's left token against b's right token. No key material needed.
        """
        return compare(a.left, b.right)

    @classmethod
    def sort(cls, ciphertexts: Iterable[Ciphertext]) -> list[Ciphertext]:
        """
        Order ciphertexts by plaintext using token comparisons only.

        Only meaningful for ciphertexts sharing one involutive KeyMaterial.
        """
        return sorted(ciphertexts, key=cmp_to_key(cls.compare))

    def regenerate_keys(self, involution: bool = True) -> KeyMaterial:
        """
        Replace the key material with a fresh one.

        Ciphertexts produced before this call can no longer be compared with
        ciphertexts produced after it.

        Returns:
            The new KeyMaterial
        """
        self.key_material = KeyMaterial.generate(self._rng, involution=involution)
        return self.key_material

    def __repr__(self) -> str:
        return f"ORE({self.key_material!r})"
