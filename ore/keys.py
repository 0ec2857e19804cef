"""
Key material for the ORE scheme.

A KeyMaterial is the secret pair (keys, prp):
- keys: DOMAIN_SIZE bytes, keys[i] masks comparison slot i
- prp: a permutation of [0, DOMAIN_SIZE), used to reorder slots so that a
  right token's position does not reveal the domain value it belongs to

The randomness source is passed in explicitly. Anything with
randint(a, b) and shuffle(list) works: random.Random(seed) under test,
pycryptodome's StrongRandom (OS CSPRNG) by default.

SEC: keys[i] is reused for slot i of every plaintext encoded under the same
KeyMaterial. Two right tokens XOR to the XOR of their comparison vectors.
"""

from dataclasses import dataclass
from typing import Optional, Protocol

from Crypto.Random.random import StrongRandom

from .params import DOMAIN_SIZE


class RandomSource(Protocol):
    """Source of uniform randomness consumed by the generators."""

    def randint(self, a: int, b: int) -> int:
        """Return a uniform integer in [a, b]."""
        ...

    def shuffle(self, x: list) -> None:
        """Shuffle x in place uniformly at random."""
        ...


def _source(rng: Optional[RandomSource]) -> RandomSource:
    if rng is None:
        return StrongRandom()
    return rng


def generate_keys(rng: Optional[RandomSource] = None) -> bytes:
    """
    Draw DOMAIN_SIZE independent uniform key bytes.

    Args:
        rng: Randomness source (default: OS CSPRNG)

    Returns:
        DOMAIN_SIZE bytes
    """
    rng = _source(rng)
    return bytes(rng.randint(0, DOMAIN_SIZE - 1) for _ in range(DOMAIN_SIZE))


def generate_prp(rng: Optional[RandomSource] = None) -> bytes:
    """
    Draw a uniformly random permutation of [0, DOMAIN_SIZE).

    A single shuffle of the identity sequence.

    Args:
        rng: Randomness source (default: OS CSPRNG)

    Returns:
        DOMAIN_SIZE distinct bytes
    """
    rng = _source(rng)
    order = list(range(DOMAIN_SIZE))
    rng.shuffle(order)
    return bytes(order)


def generate_involution(rng: Optional[RandomSource] = None) -> bytes:
    """
    Draw a uniformly random fixed-point-free involution of [0, DOMAIN_SIZE).

    Shuffle the identity, then swap consecutive pairs: prp[x] = y and
    prp[y] = x for each pair (x, y). DOMAIN_SIZE is even, so every point
    is paired.

    With an involution prp[prp[x]] == x, which is what lets a left token of
    one plaintext index the right token of another.

    Args:
        rng: Randomness source (default: OS CSPRNG)

    Returns:
        DOMAIN_SIZE distinct bytes with prp[prp[x]] == x
    """
    rng = _source(rng)
    order = list(range(DOMAIN_SIZE))
    rng.shuffle(order)

    prp = [0] * DOMAIN_SIZE
    for i in range(0, DOMAIN_SIZE, 2):
        x, y = order[i], order[i + 1]
        prp[x] = y
        prp[y] = x
    return bytes(prp)


def is_involution(prp: bytes) -> bool:
    """Return True if prp[prp[x]] == x for every x."""
    return all(prp[prp[x]] == x for x in range(len(prp)))


@dataclass(frozen=True)
class KeyMaterial:
    """
    Secret key material shared by every encode call in a session.

    Held immutably for the lifetime of the tokens encoded under it.
    Tokens from different KeyMaterial instances compare to garbage.
    """

    keys: bytes  # keys[i] masks comparison slot i
    prp: bytes   # slot permutation, prp[j] is the slot stored at position j

    def __post_init__(self):
        # Accept any byte sequence, store as bytes
        object.__setattr__(self, "keys", bytes(self.keys))
        object.__setattr__(self, "prp", bytes(self.prp))

        if len(self.keys) != DOMAIN_SIZE:
            raise ValueError(f"keys must be {DOMAIN_SIZE} bytes, got {len(self.keys)}")
        if len(self.prp) != DOMAIN_SIZE:
            raise ValueError(f"prp must be {DOMAIN_SIZE} bytes, got {len(self.prp)}")
        if len(set(self.prp)) != DOMAIN_SIZE:
            raise ValueError("prp must be a permutation of [0, DOMAIN_SIZE)")

    @classmethod
    def generate(
        cls, rng: Optional[RandomSource] = None, involution: bool = True
    ) -> "KeyMaterial":
        """
        Generate fresh key material.

        Args:
            rng: Randomness source (default: OS CSPRNG)
            involution: Draw prp as an involution (default). With a general
                permutation, cross-value comparisons are only correct where
                prp[prp[x]] == x.

        Returns:
            New KeyMaterial
        """
        rng = _source(rng)
        keys = generate_keys(rng)
        prp = generate_involution(rng) if involution else generate_prp(rng)
        return cls(keys=keys, prp=prp)

    @property
    def involutive(self) -> bool:
        """True if prp is its own inverse."""
        return is_involution(self.prp)

    def __repr__(self) -> str:
        # Never print secret bytes
        return f"KeyMaterial(domain={DOMAIN_SIZE}, involutive={self.involutive})"
