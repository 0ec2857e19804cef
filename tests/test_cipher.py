"""Tests for the ORE token encoder."""

import random

import pytest
from ore.cipher import encrypt, decrypt, encrypt_with_keys, shuffle, encrypt_plaintext
from ore.comparison import compare_to_all
from ore.encoding import read_left_ciphertext, read_right_ciphertext
from ore.keys import generate_keys, generate_prp


IDENTITY = bytes(range(256))


class TestEncryptDecrypt:
    """Tests for single-byte encrypt/decrypt."""

    def test_xor_involution(self):
        """decrypt(encrypt(p, k), k) == p for every byte."""
        for p in range(256):
            for k in (0, 1, 7, 128, 255):
                assert decrypt(encrypt(p, k), k) == p

    def test_signed_input(self):
        """-1 is stored as 255 before masking."""
        assert encrypt(-1, 0) == 255
        assert encrypt(-1, 255) == 0
        assert encrypt(0, 7) == 7
        assert encrypt(1, 7) == 6

    def test_same_transform(self):
        assert encrypt(0x5A, 0x3C) == decrypt(0x5A, 0x3C)

    def test_bad_key(self):
        with pytest.raises(ValueError):
            encrypt(0, 256)


class TestEncryptWithKeys:
    """Tests for encrypt_with_keys."""

    def test_positionwise(self):
        keys = generate_keys(random.Random(2))
        comparisons = compare_to_all(77)
        enc = encrypt_with_keys(comparisons, keys)
        assert len(enc) == 256
        for i in range(256):
            assert enc[i] == encrypt(comparisons[i], keys[i])

    def test_zero_keys(self):
        """With zero keys the output is the comparator vector as bytes."""
        enc = encrypt_with_keys(compare_to_all(3), bytes(256))
        assert list(enc) == [255, 255, 255, 0] + [1] * 252

    def test_length_mismatch(self):
        with pytest.raises(ValueError):
            encrypt_with_keys([0, 1], bytes(3))


class TestShuffle:
    """Tests for shuffle."""

    def test_lookup(self):
        """result[j] = array[prp[j]]."""
        prp = [2, 0, 1]
        assert shuffle(prp, [10, 20, 30]) == bytes([30, 10, 20])

    def test_identity(self):
        data = bytes(random.Random(4).randrange(256) for _ in range(256))
        assert shuffle(IDENTITY, data) == data

    def test_preserves_entries(self):
        prp = generate_prp(random.Random(9))
        assert sorted(shuffle(prp, IDENTITY)) == list(range(256))
        assert shuffle(prp, IDENTITY) == prp


class TestEncryptPlaintext:
    """Tests for encrypt_plaintext."""

    def test_token_shapes(self):
        rng = random.Random(1)
        keys, prp = generate_keys(rng), generate_prp(rng)
        left, right = encrypt_plaintext(keys, prp, 42)
        assert len(left) == 4
        assert len(right) == 512
        assert left == left.lower()
        assert right == right.lower()

    def test_left_token_contents(self):
        rng = random.Random(1)
        keys, prp = generate_keys(rng), generate_prp(rng)
        left, _ = encrypt_plaintext(keys, prp, 42)
        assert read_left_ciphertext(left) == [prp[42], keys[42]]

    def test_right_token_contents(self):
        rng = random.Random(1)
        keys, prp = generate_keys(rng), generate_prp(rng)
        _, right = encrypt_plaintext(keys, prp, 42)
        enc = encrypt_with_keys(compare_to_all(42), keys)
        assert read_right_ciphertext(right) == [enc[prp[j]] for j in range(256)]

    def test_concrete_scenario(self):
        """Constant keys and identity prp give a readable token pair."""
        left, right = encrypt_plaintext(bytes([7] * 256), IDENTITY, 5)
        assert left == "0507"
        right_bytes = read_right_ciphertext(right)
        assert right_bytes[5] == encrypt(0, 7) == 7
        assert right_bytes[:5] == [255 ^ 7] * 5
        assert right_bytes[6:] == [1 ^ 7] * 250

    def test_deterministic(self):
        rng = random.Random(8)
        keys, prp = generate_keys(rng), generate_prp(rng)
        assert encrypt_plaintext(keys, prp, 200) == encrypt_plaintext(keys, prp, 200)

    def test_out_of_range(self):
        with pytest.raises(ValueError):
            encrypt_plaintext(bytes(256), IDENTITY, 256)
        with pytest.raises(ValueError):
            encrypt_plaintext(bytes(256), IDENTITY, -1)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
