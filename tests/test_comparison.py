"""Tests for the comparator vector builder."""

import pytest
from ore.comparison import compare_to_all, to_byte, from_byte


class TestCompareToAll:
    """Tests for compare_to_all."""

    def test_length(self):
        assert len(compare_to_all(0)) == 256

    def test_self_is_equal(self):
        """A value compares equal to itself."""
        for p in range(256):
            assert compare_to_all(p)[p] == 0

    def test_antisymmetry(self):
        """a < b: b's vector says a is less, a's vector says b is greater."""
        for a, b in [(0, 1), (0, 255), (17, 200), (128, 129), (254, 255)]:
            assert compare_to_all(b)[a] == -1
            assert compare_to_all(a)[b] == 1

    def test_shape(self):
        """-1 below the plaintext, +1 above."""
        c = compare_to_all(100)
        assert c[:100] == [-1] * 100
        assert c[100] == 0
        assert c[101:] == [1] * 155

    def test_extremes(self):
        assert compare_to_all(0) == [0] + [1] * 255
        assert compare_to_all(255) == [-1] * 255 + [0]

    def test_deterministic(self):
        assert compare_to_all(42) == compare_to_all(42)

    def test_out_of_range(self):
        with pytest.raises(ValueError):
            compare_to_all(-1)
        with pytest.raises(ValueError):
            compare_to_all(256)


class TestByteConversion:
    """Tests for signed/unsigned byte reinterpretation."""

    def test_to_byte(self):
        assert to_byte(-1) == 255
        assert to_byte(0) == 0
        assert to_byte(1) == 1

    def test_from_byte(self):
        assert from_byte(255) == -1
        assert from_byte(0) == 0
        assert from_byte(1) == 1
        assert from_byte(128) == -128
        assert from_byte(127) == 127

    def test_inverse(self):
        for value in (-1, 0, 1):
            assert from_byte(to_byte(value)) == value

    def test_errors(self):
        with pytest.raises(ValueError):
            to_byte(256)
        with pytest.raises(ValueError):
            to_byte(-129)
        with pytest.raises(ValueError):
            from_byte(256)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
