"""Tests for text hashing."""

from autocolor.hashing import MASK_32, murmur_hash3, text_hash


def test_known_values():
    """Pinned outputs; any change here recolors every existing label."""
    assert murmur_hash3("test") == 3137499981
    assert murmur_hash3("bug") == 1891907217
    assert murmur_hash3("Login") == 1866795939


def test_empty_string():
    assert murmur_hash3("") == 110687111


def test_deterministic():
    assert murmur_hash3("feature") == murmur_hash3("feature")
    assert text_hash("feature") == murmur_hash3("feature")


def test_unsigned_32_bit():
    for text in ["", "a", "test", "a much longer label than usual", "éè", "\U0001f600"]:
        value = murmur_hash3(text)
        assert 0 <= value <= MASK_32


def test_astral_characters_hash_as_surrogate_pairs():
    """Characters outside the BMP count as two UTF-16 code units."""
    assert murmur_hash3("\U0001f600") == murmur_hash3("\ud83d\ude00")
    assert murmur_hash3("\U0001f600") != murmur_hash3("\U0001f601")


def test_length_is_mixed_in():
    """Leading NULs vanish in the fold, but the length still differs."""
    assert murmur_hash3("\x00a") != murmur_hash3("a")


def test_only_last_four_characters_are_folded():
    """The fold keeps the low 32 bits, so long labels sharing a tail and length collide."""
    assert murmur_hash3("xxxxabcd") == murmur_hash3("yyyyabcd")
    assert murmur_hash3("xxxxabcd") != murmur_hash3("xxxabcd")
