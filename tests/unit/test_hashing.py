"""
Module 02 - Hashing Unit Tests
Tests for merkle_engine/crypto/hashing.py

Tests:
- digest primitives and the name registry
- lexicographic comparison and canonical pairing
- to_hex/from_hex
"""
import hashlib
import pytest

from merkle_engine.crypto.hashing import (
    HashFunction,
    HashlibHash,
    Sha256Hash,
    available_hash_algorithms,
    get_hash_function,
    sha256,
    compare_bytes,
    concat_bytes,
    canonical_pair,
    to_hex,
    from_hex,
)
from merkle_engine.schemas.errors import ErrorCodes, UnsupportedHashAlgorithmError


class TestSha256:
    """Tests for sha256() and Sha256Hash."""

    def test_sha256_known_value(self):
        """sha256 matches hashlib for a known input."""
        assert sha256(b"hello").hex() == (
            "2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824"
        )

    def test_sha256_hash_matches_function(self):
        hash_fn = Sha256Hash()
        assert hash_fn.hash(b"data") == sha256(b"data")
        assert hash_fn(b"data") == sha256(b"data")
        assert hash_fn.digest_size == 32
        assert hash_fn.name == "sha256"

    def test_sha256_deterministic(self):
        """Same input gives the same digest."""
        assert Sha256Hash().hash(b"x" * 1000) == Sha256Hash().hash(b"x" * 1000)

    def test_sha256_empty_bytes(self):
        assert sha256(b"") == hashlib.sha256(b"").digest()


class TestHashlibHash:
    """Tests for the generic hashlib-backed digest."""

    @pytest.mark.parametrize("name", ["sha512", "sha3_256", "blake2b", "sha1"])
    def test_matches_hashlib(self, name):
        hash_fn = HashlibHash(name)
        expected = hashlib.new(name, b"payload").digest()

        assert hash_fn.hash(b"payload") == expected
        assert hash_fn.digest_size == len(expected)
        assert hash_fn.name == name

    def test_unknown_algorithm_raises(self):
        with pytest.raises(UnsupportedHashAlgorithmError) as exc_info:
            HashlibHash("not-a-hash")

        assert exc_info.value.code == ErrorCodes.UNSUPPORTED_HASH_ALGORITHM
        assert exc_info.value.algorithm == "not-a-hash"

    def test_variable_length_digest_rejected(self):
        with pytest.raises(UnsupportedHashAlgorithmError):
            HashlibHash("shake_128")

    def test_is_hash_function(self):
        assert isinstance(HashlibHash("sha512"), HashFunction)


class TestRegistry:
    """Tests for get_hash_function() and available_hash_algorithms()."""

    def test_default_is_sha256(self):
        assert isinstance(get_hash_function(), Sha256Hash)
        assert isinstance(get_hash_function(None), Sha256Hash)

    def test_name_is_case_insensitive(self):
        assert isinstance(get_hash_function("SHA256"), Sha256Hash)
        assert get_hash_function(" Sha3_256 ").name == "sha3_256"

    def test_unknown_name_raises(self):
        with pytest.raises(UnsupportedHashAlgorithmError):
            get_hash_function("md6")

    def test_available_excludes_shake(self):
        names = available_hash_algorithms()

        assert "sha256" in names
        assert "sha3_256" in names
        assert not any(n.startswith("shake_") for n in names)
        assert names == sorted(names)

    def test_every_available_name_resolves(self):
        for name in available_hash_algorithms():
            assert get_hash_function(name).digest_size > 0


class TestCompareBytes:
    """Tests for lexicographic comparison."""

    def test_equal(self):
        assert compare_bytes(b"abc", b"abc") == 0

    def test_first_differing_byte_decides(self):
        assert compare_bytes(b"\x01\xff", b"\x02\x00") < 0
        assert compare_bytes(b"\x02\x00", b"\x01\xff") > 0

    def test_prefix_sorts_first(self):
        assert compare_bytes(b"ab", b"abc") < 0
        assert compare_bytes(b"abc", b"ab") > 0
        assert compare_bytes(b"", b"\x00") < 0

    def test_agrees_with_python_ordering(self):
        samples = [b"", b"\x00", b"\x00\x00", b"\x01", b"\xff", b"a", b"ab", b"b"]
        for a in samples:
            for b in samples:
                assert (compare_bytes(a, b) < 0) == (a < b)
                assert (compare_bytes(a, b) == 0) == (a == b)


class TestCanonicalPair:
    """Tests for order-independent concatenation."""

    def test_concat(self):
        assert concat_bytes(b"ab", b"cd") == b"abcd"

    def test_smaller_first(self):
        assert canonical_pair(b"\x02", b"\x01") == b"\x01\x02"
        assert canonical_pair(b"\x01", b"\x02") == b"\x01\x02"

    def test_symmetric_for_digests(self):
        a, b = sha256(b"a"), sha256(b"b")
        assert canonical_pair(a, b) == canonical_pair(b, a)

    def test_equal_inputs(self):
        a = sha256(b"a")
        assert canonical_pair(a, a) == a + a


class TestHex:
    """Tests for to_hex/from_hex."""

    def test_to_hex_no_prefix(self):
        assert to_hex(bytes.fromhex("deadbeef")) == "deadbeef"
        assert to_hex(b"") == ""

    def test_from_hex_with_and_without_prefix(self):
        assert from_hex("deadbeef") == bytes.fromhex("deadbeef")
        assert from_hex("0xdeadbeef") == bytes.fromhex("deadbeef")
        assert from_hex("0XDEADBEEF") == bytes.fromhex("deadbeef")

    def test_round_trip_digest(self):
        digest = sha256(b"round trip")
        assert from_hex(to_hex(digest)) == digest

    def test_odd_length_raises(self):
        with pytest.raises(ValueError, match="even length"):
            from_hex("abc")

    def test_invalid_chars_raise(self):
        with pytest.raises(ValueError, match="Invalid hex"):
            from_hex("zz")
