"""Tests for pm_pwstore.kdf — iterated SHA-256."""

import hashlib

from src.pm_pwstore.kdf import DIGEST_SIZE, hash_rounds, pbkdf1
from src.pm_pwstore.salt import Salt


def _sha(data: bytes) -> bytes:
    return hashlib.sha256(data).digest()


class TestHashRounds:
    def test_zero_rounds_returns_input(self) -> None:
        assert hash_rounds(b"abc", 0) == b"abc"

    def test_one_round(self) -> None:
        assert hash_rounds(b"abc", 1) == _sha(b"abc")

    def test_three_rounds(self) -> None:
        assert hash_rounds(b"abc", 3) == _sha(_sha(_sha(b"abc")))

    def test_rounds_compose(self) -> None:
        assert hash_rounds(hash_rounds(b"abc", 2), 3) == hash_rounds(b"abc", 5)


class TestPbkdf1:
    def test_zero_iterations_is_two_digests(self) -> None:
        salt = Salt.from_encoded("MDEyMzQ1Njc4OWFiY2RlZg==")
        expected = _sha(_sha(b"hunter2MDEyMzQ1Njc4OWFiY2RlZg=="))
        assert pbkdf1(b"hunter2", salt, 0) == expected

    def test_total_digests_is_iterations_plus_two(self) -> None:
        salt = Salt.from_encoded("72cd18b5ebfe6e96")
        expected = hash_rounds(b"hunter272cd18b5ebfe6e96", 4 + 2)
        assert pbkdf1(b"hunter2", salt, 4) == expected

    def test_hashes_encoded_salt_not_raw(self) -> None:
        salt = Salt.from_encoded("AAAAAAAAAAA=")
        assert pbkdf1(b"pw", salt, 0) == _sha(_sha(b"pwAAAAAAAAAAA="))
        assert pbkdf1(b"pw", salt, 0) != _sha(_sha(b"pw" + b"\x00" * 8))

    def test_output_size(self) -> None:
        out = pbkdf1(b"", Salt.from_encoded("AAAAAAAAAAA="), 16)
        assert len(out) == DIGEST_SIZE == 32

    def test_deterministic(self) -> None:
        salt = Salt.from_encoded("AAAAAAAAAAA=")
        assert pbkdf1(b"pw", salt, 10) == pbkdf1(b"pw", salt, 10)

    def test_salt_changes_output(self) -> None:
        a = pbkdf1(b"pw", Salt.from_encoded("AAAAAAAAAAA="), 10)
        b = pbkdf1(b"pw", Salt.from_encoded("AQAAAAAAAAA="), 10)
        assert a != b
