"""PBKDF1-style key derivation over SHA-256.

pbkdf1(password, salt, n) applies SHA-256 n + 2 times in total: once over
password ++ salt.encoded, then n + 1 more times over its own output. Existing
hashes depend on the salt being hashed in its base64 form; do not change it.
"""

import hashlib

from src.pm_pwstore.salt import Salt

DIGEST_SIZE = 32


def hash_rounds(data: bytes, rounds: int) -> bytes:
    """Apply SHA-256 ``rounds`` times. Zero rounds returns ``data`` unchanged."""
    for _ in range(rounds):
        data = hashlib.sha256(data).digest()
    return data


def pbkdf1(password: bytes, salt: Salt, iterations: int) -> bytes:
    """Derive a 32-byte key. Pure and deterministic."""
    first = hashlib.sha256(password + salt.encoded.encode("ascii")).digest()
    return hash_rounds(first, iterations + 1)
