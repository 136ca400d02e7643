"""Salt value type.

A Salt holds the base64 text of its random bytes, not the bytes themselves:
pbkdf1 hashes the encoded form, and stored records carry it verbatim.
"""

import base64
import random
from dataclasses import dataclass

from src.pm_pwstore.errors import InvalidSaltEncodingError, SaltTooShortError
from src.pm_pwstore.random_source import random_bytes, random_bytes_from

MIN_SALT_BYTES = 8


@dataclass(frozen=True)
class Salt:
    """Base64-encoded salt, immutable once created."""

    encoded: str

    def __post_init__(self) -> None:
        # Must survive the record format and hashing as ASCII bytes
        if not self.encoded.isascii():
            raise InvalidSaltEncodingError("not ASCII")
        if "|" in self.encoded:
            raise InvalidSaltEncodingError("contains '|'")

    @classmethod
    def from_encoded(cls, encoded: str | bytes) -> "Salt":
        """Wrap an already-encoded salt (e.g. the salt field of a stored hash).

        Trusts the encoder: the minimum length is not checked again.
        """
        if isinstance(encoded, bytes):
            try:
                encoded = encoded.decode("ascii")
            except UnicodeDecodeError:
                raise InvalidSaltEncodingError("not ASCII") from None
        return cls(encoded)


def make_salt(raw: bytes) -> Salt:
    """Create a Salt from at least 8 bytes of arbitrary data."""
    if len(raw) < MIN_SALT_BYTES:
        raise SaltTooShortError(len(raw), MIN_SALT_BYTES)
    return Salt(base64.b64encode(raw).decode("ascii"))


def export_salt(salt: Salt) -> str:
    return salt.encoded


def gen_salt_io() -> Salt:
    """Fresh salt from the entropy device (or the fallback generator)."""
    return make_salt(random_bytes())


def gen_salt_random(rng: random.Random) -> tuple[Salt, random.Random]:
    """Salt drawn from a caller-supplied generator, plus the advanced generator.

    No I/O; deterministic for a given generator state.
    """
    raw, advanced = random_bytes_from(rng)
    return make_salt(raw), advanced
