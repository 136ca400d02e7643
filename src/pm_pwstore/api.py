"""High-level password hashing API.

    >>> pw_hash = make_password("hunter2", 12)
    >>> verify_password("wrong guess", pw_hash)
    False
    >>> verify_password("hunter2", pw_hash)
    True

Stored hashes look like::

    sha256|12|Ge9pg8a/r4JW356Uux2JHg==|Fdv4jchzDlRAs6WFNUarxLngaittknbaHFFc0k8hAy0=

Hashing iterates SHA-256 ``2 ** strength`` times. Use at least 10; 12 is the
default. When hardware gets faster, raise the strength of existing hashes with
strengthen_password; no plaintext needed.

Only make_password does I/O (it reads the entropy device for a salt). Every
function here that reads a stored hash treats a malformed one as a failed
match: False, 0, or the input returned unchanged. Nothing raises on bad data.
"""

import hmac
import logging

from config.settings import settings
from src.pm_pwstore.codec import (
    PasswordRecord,
    encode_digest,
    read_pw_hash,
    write_pw_hash,
)
from src.pm_pwstore.enums import HashAlgorithm
from src.pm_pwstore.errors import InvalidStrengthError
from src.pm_pwstore.kdf import hash_rounds, pbkdf1
from src.pm_pwstore.salt import Salt, gen_salt_io
from src.pm_pwstore.schemas import PasswordHashInfo

logger = logging.getLogger(__name__)


def _to_bytes(value: str | bytes) -> bytes:
    return value.encode("utf-8") if isinstance(value, str) else value


def make_password(password: str | bytes, strength: int | None = None) -> str:
    """Hash a password with a freshly generated salt.

    ``strength`` defaults to settings.PASSWORD_DEFAULT_STRENGTH (12).
    """
    if strength is None:
        strength = settings.PASSWORD_DEFAULT_STRENGTH
    if 0 <= strength < settings.PASSWORD_MIN_RECOMMENDED_STRENGTH:
        logger.warning(
            "Password strength %d is below the recommended minimum %d",
            strength,
            settings.PASSWORD_MIN_RECOMMENDED_STRENGTH,
        )
    return make_password_salt(password, gen_salt_io(), strength)


def make_password_salt(password: str | bytes, salt: Salt, strength: int) -> str:
    """Hash a password with a given salt. Pure: same inputs, same output.

    The salt is written into the result verbatim, e.g. salt
    ``Salt.from_encoded("72cd18b5ebfe6e96")`` at strength 12 gives
    ``sha256|12|72cd18b5ebfe6e96|<hash>``.
    """
    if strength < 0:
        raise InvalidStrengthError(strength)
    digest = pbkdf1(_to_bytes(password), salt, 2**strength)
    record = PasswordRecord(HashAlgorithm.SHA256, strength, salt, encode_digest(digest))
    return write_pw_hash(record)


def verify_password(user_input: str | bytes, pw_hash: str | bytes) -> bool:
    """Check ``user_input`` against a stored hash. Malformed hashes never match.

    The stored strength is trusted: a record of strength n costs 2**n digests
    to verify. Only store hashes this library produced.
    """
    record = read_pw_hash(pw_hash)
    if record is None:
        return False
    candidate = encode_digest(pbkdf1(_to_bytes(user_input), record.salt, record.iterations))
    return hmac.compare_digest(candidate.encode("ascii"), record.hash.encode("ascii"))


def strengthen_password(pw_hash: str | bytes, new_strength: int) -> str | bytes:
    """Return a hash of strength ``new_strength`` matching the same password.

    Continues the SHA-256 chain from the stored digest for the missing
    ``2**new - 2**old`` rounds. If the hash is malformed, or already at least
    that strong, it is returned unchanged (same object). Bytes in, bytes out.
    """
    record = read_pw_hash(pw_hash)
    if record is None or record.strength >= new_strength:
        return pw_hash

    extra_rounds = 2**new_strength - record.iterations
    new_digest = hash_rounds(record.hash_bytes(), extra_rounds)
    logger.debug("Strengthened password hash %d -> %d", record.strength, new_strength)
    strengthened = write_pw_hash(
        PasswordRecord(record.algorithm, new_strength, record.salt, encode_digest(new_digest))
    )
    return strengthened.encode("ascii") if isinstance(pw_hash, bytes) else strengthened


def password_strength(pw_hash: str | bytes) -> int:
    """Strength of a stored hash, or 0 if it is malformed."""
    record = read_pw_hash(pw_hash)
    return 0 if record is None else record.strength


def is_password_format_valid(pw_hash: str | bytes) -> bool:
    return read_pw_hash(pw_hash) is not None


def inspect_password(pw_hash: str | bytes) -> PasswordHashInfo | None:
    """Describe a stored hash without exposing its digest. None if malformed."""
    record = read_pw_hash(pw_hash)
    if record is None:
        return None
    return PasswordHashInfo(
        algorithm=record.algorithm,
        strength=record.strength,
        iterations=record.iterations,
        salt=record.salt.encoded,
    )
