"""Textual password hash record.

Format: ``sha256|<strength>|<salt base64>|<hash base64>``

Strength is an unsigned decimal, the salt is carried verbatim, and the hash is
the base64 of a 32-byte digest (44 characters with padding). None of the fields
can contain ``|``, so no escaping is done.
"""

import base64
import logging
import re
from dataclasses import dataclass

from src.pm_pwstore.enums import HashAlgorithm
from src.pm_pwstore.errors import MalformedRecordError
from src.pm_pwstore.kdf import DIGEST_SIZE
from src.pm_pwstore.salt import Salt

logger = logging.getLogger(__name__)

DELIMITER = "|"
_ENCODED_HASH_LEN = 44
_STRENGTH_RE = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class PasswordRecord:
    algorithm: HashAlgorithm
    strength: int  # iterations = 2 ** strength
    salt: Salt
    hash: str  # base64, always decodes to 32 bytes

    @property
    def iterations(self) -> int:
        return 2**self.strength

    def hash_bytes(self) -> bytes:
        return base64.b64decode(self.hash)


def encode_digest(digest: bytes) -> str:
    return base64.b64encode(digest).decode("ascii")


def write_pw_hash(record: PasswordRecord) -> str:
    """Serialize a record. Inverse of parse_pw_hash."""
    return DELIMITER.join(
        [record.algorithm.value, str(record.strength), record.salt.encoded, record.hash]
    )


def parse_pw_hash(pw_hash: str | bytes) -> PasswordRecord:
    """Parse a stored password hash.

    Raises:
        MalformedRecordError: wrong field count, unknown algorithm, strength
            not an unsigned decimal, salt not ASCII, or hash not 32 bytes of
            base64.

    The strength is trusted as stored: verifying a record of strength n
    costs 2**n digests, with no upper bound applied here.
    """
    if isinstance(pw_hash, bytes):
        try:
            pw_hash = pw_hash.decode("ascii")
        except UnicodeDecodeError:
            raise MalformedRecordError("not ASCII") from None

    fields = pw_hash.split(DELIMITER)
    if len(fields) != 4:
        raise MalformedRecordError(f"expected 4 fields, got {len(fields)}")
    algorithm_s, strength_s, salt_s, hash_s = fields

    try:
        algorithm = HashAlgorithm(algorithm_s)
    except ValueError:
        raise MalformedRecordError("unknown algorithm") from None

    if not _STRENGTH_RE.fullmatch(strength_s):
        raise MalformedRecordError("strength is not an unsigned integer")

    if not salt_s.isascii():
        raise MalformedRecordError("salt is not ASCII")

    if len(hash_s) != _ENCODED_HASH_LEN:
        raise MalformedRecordError("hash has wrong length")
    try:
        digest = base64.b64decode(hash_s, validate=True)
    except ValueError:  # binascii.Error, or non-ASCII text
        raise MalformedRecordError("hash is not valid base64") from None
    if len(digest) != DIGEST_SIZE:
        raise MalformedRecordError("hash is not 32 bytes")

    # Salt is trusted as written by make_salt; its length is not re-checked.
    return PasswordRecord(algorithm, int(strength_s), Salt.from_encoded(salt_s), hash_s)


def read_pw_hash(pw_hash: str | bytes) -> PasswordRecord | None:
    """Parse a stored password hash, returning None if it is malformed."""
    try:
        return parse_pw_hash(pw_hash)
    except MalformedRecordError as exc:
        logger.debug("Rejected password hash: %s", exc.reason)
        return None
