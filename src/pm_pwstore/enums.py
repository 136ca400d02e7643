"""Hash scheme identifiers: the first field of every stored password hash.

Only one scheme exists today. New digests get a new member here so older
records keep parsing.
"""

from enum import Enum


class HashAlgorithm(str, Enum):
    SHA256 = "sha256"
