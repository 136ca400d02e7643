"""Random bytes for salts.

The OS entropy device is read first. Any failure to open or fully read it falls
back to an in-process ``random.Random`` seeded at import time; callers never see
the failure, only a WARNING log line.
"""

import logging
import random

from config.settings import settings

logger = logging.getLogger(__name__)

# random.Random() seeds itself from os.urandom, or from the clock when that is missing
_fallback_rng = random.Random()


def read_entropy_device(size: int | None = None, path: str | None = None) -> bytes:
    """Read exactly ``size`` bytes from the entropy device. Raises OSError on failure."""
    size = settings.PASSWORD_SALT_BYTES if size is None else size
    path = settings.ENTROPY_DEVICE if path is None else path
    with open(path, "rb") as fh:
        data = fh.read(size)
    if len(data) != size:
        raise OSError(f"Short read from {path}: wanted {size} bytes, got {len(data)}")
    return data


def fallback_random_bytes(size: int | None = None) -> bytes:
    """Draw ``size`` bytes, each uniform over 0-255, from the module-level generator."""
    size = settings.PASSWORD_SALT_BYTES if size is None else size
    return bytes(_fallback_rng.randint(0, 255) for _ in range(size))


def random_bytes_from(
    rng: random.Random, size: int | None = None
) -> tuple[bytes, random.Random]:
    """Pure variant: draw bytes from a copy of ``rng``.

    Returns the bytes and the advanced copy. The caller's generator is left
    untouched, so the same ``rng`` always yields the same bytes.
    """
    size = settings.PASSWORD_SALT_BYTES if size is None else size
    advanced = random.Random()
    advanced.setstate(rng.getstate())
    data = bytes(advanced.randint(0, 255) for _ in range(size))
    return data, advanced


def random_bytes(size: int | None = None) -> bytes:
    """Salt-grade randomness: entropy device first, seeded generator as fallback."""
    try:
        return read_entropy_device(size)
    except OSError as exc:
        logger.warning("Entropy device unavailable, using fallback generator: %s", exc)
        return fallback_random_bytes(size)
