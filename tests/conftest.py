"""Shared test fixtures."""

import pytest

from src.pm_pwstore.api import make_password_salt
from src.pm_pwstore.salt import Salt, make_salt


@pytest.fixture
def salt() -> Salt:
    return make_salt(b"0123456789abcdef")


@pytest.fixture
def stored_hash(salt: Salt) -> str:
    """Hash of "hunter2" at strength 3, fast enough for every test."""
    return make_password_salt("hunter2", salt, 3)
