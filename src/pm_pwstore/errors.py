"""Error codes and custom exceptions for password hashing.

Error code ranges:
  1xxx: Salt
  2xxx: Password hash record
  3xxx: Strength

Only salt and strength errors ever reach callers of the high-level API; they
signal programmer misuse. Record errors are collapsed to sentinel values
(False / 0 / unchanged input) at the api layer.
"""


class PasswordStoreError(Exception):
    """Base password store error."""

    def __init__(self, code: int, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(message)


# --- 1xxx: Salt ---

class SaltTooShortError(PasswordStoreError, ValueError):
    def __init__(self, length: int, minimum: int) -> None:
        super().__init__(
            1001,
            f"Salt too short: got {length} bytes, minimum length is {minimum}",
        )


class InvalidSaltEncodingError(PasswordStoreError, ValueError):
    def __init__(self, reason: str) -> None:
        super().__init__(1002, f"Invalid encoded salt: {reason}")


# --- 2xxx: Record ---

class MalformedRecordError(PasswordStoreError):
    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(2001, f"Malformed password hash: {reason}")


# --- 3xxx: Strength ---

class InvalidStrengthError(PasswordStoreError, ValueError):
    def __init__(self, strength: int) -> None:
        super().__init__(3001, f"Strength must be a non-negative integer, got {strength}")
