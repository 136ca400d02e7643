"""Pydantic views of stored password hashes.

The hash field is deliberately absent: these are safe to log or return from an
admin endpoint.
"""

from pydantic import BaseModel, ConfigDict, Field

from src.pm_pwstore.enums import HashAlgorithm


class PasswordHashInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    algorithm: HashAlgorithm
    strength: int = Field(..., ge=0)
    iterations: int = Field(..., ge=1)
    salt: str
