"""Type definitions for the KeyClaim SDK."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any

UNLIMITED = "unlimited"


def _int_field(data: dict[str, Any], name: str) -> int:
    """Read an integer field; absent or null reads as 0. Booleans and floats are rejected."""
    value = data.get(name)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    return value


class ResponseMethod(StrEnum):
    ECHO = "echo"
    HMAC = "hmac"
    HASH = "hash"
    CUSTOM = "custom"


@dataclass(frozen=True)
class Challenge:
    """Challenge issued by the create endpoint."""

    challenge: str
    expires_in: int
    encrypted: bool | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        data: dict[str, Any] = {"challenge": self.challenge, "expires_in": self.expires_in}
        if self.encrypted is not None:
            data["encrypted"] = self.encrypted
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Challenge":
        """Create from the decoded create-challenge body.

        Raises KeyError when ``challenge`` is missing.
        """
        challenge = data["challenge"]
        if not isinstance(challenge, str):
            raise ValueError(f"challenge must be a string, got {type(challenge).__name__}")
        return cls(
            challenge=challenge,
            expires_in=_int_field(data, "expires_in"),
            encrypted=data.get("encrypted"),
        )


@dataclass(frozen=True)
class Quota:
    used: int
    remaining: int
    quota: int | str  # bounded ceiling or UNLIMITED

    @property
    def is_unlimited(self) -> bool:
        return self.quota == UNLIMITED

    def to_dict(self) -> dict[str, Any]:
        return {"used": self.used, "remaining": self.remaining, "quota": self.quota}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Quota":
        return cls(
            used=_int_field(data, "used"),
            remaining=_int_field(data, "remaining"),
            quota=UNLIMITED if data.get("quota") == UNLIMITED else _int_field(data, "quota"),
        )


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a validate call.

    A structured rejection from the server is a result with ``valid=False``,
    not an exception. Branch on :meth:`is_valid`.
    """

    valid: bool | None = None
    signature: str | None = None
    quota: Quota | None = None
    error: str | None = None

    def is_valid(self) -> bool:
        return self.valid is True

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"valid": self.valid}
        if self.signature is not None:
            data["signature"] = self.signature
        if self.quota is not None:
            data["quota"] = self.quota.to_dict()
        if self.error is not None:
            data["error"] = self.error
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ValidationResult":
        quota = data.get("quota")
        return cls(
            valid=data.get("valid"),
            signature=data.get("signature"),
            quota=Quota.from_dict(quota) if isinstance(quota, dict) else None,
            error=data.get("error"),
        )
