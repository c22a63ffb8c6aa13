"""Configuration settings for the KeyClaim client."""

from __future__ import annotations

import base64
import os
from dataclasses import dataclass

from .exceptions import KeyClaimConfigError

API_KEY_PREFIX = "kc_"
DEFAULT_TIMEOUT = 30.0
DEFAULT_TTL = 30

# Public endpoint, stored encoded. Not a secret.
_DEFAULT_BASE_URL_B64 = "aHR0cHM6Ly9rZXljbGFpbS5vcmc="
DEFAULT_BASE_URL = base64.b64decode(_DEFAULT_BASE_URL_B64).decode("ascii")


@dataclass(frozen=True)
class ClientConfig:
    """Validated, immutable client settings.

    ``secret`` falls back to ``api_key`` when left empty, and ``base_url`` to
    the public KeyClaim endpoint.
    """

    api_key: str
    secret: str | None = None
    base_url: str | None = None
    timeout: float | None = None

    def __post_init__(self) -> None:
        if not self.api_key or not self.api_key.startswith(API_KEY_PREFIX):
            raise KeyClaimConfigError(
                f'invalid API key format. API key must start with "{API_KEY_PREFIX}"'
            )
        timeout = DEFAULT_TIMEOUT if self.timeout is None else self.timeout
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or not timeout > 0:
            raise KeyClaimConfigError(f"timeout must be a positive number, got {timeout!r}")

        object.__setattr__(self, "timeout", timeout)
        object.__setattr__(self, "secret", self.secret or self.api_key)
        object.__setattr__(self, "base_url", (self.base_url or DEFAULT_BASE_URL).rstrip("/"))

    def __repr__(self) -> str:
        return (
            f"ClientConfig(api_key='{API_KEY_PREFIX}***', base_url={self.base_url!r}, "
            f"timeout={self.timeout})"
        )

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """Build from KEYCLAIM_API_KEY, KEYCLAIM_SECRET, KEYCLAIM_BASE_URL and KEYCLAIM_TIMEOUT."""
        raw_timeout = os.getenv("KEYCLAIM_TIMEOUT", "")
        try:
            timeout = float(raw_timeout) if raw_timeout else DEFAULT_TIMEOUT
        except ValueError as e:
            raise KeyClaimConfigError(f"invalid KEYCLAIM_TIMEOUT: {raw_timeout!r}") from e

        return cls(
            api_key=os.getenv("KEYCLAIM_API_KEY", ""),
            secret=os.getenv("KEYCLAIM_SECRET") or None,
            base_url=os.getenv("KEYCLAIM_BASE_URL") or None,
            timeout=timeout,
        )
