"""Exception hierarchy for the KeyClaim SDK."""

from __future__ import annotations


class KeyClaimError(Exception):
    """Base class for every error raised by the SDK."""


class KeyClaimConfigError(KeyClaimError, ValueError):
    """Invalid client configuration (bad or missing API key, bad timeout)."""


class KeyClaimInputError(KeyClaimError, ValueError):
    """Invalid arguments passed to a response-generation call."""


class UnsupportedMethodError(KeyClaimInputError):
    def __init__(self, method: object) -> None:
        super().__init__(f"unknown response method: {method}")
        self.method = method


class KeyClaimTransportError(KeyClaimError):
    """Network failure or timeout while talking to the API."""


class KeyClaimDecodeError(KeyClaimError):
    """A successful response carried a body that could not be decoded."""


class KeyClaimAPIError(KeyClaimError):
    """Normalized non-success response from the API."""

    def __init__(self, message: str, code: str | None = None, status_code: int = 0) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code

    def __repr__(self) -> str:
        return (
            f"KeyClaimAPIError(message={self.message!r}, code={self.code!r}, "
            f"status_code={self.status_code})"
        )
