"""Python client for the KeyClaim challenge-response API."""

from .client import KeyClaimClient, generate_response, normalize_error
from .config import ClientConfig
from .exceptions import (
    KeyClaimAPIError,
    KeyClaimConfigError,
    KeyClaimDecodeError,
    KeyClaimError,
    KeyClaimInputError,
    KeyClaimTransportError,
    UnsupportedMethodError,
)
from .types import UNLIMITED, Challenge, Quota, ResponseMethod, ValidationResult

__version__ = "1.0.0"

__all__ = [
    "KeyClaimClient",
    "ClientConfig",
    "ResponseMethod",
    "Challenge",
    "Quota",
    "ValidationResult",
    "UNLIMITED",
    "generate_response",
    "normalize_error",
    "KeyClaimError",
    "KeyClaimConfigError",
    "KeyClaimInputError",
    "UnsupportedMethodError",
    "KeyClaimTransportError",
    "KeyClaimDecodeError",
    "KeyClaimAPIError",
    "__version__",
]
