from .errors import normalize_error
from .http import KeyClaimClient
from .signing import generate_response

__all__ = ["KeyClaimClient", "generate_response", "normalize_error"]
