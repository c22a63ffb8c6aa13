from __future__ import annotations

import hashlib
import hmac
import json
from typing import Any

from ..exceptions import KeyClaimInputError, UnsupportedMethodError
from ..types import ResponseMethod


def _sha256_hex(data: bytes) -> str:
    h = hashlib.sha256()
    h.update(data)
    return h.hexdigest()


def _canonical_json(value: Any) -> str:
    try:
        return json.dumps(
            value, sort_keys=True, separators=(",", ":"), ensure_ascii=False, allow_nan=False
        )
    except (TypeError, ValueError) as e:
        raise KeyClaimInputError(f"failed to marshal custom data: {e}") from e


def generate_response(
    challenge: str,
    method: ResponseMethod | str,
    custom_data: Any = None,
    secret: str = "",
) -> str:
    """Derive the response the server expects for ``challenge``.

    echo:   the challenge itself (testing only)
    hmac:   hex(HMAC-SHA256(secret, challenge))
    hash:   hex(SHA256(challenge + secret))
    custom: hex(SHA256(challenge + ":" + data)), with non-string data as canonical JSON
    """
    try:
        method = ResponseMethod(method)
    except ValueError as e:
        raise UnsupportedMethodError(method) from e

    if method is ResponseMethod.ECHO:
        return challenge

    if method is ResponseMethod.HMAC:
        return hmac.new(secret.encode(), challenge.encode(), hashlib.sha256).hexdigest()

    if method is ResponseMethod.HASH:
        return _sha256_hex((challenge + secret).encode())

    if custom_data is None:
        raise KeyClaimInputError("custom data is required for custom method")
    if isinstance(custom_data, str):
        data = f"{challenge}:{custom_data}"
    else:
        data = f"{challenge}:{_canonical_json(custom_data)}"
    return _sha256_hex(data.encode())
