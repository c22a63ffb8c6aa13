from __future__ import annotations

import json

from ..exceptions import KeyClaimAPIError


def normalize_error(
    body: str | bytes | None, status_code: int, default_message: str
) -> KeyClaimAPIError:
    """Build a uniform API error from a non-success response body.

    Message precedence is ``error``, then ``message``, then ``default_message``.
    ``code`` is only set from ``error``.
    """
    try:
        data = json.loads(body) if body else None
    except ValueError:
        data = None

    if not isinstance(data, dict):
        return KeyClaimAPIError(default_message, status_code=status_code)

    error = data.get("error")
    if isinstance(error, str):
        return KeyClaimAPIError(error, code=error, status_code=status_code)

    message = data.get("message")
    if isinstance(message, str):
        return KeyClaimAPIError(message, status_code=status_code)

    return KeyClaimAPIError(default_message, status_code=status_code)
