import json

import requests

API_KEY = "kc_test123456789012345678901234567890123456789012345678901234567890"


def make_response(status_code: int, body) -> requests.Response:
    """Build a real requests.Response carrying ``body`` (dict/list or raw bytes)."""
    resp = requests.Response()
    resp.status_code = status_code
    resp._content = body if isinstance(body, bytes) else json.dumps(body).encode()
    resp.headers["Content-Type"] = "application/json"
    resp.encoding = "utf-8"
    return resp
