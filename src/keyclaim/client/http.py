from __future__ import annotations

import http.cookiejar
import logging
from typing import Any

import requests

from ..config import DEFAULT_TTL, ClientConfig
from ..exceptions import KeyClaimDecodeError, KeyClaimTransportError
from ..types import Challenge, ResponseMethod, ValidationResult
from .errors import normalize_error
from .signing import generate_response

logger = logging.getLogger(__name__)

CREATE_PATH = "/api/challenge/create"
VALIDATE_PATH = "/api/challenge/validate"

# Statuses on which the validate endpoint may report a structured rejection.
_VALIDATION_FAILURE_STATUSES = (400, 422)


class KeyClaimClient:
    """Client for the KeyClaim challenge-response API.

    Each call issues one request (two for :meth:`validate`) and either returns
    or raises. Nothing is retried.
    """

    def __init__(
        self,
        api_key: str,
        secret: str | None = None,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
    ) -> None:
        self._config = ClientConfig(
            api_key=api_key, secret=secret, base_url=base_url, timeout=timeout
        )
        self._session = requests.Session()
        # Calls are independent: never store or replay server cookies.
        self._session.cookies.set_policy(http.cookiejar.DefaultCookiePolicy(allowed_domains=[]))

    @classmethod
    def from_config(cls, config: ClientConfig) -> "KeyClaimClient":
        return cls(
            config.api_key,
            config.secret,
            base_url=config.base_url,
            timeout=config.timeout,
        )

    @classmethod
    def from_env(cls) -> "KeyClaimClient":
        return cls.from_config(ClientConfig.from_env())

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def base_url(self) -> str:
        return self._config.base_url

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> "KeyClaimClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _post(self, path: str, payload: dict[str, Any]) -> requests.Response:
        """Send an authenticated JSON POST to the API."""
        url = f"{self._config.base_url}{path}"
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self._config.api_key}",
        }
        logger.debug(f"POST {path}")
        try:
            resp = self._session.post(
                url, json=payload, headers=headers, timeout=self._config.timeout
            )
        except requests.exceptions.RequestException as e:
            raise KeyClaimTransportError(f"POST {path} failed: {e}") from e
        logger.debug(f"POST {path} -> {resp.status_code}")
        return resp

    def create_challenge(self, ttl: int | None = None) -> Challenge:
        """Request a fresh challenge valid for ``ttl`` seconds (default 30)."""
        resp = self._post(CREATE_PATH, {"ttl": ttl or DEFAULT_TTL})

        if resp.status_code != 200:
            raise normalize_error(resp.content, resp.status_code, "Failed to create challenge")

        try:
            data = resp.json()
            return Challenge.from_dict(data)
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            raise KeyClaimDecodeError(f"failed to decode response: {e}") from e

    def generate_response(
        self,
        challenge: str,
        method: ResponseMethod | str,
        custom_data: Any = None,
    ) -> str:
        return generate_response(challenge, method, custom_data, self._config.secret)

    def validate_challenge(
        self,
        challenge: str,
        response: str,
        decrypted_challenge: str | None = None,
    ) -> ValidationResult:
        """Submit a challenge-response pair.

        A 400/422 carrying a ``valid`` field is returned as a result rather
        than raised.
        """
        payload: dict[str, Any] = {"challenge": challenge, "response": response}
        if decrypted_challenge is not None:
            payload["decryptedChallenge"] = decrypted_challenge

        resp = self._post(VALIDATE_PATH, payload)

        try:
            data = resp.json()
        except ValueError:
            data = None

        if (
            resp.status_code in _VALIDATION_FAILURE_STATUSES
            and isinstance(data, dict)
            and data.get("valid") is not None
        ):
            return self._decode_validation(data)

        if resp.status_code != 200:
            raise normalize_error(resp.content, resp.status_code, "Failed to validate challenge")

        if not isinstance(data, dict):
            raise KeyClaimDecodeError("failed to decode response: expected a JSON object")
        return self._decode_validation(data)

    @staticmethod
    def _decode_validation(data: dict[str, Any]) -> ValidationResult:
        try:
            return ValidationResult.from_dict(data)
        except (ValueError, TypeError) as e:
            raise KeyClaimDecodeError(f"failed to decode response: {e}") from e

    def validate(
        self,
        method: ResponseMethod | str = ResponseMethod.HMAC,
        ttl: int | None = None,
        custom_data: Any = None,
    ) -> ValidationResult:
        """Run the full flow: create a challenge, answer it and validate the answer."""
        challenge = self.create_challenge(ttl)
        response = self.generate_response(challenge.challenge, method, custom_data)
        return self.validate_challenge(challenge.challenge, response)
