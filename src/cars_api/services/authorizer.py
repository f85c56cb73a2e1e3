"""Shared-secret API key authorization."""

import hmac
from collections.abc import Mapping

from cars_api.config import get_settings
from cars_api.exceptions import SecretUnavailable
from cars_api.log import log_event
from cars_api.protocols import SecretProvider

API_KEY_HEADER = "x-api-key"


class Authorizer:
    """Compares the ``x-api-key`` request header with a secret from the store.

    The secret is fetched on every call, so rotating it in the store takes
    effect immediately without restarting the service.
    """

    def __init__(self, secret_provider: SecretProvider, secret_name: str | None = None) -> None:
        """Initialize the authorizer.

        Args:
            secret_provider: Secret store holding the API key.
            secret_name: Name of the API key secret. Defaults to settings.
        """
        self._secrets = secret_provider
        self._secret_name = secret_name or get_settings().api_key_secret_name

    def is_authorized(self, headers: Mapping[str, str]) -> bool:
        """Check a request's headers against the current API key.

        Returns False when the secret cannot be fetched or is empty, when
        the header is missing, or when the values differ (case-sensitive).
        """
        try:
            expected = self._secrets.get(self._secret_name)
        except SecretUnavailable as e:
            log_event("api_key_unavailable", "ERROR", secret_name=self._secret_name, reason=e.reason)
            return False

        if not expected:
            return False

        provided = _header_value(headers, API_KEY_HEADER)
        if provided is None:
            return False

        return hmac.compare_digest(provided.encode("utf-8"), expected.encode("utf-8"))


def _header_value(headers: Mapping[str, str], name: str) -> str | None:
    # Starlette's Headers is already case-insensitive; plain dicts are not.
    value = headers.get(name)
    if value is not None:
        return value
    for key, candidate in headers.items():
        if key.lower() == name:
            return candidate
    return None
