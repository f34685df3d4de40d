"""
Client configuration and credential holder.
"""

import threading
from dataclasses import dataclass, field
from typing import Optional, Dict, Any

from .exceptions import ConfigurationError


DEFAULT_BASE_URL = "https://api.twitter.com"
DEFAULT_TIMEOUT = 30


@dataclass
class ClientConfig:
    """
    Settings for a TwitterClient.

    Attributes:
        api_key: Bearer token issued by the developer portal, used for
            Authorization unless a token is generated at runtime
        consumer_key: OAuth2 consumer (API) key, needed for token issuance
        consumer_secret: OAuth2 consumer secret, needed for token issuance
        session: Transport exposing ``send(prepared_request, **kwargs)``.
            A requests.Session is created on demand when omitted.
        base_url: API root
        timeout: Default per-request timeout in seconds
        verify_ssl: Verify TLS certificates
        user_agent: Overrides the default User-Agent header
    """
    api_key: str = ""
    consumer_key: Optional[str] = None
    consumer_secret: Optional[str] = None
    session: Optional[Any] = field(default=None, repr=False)
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    verify_ssl: bool = True
    user_agent: Optional[str] = None

    def __post_init__(self) -> None:
        if self.api_key is None:
            self.api_key = ""
        if not isinstance(self.api_key, str):
            raise ConfigurationError("api_key must be a string")
        if self.timeout is not None and self.timeout <= 0:
            raise ConfigurationError(f"timeout must be positive, got {self.timeout}")
        self.base_url = self.base_url.rstrip("/")

    def has_consumer_credentials(self) -> bool:
        """Check whether both consumer key and secret are set."""
        return bool(self.consumer_key) and bool(self.consumer_secret)


class Credentials:
    """
    Credentials owned by a single client.

    Everything is fixed at construction except the bearer token, which
    token issuance and invalidation replace. Token access is serialised
    with a lock so concurrent requests never see a torn update.
    """

    def __init__(self, config: ClientConfig):
        self._api_key = config.api_key
        self._consumer_key = config.consumer_key or ""
        self._consumer_secret = config.consumer_secret or ""
        self._bearer_token = ""
        self._lock = threading.Lock()

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def consumer_key(self) -> str:
        return self._consumer_key

    @property
    def consumer_secret(self) -> str:
        return self._consumer_secret

    @property
    def bearer_token(self) -> str:
        """Token obtained from the OAuth2 endpoint, empty if none."""
        with self._lock:
            return self._bearer_token

    def set_bearer_token(self, token: str) -> None:
        """Replace the generated bearer token."""
        with self._lock:
            self._bearer_token = token or ""

    def clear_bearer_token(self, expected: str) -> bool:
        """Clear the bearer token if it still equals ``expected``."""
        with self._lock:
            if self._bearer_token != expected:
                return False
            self._bearer_token = ""
            return True

    def authorization_token(self) -> str:
        """
        Token for the Authorization header.

        Returns:
            The generated bearer token when present, otherwise the API key

        Raises:
            ConfigurationError: If neither is set
        """
        with self._lock:
            token = self._bearer_token or self._api_key
        if not token:
            raise ConfigurationError(
                "No credentials configured",
                details="set api_key or generate an app-only bearer token",
            )
        return token

    def require_consumer_credentials(self) -> None:
        """Raise ConfigurationError unless consumer key and secret are both set."""
        missing = []
        if not self._consumer_key:
            missing.append("consumer_key")
        if not self._consumer_secret:
            missing.append("consumer_secret")
        if missing:
            raise ConfigurationError(
                "Consumer credentials are required for this operation",
                details="missing " + ", ".join(missing),
            )

    def export(self) -> Dict[str, str]:
        """Snapshot of the current credential values."""
        with self._lock:
            bearer_token = self._bearer_token
        return {
            "apiKey": self._api_key,
            "bearerToken": bearer_token,
            "consumerKey": self._consumer_key,
            "consumerSecret": self._consumer_secret,
        }
