"""
OAuth2 app-only authentication.

Exchanges the consumer key and secret for a bearer token (client
credentials grant) and invalidates issued tokens.
"""

import logging
from typing import Optional
from urllib.parse import quote

from requests.auth import HTTPBasicAuth

from .api._http import HTTPClient
from .exceptions import ConfigurationError, DecodeError
from .models import BearerTokenResponse, InvalidateTokenResponse

logger = logging.getLogger(__name__)


class OAuth2Client:
    """
    Client for the OAuth2 token endpoints.

    Supports:
    - App-only bearer token issuance
    - Bearer token invalidation

    A generated token is stored in the shared credential holder and used
    for the Authorization header of every later request.
    """

    TOKEN_ENDPOINT = "oauth2/token"
    INVALIDATE_ENDPOINT = "oauth2/invalidate_token"

    def __init__(self, http: HTTPClient):
        """
        Initialize OAuth2 client.

        Args:
            http: HTTP client instance
        """
        self._http = http

    @property
    def credentials(self):
        return self._http.credentials

    def _basic_auth(self) -> HTTPBasicAuth:
        # key and secret are URL-encoded before being base64-joined
        self.credentials.require_consumer_credentials()
        return HTTPBasicAuth(
            quote(self.credentials.consumer_key, safe=""),
            quote(self.credentials.consumer_secret, safe=""),
        )

    def generate_app_only_bearer_token(self, timeout: Optional[float] = None) -> bool:
        """
        Obtain an app-only bearer token and store it.

        Args:
            timeout: Per-call timeout in seconds

        Returns:
            True once the token has been stored

        Raises:
            ConfigurationError: If consumer key or secret is missing. No
                request is sent in that case.
            APIError: If the token endpoint rejects the credentials
            DecodeError: If the response has no access token
        """
        auth = self._basic_auth()
        result = self._http.request(
            "POST",
            self.TOKEN_ENDPOINT,
            BearerTokenResponse,
            form_data={"grant_type": "client_credentials"},
            auth=auth,
            versioned=False,
            timeout=timeout,
        )
        if result.token_type and result.token_type.lower() != "bearer":
            raise DecodeError(f"Unexpected token type: {result.token_type}")

        self.credentials.set_bearer_token(result.access_token)
        logger.info("App-only bearer token generated")
        return True

    def invalidate_bearer_token(self, timeout: Optional[float] = None) -> str:
        """
        Invalidate the stored bearer token.

        Args:
            timeout: Per-call timeout in seconds

        Returns:
            The invalidated token value

        Raises:
            ConfigurationError: If consumer credentials or a stored token are missing
        """
        auth = self._basic_auth()
        token = self.credentials.bearer_token
        if not token:
            raise ConfigurationError("No bearer token to invalidate")

        result = self._http.request(
            "POST",
            self.INVALIDATE_ENDPOINT,
            InvalidateTokenResponse,
            form_data={"access_token": token},
            auth=auth,
            versioned=False,
            timeout=timeout,
        )
        self.credentials.clear_bearer_token(token)
        logger.info("Bearer token invalidated")
        return result.access_token
