"""
Base HTTP client for the Twitter API.

Builds requests, sends them through the configured transport and decodes
response envelopes into typed models.
"""

import logging
import threading
from typing import Optional, Dict, Any, Type, TypeVar
from urllib.parse import quote

import requests
from pydantic import ValidationError

from .. import __version__
from ..config import ClientConfig, Credentials
from ..exceptions import (
    APIError,
    AuthenticationError,
    DecodeError,
    InvalidArgumentError,
    InvalidRequestError,
    NotFoundError,
    PermissionDeniedError,
    TransportError,
)
from ..models import APIResponse
from ..options import to_params

logger = logging.getLogger(__name__)

ResponseT = TypeVar("ResponseT", bound=APIResponse)

_STATUS_ERRORS = {
    400: InvalidRequestError,
    401: AuthenticationError,
    403: PermissionDeniedError,
    404: NotFoundError,
}


def require_id(name: str, value: Optional[str]) -> str:
    """
    Validate a required identifier argument.

    Raises:
        InvalidArgumentError: If value is None or blank
    """
    if value is None or not str(value).strip():
        raise InvalidArgumentError(f"{name} is required")
    return str(value)


class HTTPClient:
    """
    Base HTTP client for the Twitter API.

    Handles:
    - Request building (path, query, bearer auth, JSON body)
    - Sending through an injectable transport
    - Envelope decoding and error classification
    """

    API_VERSION = "2"

    def __init__(self, config: ClientConfig, credentials: Optional[Credentials] = None):
        """
        Initialize the HTTP client.

        Args:
            config: Client configuration
            credentials: Credential holder. Built from config if not provided.
        """
        self.config = config
        self.credentials = credentials or Credentials(config)
        self._session = config.session
        self._owns_session = config.session is None
        self._session_lock = threading.Lock()

    @property
    def session(self):
        """Get the configured transport, creating a requests session if needed."""
        with self._session_lock:
            if self._session is None:
                self._session = requests.Session()
                self._owns_session = True
            return self._session

    @property
    def base_url(self) -> str:
        """Get the base URL for versioned API requests."""
        return f"{self.config.base_url}/{self.API_VERSION}"

    def _default_headers(self) -> Dict[str, str]:
        return {
            "User-Agent": self.config.user_agent or f"twtr/{__version__}",
            "Accept": "application/json",
        }

    def build_url(
        self,
        path_template: str,
        path_params: Optional[Dict[str, str]] = None,
        versioned: bool = True,
    ) -> str:
        """
        Substitute path parameters into an endpoint template.

        Args:
            path_template: Path such as ``lists/{id}/members``
            path_params: Values for the template placeholders
            versioned: Prefix with the API version segment

        Returns:
            Absolute URL
        """
        encoded = {k: quote(str(v), safe="") for k, v in (path_params or {}).items()}
        path = path_template.format(**encoded).lstrip("/")
        root = self.base_url if versioned else self.config.base_url
        return f"{root}/{path}"

    def build_request(
        self,
        method: str,
        path_template: str,
        path_params: Optional[Dict[str, str]] = None,
        options: Any = None,
        json_data: Optional[Dict[str, Any]] = None,
        form_data: Optional[Dict[str, str]] = None,
        auth: Optional[requests.auth.AuthBase] = None,
        versioned: bool = True,
    ) -> requests.PreparedRequest:
        """
        Build a fully formed request.

        Args:
            method: HTTP method
            path_template: Endpoint path template
            path_params: Values substituted into the template
            options: Option record contributing query parameters
            json_data: JSON body
            form_data: Form-encoded body
            auth: Explicit auth. Bearer auth from the credentials otherwise.
            versioned: Whether the path lives under the API version prefix

        Returns:
            Prepared request ready for the transport

        Raises:
            ConfigurationError: If no bearer credential is available
        """
        headers = self._default_headers()
        if auth is None:
            headers["Authorization"] = f"Bearer {self.credentials.authorization_token()}"

        request = requests.Request(
            method=method,
            url=self.build_url(path_template, path_params, versioned),
            headers=headers,
            params=to_params(options),
            json=json_data,
            data=form_data,
            auth=auth,
        )
        return request.prepare()

    def send(
        self,
        prepared: requests.PreparedRequest,
        timeout: Optional[float] = None,
    ) -> requests.Response:
        """
        Send a prepared request once.

        Raises:
            TransportError: On connection failure, timeout or any other
                transport-level error
        """
        logger.debug(f"Request: {prepared.method} {prepared.url}")
        try:
            response = self.session.send(
                prepared,
                timeout=timeout if timeout is not None else self.config.timeout,
                verify=self.config.verify_ssl,
            )
        except requests.exceptions.ConnectionError as e:
            raise TransportError(f"Connection failed: {e}") from e
        except requests.exceptions.Timeout as e:
            raise TransportError(f"Request timed out: {e}") from e
        except requests.exceptions.RequestException as e:
            raise TransportError(f"Request failed: {e}") from e

        logger.debug(f"Response: {response.status_code}")
        return response

    def decode(
        self,
        response: requests.Response,
        model_cls: Type[ResponseT],
    ) -> ResponseT:
        """
        Decode a response envelope into a typed model.

        Args:
            response: Raw HTTP response
            model_cls: Response model for the endpoint

        Returns:
            Decoded model on success

        Raises:
            DecodeError: Malformed or ill-shaped body on a 2xx status
            APIError: Non-empty ``errors`` or a non-2xx status. The
                partially decoded model is attached as ``response``.
        """
        status = response.status_code
        ok = 200 <= status < 300
        method, url = self._describe(response)

        try:
            body = response.json()
            if not isinstance(body, dict):
                raise ValueError(f"expected a JSON object, got {type(body).__name__}")
            result = model_cls.model_validate(body)
        except (ValueError, ValidationError) as e:
            if ok:
                raise DecodeError(
                    "Could not decode API response",
                    details=str(e),
                    status_code=status,
                ) from e
            text = response.text or f"HTTP {status}"
            logger.error("API error [%s %s] status=%d undecodable body", method, url, status)
            raise self._api_error(status, f"API request failed: {text}", {}, None) from e

        if result.errors or not ok:
            summary = result.error_summary() or f"HTTP {status}"
            logger.error(
                "API error [%s %s] status=%d title=%s type=%s",
                method,
                url,
                status,
                result.title or (result.errors[0].title if result.errors else None),
                result.type or (result.errors[0].type if result.errors else None),
            )
            raise self._api_error(status, f"API request failed: {summary}", body, result)

        if not result.has_payload():
            raise DecodeError(
                "API response contained neither data nor errors",
                status_code=status,
            )
        return result

    def _api_error(
        self,
        status: int,
        message: str,
        response_data: Dict[str, Any],
        result: Optional[APIResponse],
    ) -> APIError:
        error_cls = _STATUS_ERRORS.get(status, APIError)
        return error_cls(
            message,
            status_code=status,
            response_data=response_data,
            response=result,
        )

    @staticmethod
    def _describe(response: requests.Response):
        request = getattr(response, "request", None)
        if request is None:
            return None, getattr(response, "url", None)
        return request.method, request.url

    def request(
        self,
        method: str,
        path_template: str,
        model_cls: Type[ResponseT],
        path_params: Optional[Dict[str, str]] = None,
        options: Any = None,
        json_data: Optional[Dict[str, Any]] = None,
        form_data: Optional[Dict[str, str]] = None,
        auth: Optional[requests.auth.AuthBase] = None,
        versioned: bool = True,
        timeout: Optional[float] = None,
    ) -> ResponseT:
        """
        Make an API request: build, send once, decode.

        Args:
            method: HTTP method
            path_template: Endpoint path template
            model_cls: Response model to decode into
            path_params: Values substituted into the template
            options: Option record contributing query parameters
            json_data: JSON body
            form_data: Form-encoded body
            auth: Explicit auth, bearer auth otherwise
            versioned: Whether the path lives under the API version prefix
            timeout: Per-call timeout overriding the configured one

        Returns:
            Decoded response model
        """
        prepared = self.build_request(
            method,
            path_template,
            path_params=path_params,
            options=options,
            json_data=json_data,
            form_data=form_data,
            auth=auth,
            versioned=versioned,
        )
        response = self.send(prepared, timeout=timeout)
        return self.decode(response, model_cls)

    def close(self) -> None:
        """Close the HTTP session if this client created it."""
        with self._session_lock:
            if self._session is not None and self._owns_session:
                self._session.close()
                self._session = None

    def __enter__(self) -> "HTTPClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
