"""
twtr - Python client for the Twitter API v2.

Lists, list members and OAuth2 app-only bearer tokens.
"""

import logging

__version__ = "0.1.0"
__author__ = "twtr contributors"

logging.getLogger(__name__).addHandler(logging.NullHandler())

from .config import ClientConfig, Credentials  # noqa: E402
from .exceptions import (  # noqa: E402
    TwitterError,
    ConfigurationError,
    InvalidArgumentError,
    TransportError,
    DecodeError,
    APIError,
    AuthenticationError,
    PermissionDeniedError,
    NotFoundError,
    InvalidRequestError,
)
from .api import TwitterClient, get_client  # noqa: E402

__all__ = [
    "__version__",
    "TwitterClient",
    "get_client",
    "ClientConfig",
    "Credentials",
    "TwitterError",
    "ConfigurationError",
    "InvalidArgumentError",
    "TransportError",
    "DecodeError",
    "APIError",
    "AuthenticationError",
    "PermissionDeniedError",
    "NotFoundError",
    "InvalidRequestError",
]
