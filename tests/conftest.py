"""
Shared fixtures for twtr tests.
"""

from unittest.mock import MagicMock

import pytest
import requests

from twtr import ClientConfig, TwitterClient


def make_response(status_code, body, request=None):
    """Build a canned requests.Response."""
    response = requests.Response()
    response.status_code = status_code
    response._content = body.encode("utf-8") if isinstance(body, str) else body
    response.encoding = "utf-8"
    response.request = request
    if request is not None:
        response.url = request.url
    return response


def mock_session(status_code=200, body="{}"):
    """Create a mock transport answering every send() with the same response."""
    session = MagicMock()
    session.send.side_effect = lambda prepared, **kwargs: make_response(
        status_code, body, prepared
    )
    return session


def sent_request(session):
    """Return the prepared request passed to the last send() call."""
    return session.send.call_args[0][0]


@pytest.fixture
def client_factory():
    """Create a client wired to a mock transport."""
    def factory(status_code=200, body="{}", api_key="key", **kwargs):
        session = mock_session(status_code, body)
        client = TwitterClient(ClientConfig(api_key=api_key, session=session, **kwargs))
        return client, session
    return factory
