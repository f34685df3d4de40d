"""
Tests for the base HTTP client: request building, sending and decoding.
"""

import logging
import threading
import time
from unittest.mock import MagicMock, patch

import pytest
import requests

from twtr import ClientConfig, __version__
from twtr.api import HTTPClient
from twtr.exceptions import (
    APIError,
    ConfigurationError,
    DecodeError,
    NotFoundError,
    TransportError,
)
from twtr.models import ListMembersResponse
from twtr.options import ListMembersOptions

from .conftest import make_response


@pytest.fixture
def http():
    """Create an HTTP client with a mock transport."""
    return HTTPClient(ClientConfig(api_key="key", session=MagicMock()))


class TestBuildRequest:
    """Tests for request building."""

    def test_path_params_are_encoded(self, http):
        """Test path values are percent-encoded."""
        request = http.build_request("GET", "lists/{id}/members", {"id": "a/b c"})
        assert request.url == "https://api.twitter.com/2/lists/a%2Fb%20c/members"

    def test_default_headers(self, http):
        """Test user agent, accept and bearer headers."""
        request = http.build_request("GET", "lists/{id}", {"id": "1"})
        assert request.headers["User-Agent"] == f"twtr/{__version__}"
        assert request.headers["Accept"] == "application/json"
        assert request.headers["Authorization"] == "Bearer key"

    def test_custom_user_agent_and_base_url(self):
        """Test configured user agent and base URL."""
        http = HTTPClient(ClientConfig(
            api_key="key",
            base_url="http://localhost:8080/",
            user_agent="my-app/1.0",
        ))
        request = http.build_request("GET", "lists/{id}", {"id": "1"})
        assert request.url == "http://localhost:8080/2/lists/1"
        assert request.headers["User-Agent"] == "my-app/1.0"

    def test_unset_options_omitted(self, http):
        """Test unset options contribute nothing to the query."""
        request = http.build_request(
            "GET", "lists/{id}/members", {"id": "1"}, options=ListMembersOptions()
        )
        assert "?" not in request.url

    def test_json_body(self, http):
        """Test JSON body is exactly the given object."""
        request = http.build_request(
            "POST", "lists/{id}/members", {"id": "1"}, json_data={"user_id": "2"}
        )
        assert request.method == "POST"
        assert request.body == b'{"user_id": "2"}'

    def test_missing_credentials(self):
        """Test bearer requests need an API key or token."""
        http = HTTPClient(ClientConfig(api_key=""))
        with pytest.raises(ConfigurationError):
            http.build_request("GET", "lists/{id}", {"id": "1"})

    def test_explicit_auth_skips_bearer(self):
        """Test explicit auth does not require bearer credentials."""
        http = HTTPClient(ClientConfig(api_key=""))
        request = http.build_request(
            "POST",
            "oauth2/token",
            form_data={"grant_type": "client_credentials"},
            auth=requests.auth.HTTPBasicAuth("k", "s"),
            versioned=False,
        )
        assert request.url == "https://api.twitter.com/oauth2/token"
        assert request.headers["Authorization"].startswith("Basic ")


class TestSend:
    """Tests for sending through the transport."""

    def test_timeout_and_verify(self, http):
        """Test configured and per-call timeouts reach the transport."""
        prepared = http.build_request("GET", "lists/{id}", {"id": "1"})
        http.session.send.return_value = make_response(200, "{}", prepared)

        http.send(prepared)
        assert http.session.send.call_args[1] == {"timeout": 30, "verify": True}

        http.send(prepared, timeout=2.5)
        assert http.session.send.call_args[1]["timeout"] == 2.5

    @pytest.mark.parametrize("exc,text", [
        (requests.exceptions.ConnectionError("refused"), "Connection failed"),
        (requests.exceptions.ReadTimeout("slow"), "timed out"),
        (requests.exceptions.TooManyRedirects("loop"), "Request failed"),
    ])
    def test_transport_failures(self, http, exc, text):
        """Test requests exceptions become TransportError."""
        http.session.send.side_effect = exc
        prepared = http.build_request("GET", "lists/{id}", {"id": "1"})

        with pytest.raises(TransportError) as exc_info:
            http.send(prepared)

        assert text in str(exc_info.value)
        assert exc_info.value.__cause__ is exc

    def test_single_attempt(self, http):
        """Test a failing call is not retried."""
        http.session.send.side_effect = requests.exceptions.ConnectTimeout("slow")

        with pytest.raises(TransportError):
            http.request("GET", "lists/{id}/members", ListMembersResponse, {"id": "1"})

        assert http.session.send.call_count == 1


class TestDecode:
    """Tests for envelope decoding."""

    def test_success(self, http):
        """Test a success envelope decodes."""
        response = make_response(200, '{"data": [{"id": "1"}], "meta": {"result_count": 1}}')
        result = http.decode(response, ListMembersResponse)
        assert result.users[0].id == "1"
        assert result.meta.result_count == 1

    @pytest.mark.parametrize("body", ["not json", "", "[1, 2]", '{"data": "nope"}'])
    def test_malformed_success_body(self, http, body):
        """Test malformed bodies on 2xx raise DecodeError."""
        with pytest.raises(DecodeError) as exc_info:
            http.decode(make_response(200, body), ListMembersResponse)
        assert exc_info.value.status_code == 200

    def test_non_2xx_without_errors(self, http):
        """Test a non-2xx status alone is a failure."""
        with pytest.raises(APIError) as exc_info:
            http.decode(make_response(503, '{"title": "Service Unavailable"}'), ListMembersResponse)
        assert exc_info.value.status_code == 503
        assert exc_info.value.response.title == "Service Unavailable"
        assert exc_info.value.errors == []

    def test_non_2xx_undecodable(self, http):
        """Test a non-2xx HTML body is an API error without a typed response."""
        with pytest.raises(APIError) as exc_info:
            http.decode(make_response(502, "<html>Bad Gateway</html>"), ListMembersResponse)
        assert exc_info.value.response is None
        assert "Bad Gateway" in str(exc_info.value)

    def test_response_data_kept(self, http):
        """Test the raw error payload is attached."""
        body = '{"errors": [{"title": "Not Found Error"}]}'
        with pytest.raises(NotFoundError) as exc_info:
            http.decode(make_response(404, body), ListMembersResponse)
        assert exc_info.value.response_data == {"errors": [{"title": "Not Found Error"}]}

    def test_api_error_logged(self, http, caplog):
        """Test API failures are logged at ERROR."""
        prepared = http.build_request("GET", "lists/{id}/members", {"id": "1"})
        response = make_response(404, '{"errors": [{"title": "Not Found Error"}]}', prepared)

        with caplog.at_level(logging.ERROR, logger="twtr"):
            with pytest.raises(NotFoundError):
                http.decode(response, ListMembersResponse)

        assert "status=404" in caplog.text
        assert "Not Found Error" in caplog.text

    def test_unknown_charset(self, http):
        """Test a charset Python cannot decode falls back instead of failing."""
        response = make_response(200, '{"data": [{"id": "1", "name": "caf\u00e9"}]}')
        response.headers["Content-Type"] = "application/json; charset=utf8mb4"
        response.encoding = "utf8mb4"
        result = http.decode(response, ListMembersResponse)
        assert result.users[0].id == "1"

    def test_unknown_charset_on_error_status(self, http):
        """Test an unknown charset on a failed call still raises APIError."""
        response = make_response(404, '{"errors": [{"title": "Not Found Error"}]}')
        response.encoding = "utf8mb4"
        with pytest.raises(NotFoundError):
            http.decode(response, ListMembersResponse)


class TestSessionLifecycle:
    """Tests for session ownership."""

    def test_injected_session_not_closed(self):
        """Test close() leaves a caller-owned session open."""
        session = MagicMock()
        http = HTTPClient(ClientConfig(api_key="key", session=session))
        http.close()
        session.close.assert_not_called()

    def test_own_session_closed(self):
        """Test close() closes a session the client created."""
        http = HTTPClient(ClientConfig(api_key="key"))
        assert isinstance(http.session, requests.Session)
        with http:
            pass
        assert http._session is None

    def test_concurrent_first_use_creates_one_session(self):
        """Test threads racing on first use share a single session."""
        http = HTTPClient(ClientConfig(api_key="key"))
        seen = []
        barrier = threading.Barrier(8)

        def slow_session():
            time.sleep(0.01)
            return MagicMock()

        def use():
            barrier.wait()
            seen.append(http.session)

        with patch("twtr.api._http.requests.Session", side_effect=slow_session) as factory:
            threads = [threading.Thread(target=use) for _ in range(8)]
            for t in threads:
                t.start()
            for t in threads:
                t.join()

        assert factory.call_count == 1
        assert len({id(s) for s in seen}) == 1
