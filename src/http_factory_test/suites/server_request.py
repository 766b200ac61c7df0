"""
Conformance suite for server request factories.

Besides the method and URI precedence rules, the suite checks that a
server request is built only from the arguments given to the factory.
Ambient CGI state (``os.environ`` and a form body waiting on
``sys.stdin``) is set up before each isolation test and must not show
up in the request.
"""

import io
import os
import sys
from typing import Any, Dict

import pytest

from ..interfaces import (
    ServerRequestFactoryInterface,
    ServerRequestInterface,
    UriInterface,
)
from .base import FactoryTestCase

METHODS = ["GET", "POST", "PUT", "DELETE", "OPTIONS", "HEAD"]

OVERRIDDEN_URI = "https://example.com/foobar?bar=2&foo=false"

EXPLICIT_URI = "http://example.org/test"

BOUNDARY = "----http-factory-boundary"

MULTIPART_BODY = (
    f"--{BOUNDARY}\r\n"
    'Content-Disposition: form-data; name="upload"; filename="foobar.dat"\r\n'
    "Content-Type: application/octet-stream\r\n"
    "\r\n"
    "data\r\n"
    f"--{BOUNDARY}--\r\n"
)


def server_params(method: str) -> Dict[str, str]:
    """CGI-style server map for a request to ``/test?foo=1&bar=true``."""
    return {
        "REQUEST_METHOD": method,
        "REQUEST_URI": "/test?foo=1&bar=true",
        "QUERY_STRING": "foo=1&bar=true",
        "HTTP_HOST": "example.org",
    }


SERVERS = [pytest.param(server_params(method), id=method) for method in METHODS]


def set_ambient_body(monkeypatch: Any, content_type: str, body: str) -> None:
    """Make a request body available the way a CGI program would receive it."""
    data = body.encode("utf-8")
    monkeypatch.setenv("CONTENT_TYPE", content_type)
    monkeypatch.setenv("CONTENT_LENGTH", str(len(data)))
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(data), encoding="utf-8"))


class ServerRequestFactoryTestCase(FactoryTestCase):
    """
    Checks ``create_server_request``.

    Subclasses provide the factory through ``create_server_request_factory``
    and URI objects through ``create_uri``. Both default to the factories
    configured with ``--server-request-factory`` and ``--uri-factory``.
    """

    kind = "server_request"

    factory: ServerRequestFactoryInterface

    def create_factory(self) -> Any:
        return self.create_server_request_factory()

    def create_server_request_factory(self) -> ServerRequestFactoryInterface:
        return self.config.create_factory("server_request")

    def create_uri(self, uri: str) -> UriInterface:
        return self.config.create_factory("uri").create_uri(uri)

    def assert_server_request(self, request: Any, method: str, uri: str) -> None:
        assert isinstance(request, ServerRequestInterface)
        assert request.get_method() == method
        assert str(request.get_uri()) == uri

    def create_explicit_request(self, server: Any = None) -> Any:
        return self.factory.create_server_request(server or {}, "POST", EXPLICIT_URI)

    def test_factory_implements_interface(self) -> None:
        """Test that the factory has the server request factory method."""
        assert isinstance(self.factory, ServerRequestFactoryInterface)

    @pytest.mark.parametrize("server", SERVERS)
    def test_create_server_request(self, server: Dict[str, str]) -> None:
        """Test that method and URI are derived from the server map."""
        method = server["REQUEST_METHOD"]
        uri = f"http://{server['HTTP_HOST']}{server['REQUEST_URI']}"

        request = self.factory.create_server_request(server)

        self.assert_server_request(request, method, uri)

    @pytest.mark.parametrize("server", SERVERS)
    def test_create_server_request_with_overridden_method(self, server: Dict[str, str]) -> None:
        """Test that an explicit method wins over REQUEST_METHOD."""
        method = "OPTIONS"
        uri = f"http://{server['HTTP_HOST']}{server['REQUEST_URI']}"

        request = self.factory.create_server_request(server, method)

        self.assert_server_request(request, method, uri)

    @pytest.mark.parametrize("server", SERVERS)
    def test_create_server_request_with_overridden_uri(self, server: Dict[str, str]) -> None:
        """Test that an explicit URI string wins over HTTP_HOST and REQUEST_URI."""
        method = server["REQUEST_METHOD"]

        request = self.factory.create_server_request(server, None, OVERRIDDEN_URI)

        self.assert_server_request(request, method, OVERRIDDEN_URI)

    @pytest.mark.parametrize("server", SERVERS)
    def test_create_server_request_with_uri_object(self, server: Dict[str, str]) -> None:
        """Test that a URI object is accepted and used verbatim."""
        method = server["REQUEST_METHOD"]
        uri = f"http://{server['HTTP_HOST']}{server['REQUEST_URI']}"

        request = self.factory.create_server_request({}, method, self.create_uri(uri))

        self.assert_server_request(request, method, uri)

    def test_create_server_request_does_not_read_server_environment(self, monkeypatch: Any) -> None:
        """Test that os.environ does not leak into the server params."""
        monkeypatch.setenv("HTTP_X_FOO", "bar")

        request = self.create_explicit_request()
        server_params = request.get_server_params()

        assert dict(server_params) != dict(os.environ)
        assert "HTTP_X_FOO" not in server_params

    def test_create_server_request_does_not_read_cookie_environment(self, monkeypatch: Any) -> None:
        """Test that HTTP_COOKIE in the environment is not parsed into cookie params."""
        monkeypatch.setenv("HTTP_COOKIE", "foo=bar")

        request = self.create_explicit_request()

        assert not request.get_cookie_params()

    def test_create_server_request_does_not_read_query_environment(self, monkeypatch: Any) -> None:
        """Test that QUERY_STRING in the environment is not parsed into query params."""
        monkeypatch.setenv("QUERY_STRING", "foo=bar")

        request = self.create_explicit_request()

        assert not request.get_query_params()

    def test_create_server_request_does_not_read_uploaded_files(self, monkeypatch: Any) -> None:
        """Test that a multipart body on stdin is not turned into uploaded files."""
        set_ambient_body(
            monkeypatch,
            f"multipart/form-data; boundary={BOUNDARY}",
            MULTIPART_BODY,
        )

        request = self.create_explicit_request()

        assert not request.get_uploaded_files()

    def test_create_server_request_does_not_read_posted_body(self, monkeypatch: Any) -> None:
        """Test that a form body on stdin is not parsed, even for a form content type."""
        content_type = "application/x-www-form-urlencoded"
        set_ambient_body(monkeypatch, content_type, "foo=bar")

        request = self.create_explicit_request({"CONTENT_TYPE": content_type})

        assert not request.get_parsed_body()

    def test_create_server_request_is_independent_of_environment(self, monkeypatch: Any) -> None:
        """Test that the same arguments give the same collections whatever the ambient state."""
        before = self.create_explicit_request()

        monkeypatch.setenv("HTTP_X_FOO", "bar")
        monkeypatch.setenv("HTTP_COOKIE", "foo=bar")
        monkeypatch.setenv("QUERY_STRING", "foo=bar")
        set_ambient_body(monkeypatch, "application/x-www-form-urlencoded", "foo=bar")
        after = self.create_explicit_request()

        assert after.get_server_params() == before.get_server_params()
        assert after.get_cookie_params() == before.get_cookie_params()
        assert after.get_query_params() == before.get_query_params()
        assert after.get_uploaded_files() == before.get_uploaded_files()
        assert after.get_parsed_body() == before.get_parsed_body()

    def test_create_server_request_does_not_read_uri_from_environment(self, monkeypatch: Any) -> None:
        """Test that HTTP_HOST and REQUEST_URI in the environment do not build the URI."""
        monkeypatch.setenv("HTTP_HOST", "leak.example")
        monkeypatch.setenv("REQUEST_URI", "/leak")

        request = self.factory.create_server_request({"REQUEST_METHOD": "GET"})

        assert "leak" not in str(request.get_uri())

    def test_create_server_request_does_not_read_scheme_from_environment(self, monkeypatch: Any) -> None:
        """Test that HTTPS in the environment does not switch the scheme."""
        monkeypatch.setenv("HTTPS", "on")
        server = server_params("GET")

        request = self.factory.create_server_request(server)

        assert str(request.get_uri()) == f"http://{server['HTTP_HOST']}{server['REQUEST_URI']}"

    def test_create_server_request_does_not_read_method_from_environment(self, monkeypatch: Any) -> None:
        """Test that REQUEST_METHOD in the environment is not used as the method."""
        monkeypatch.setenv("REQUEST_METHOD", "DELETE")
        server = {"HTTP_HOST": "example.org", "REQUEST_URI": "/test"}

        try:
            request = self.factory.create_server_request(server)
        except ValueError:
            # Refusing a request without a method is conforming
            return

        assert request.get_method() != "DELETE"
