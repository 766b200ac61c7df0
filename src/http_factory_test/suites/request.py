"""
Conformance suite for request factories.
"""

from typing import Any

import pytest

from ..interfaces import RequestFactoryInterface, RequestInterface, UriInterface
from .base import FactoryTestCase
from .server_request import METHODS

URI = "http://example.org/test?foo=1&bar=true"


class RequestFactoryTestCase(FactoryTestCase):
    """
    Checks ``create_request``.

    URI objects are built with ``create_uri``, which defaults to the
    factory configured with ``--uri-factory``.
    """

    kind = "request"

    factory: RequestFactoryInterface

    def create_factory(self) -> Any:
        return self.create_request_factory()

    def create_request_factory(self) -> RequestFactoryInterface:
        return self.config.create_factory("request")

    def create_uri(self, uri: str) -> UriInterface:
        return self.config.create_factory("uri").create_uri(uri)

    def assert_request(self, request: Any, method: str, uri: str) -> None:
        assert isinstance(request, RequestInterface)
        assert request.get_method() == method
        assert str(request.get_uri()) == uri

    def test_factory_implements_interface(self) -> None:
        """Test that the factory has the request factory method."""
        assert isinstance(self.factory, RequestFactoryInterface)

    @pytest.mark.parametrize("method", METHODS)
    def test_create_request(self, method: str) -> None:
        """Test creating a request from a method and a URI string."""
        request = self.factory.create_request(method, URI)

        self.assert_request(request, method, URI)

    @pytest.mark.parametrize("method", METHODS)
    def test_create_request_with_uri_object(self, method: str) -> None:
        """Test creating a request from a method and a URI object."""
        request = self.factory.create_request(method, self.create_uri(URI))

        self.assert_request(request, method, URI)
