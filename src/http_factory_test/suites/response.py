"""
Conformance suite for response factories.
"""

from typing import Any

import pytest

from ..interfaces import ResponseFactoryInterface, ResponseInterface
from .base import FactoryTestCase

CODES = [200, 301, 404, 500]


class ResponseFactoryTestCase(FactoryTestCase):
    """Checks ``create_response``."""

    kind = "response"

    factory: ResponseFactoryInterface

    def create_factory(self) -> Any:
        return self.create_response_factory()

    def create_response_factory(self) -> ResponseFactoryInterface:
        return self.config.create_factory("response")

    def assert_response(self, response: Any, code: int) -> None:
        assert isinstance(response, ResponseInterface)
        assert response.get_status_code() == code

    def test_factory_implements_interface(self) -> None:
        """Test that the factory has the response factory method."""
        assert isinstance(self.factory, ResponseFactoryInterface)

    @pytest.mark.parametrize("code", CODES)
    def test_create_response(self, code: int) -> None:
        """Test that the status code is kept."""
        response = self.factory.create_response(code)

        self.assert_response(response, code)

    def test_create_response_with_default_code(self) -> None:
        """Test that the default response is a 200."""
        response = self.factory.create_response()

        self.assert_response(response, 200)

    @pytest.mark.parametrize("code", CODES)
    def test_create_response_with_reason_phrase(self, code: int) -> None:
        """Test that an explicit reason phrase is kept verbatim."""
        response = self.factory.create_response(code, "Custom Phrase")

        self.assert_response(response, code)
        assert response.get_reason_phrase() == "Custom Phrase"
