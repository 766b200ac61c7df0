"""
Pytest configuration for http_factory_test tests.

This file contains shared fixtures and configuration
for all tests in the project.
"""

from typing import Dict

import pytest

from http_factory_test.reference import (
    ServerRequestFactory,
    StreamFactory,
    UriFactory,
)

pytest_plugins = ["pytester"]

CONTENT = "would you like some crumpets?"


@pytest.fixture
def stream_factory() -> StreamFactory:
    """Reference stream factory."""
    return StreamFactory()


@pytest.fixture
def uri_factory() -> UriFactory:
    """Reference URI factory."""
    return UriFactory()


@pytest.fixture
def server_request_factory() -> ServerRequestFactory:
    """Reference server request factory."""
    return ServerRequestFactory()


@pytest.fixture
def sample_server_params() -> Dict[str, str]:
    """Sample CGI-style server parameters for testing."""
    return {
        "REQUEST_METHOD": "POST",
        "REQUEST_URI": "/test?foo=1&bar=true",
        "QUERY_STRING": "foo=1&bar=true",
        "HTTP_HOST": "example.org",
        "SERVER_PROTOCOL": "HTTP/1.0",
    }


@pytest.fixture
def sample_content() -> str:
    """Sample stream content for testing."""
    return CONTENT
