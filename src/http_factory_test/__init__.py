"""
http_factory_test - conformance suites for HTTP message factories

Abstract pytest suites that any implementation of the stream, URI,
request, server request, response and uploaded file factory interfaces
can subclass to prove it follows the shared contract.
"""

__version__ = "0.1.0"

from .config import FactoryConfig
from .exceptions import (
    ConfigurationError,
    HTTPFactoryError,
    InvalidArgumentError,
    StreamError,
)
from .interfaces import (
    MessageInterface,
    RequestFactoryInterface,
    RequestInterface,
    ResponseFactoryInterface,
    ResponseInterface,
    ServerRequestFactoryInterface,
    ServerRequestInterface,
    StreamFactoryInterface,
    StreamInterface,
    UploadedFileFactoryInterface,
    UploadedFileInterface,
    UploadError,
    UriFactoryInterface,
    UriInterface,
)

__all__ = [
    "ConfigurationError",
    "FactoryConfig",
    "HTTPFactoryError",
    "InvalidArgumentError",
    "MessageInterface",
    "RequestFactoryInterface",
    "RequestInterface",
    "ResponseFactoryInterface",
    "ResponseInterface",
    "ServerRequestFactoryInterface",
    "ServerRequestInterface",
    "StreamError",
    "StreamFactoryInterface",
    "StreamInterface",
    "UploadError",
    "UploadedFileFactoryInterface",
    "UploadedFileInterface",
    "UriFactoryInterface",
    "UriInterface",
]
