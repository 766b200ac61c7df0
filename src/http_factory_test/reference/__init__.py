"""
Reference implementation of the message and factory interfaces.

Used by this package's own tests to exercise the conformance suites,
and as a small worked example for implementers.
"""

from .factories import (
    RequestFactory,
    ResponseFactory,
    ServerRequestFactory,
    StreamFactory,
    UploadedFileFactory,
    UriFactory,
)
from .messages import Request, Response, ServerRequest, UploadedFile, Uri
from .streams import Stream

__all__ = [
    "Request",
    "RequestFactory",
    "Response",
    "ResponseFactory",
    "ServerRequest",
    "ServerRequestFactory",
    "Stream",
    "StreamFactory",
    "UploadedFile",
    "UploadedFileFactory",
    "Uri",
    "UriFactory",
]
