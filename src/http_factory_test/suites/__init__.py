"""
Abstract conformance suites.

Subclass a suite in a ``Test*`` class to run it against an
implementation::

    from http_factory_test.suites import StreamFactoryTestCase

    class TestStreamFactory(StreamFactoryTestCase):
        def create_stream_factory(self):
            return MyStreamFactory()

Without the override, the factory named by ``--stream-factory`` (or
the ``stream_factory`` ini option, or ``HTTP_FACTORY_STREAM_FACTORY``)
is used.
"""

from .base import FactoryTestCase
from .request import RequestFactoryTestCase
from .response import ResponseFactoryTestCase
from .server_request import ServerRequestFactoryTestCase
from .stream import StreamFactoryTestCase
from .uploaded_file import UploadedFileFactoryTestCase
from .uri import UriFactoryTestCase

__all__ = [
    "FactoryTestCase",
    "RequestFactoryTestCase",
    "ResponseFactoryTestCase",
    "ServerRequestFactoryTestCase",
    "StreamFactoryTestCase",
    "UploadedFileFactoryTestCase",
    "UriFactoryTestCase",
]
