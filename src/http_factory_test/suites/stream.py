"""
Conformance suite for stream factories.
"""

import tempfile
from typing import Any

import pytest

from ..interfaces import StreamFactoryInterface, StreamInterface
from .base import FactoryTestCase

CONTENT = "would you like some crumpets?"

STRINGS = [
    pytest.param(CONTENT, id="sentence"),
    pytest.param("", id="empty"),
    pytest.param("line one\nline two\r\n", id="multiline"),
    pytest.param("café ☕", id="non-ascii"),
    pytest.param("\ud800", id="lone-surrogate"),
]


class StreamFactoryTestCase(FactoryTestCase):
    """
    Checks ``create_stream`` and ``create_stream_from_file``.

    Subclass this in a ``Test*`` class and either configure
    ``--stream-factory`` or override ``create_stream_factory``.
    """

    kind = "stream"

    factory: StreamFactoryInterface

    def create_factory(self) -> Any:
        return self.create_stream_factory()

    def create_stream_factory(self) -> StreamFactoryInterface:
        return self.config.create_factory("stream")

    def assert_stream(self, stream: Any, content: str) -> None:
        assert isinstance(stream, StreamInterface)
        assert str(stream) == content

    def test_factory_implements_interface(self) -> None:
        """Test that the factory has the stream factory methods."""
        assert isinstance(self.factory, StreamFactoryInterface)

    def test_create_stream(self) -> None:
        """Test creating a stream from an empty resource."""
        with tempfile.TemporaryFile() as resource:
            stream = self.factory.create_stream(resource)

            self.assert_stream(stream, "")

    def test_create_stream_with_content(self) -> None:
        """Test creating a stream from a resource left positioned after its content."""
        with tempfile.TemporaryFile() as resource:
            resource.write(CONTENT.encode("utf-8"))

            stream = self.factory.create_stream(resource)

            self.assert_stream(stream, CONTENT)

    @pytest.mark.parametrize("string", STRINGS)
    def test_create_stream_from_a_string(self, string: str) -> None:
        """Test that a string is copied into the stream verbatim."""
        stream = self.factory.create_stream(string)

        self.assert_stream(stream, string)

    def test_create_stream_without_arguments(self) -> None:
        """Test that the default stream is empty."""
        stream = self.factory.create_stream()

        self.assert_stream(stream, "")

    def test_create_stream_from_file(self, tmp_path: Any) -> None:
        """Test creating a stream from a file name."""
        path = tmp_path / "crumpets.txt"
        path.write_bytes(CONTENT.encode("utf-8"))

        stream = self.factory.create_stream_from_file(str(path))
        try:
            self.assert_stream(stream, CONTENT)
        finally:
            stream.close()
