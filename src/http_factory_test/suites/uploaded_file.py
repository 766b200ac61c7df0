"""
Conformance suite for uploaded file factories.
"""

from typing import Any

import pytest

from ..interfaces import (
    StreamInterface,
    UploadedFileFactoryInterface,
    UploadedFileInterface,
    UploadError,
)
from .base import FactoryTestCase

CONTENT = "would you like some crumpets?"


class UploadedFileFactoryTestCase(FactoryTestCase):
    """
    Checks ``create_uploaded_file``.

    The streams handed to the factory come from ``create_stream``, which
    defaults to the factory configured with ``--stream-factory``.
    """

    kind = "uploaded_file"

    factory: UploadedFileFactoryInterface

    def create_factory(self) -> Any:
        return self.create_uploaded_file_factory()

    def create_uploaded_file_factory(self) -> UploadedFileFactoryInterface:
        return self.config.create_factory("uploaded_file")

    def create_stream(self, content: str) -> StreamInterface:
        return self.config.create_factory("stream").create_stream(content)

    def assert_uploaded_file(
        self,
        file: Any,
        content: str,
        size: int,
        error: int = UploadError.OK,
        client_filename: Any = None,
        client_media_type: Any = None,
    ) -> None:
        assert isinstance(file, UploadedFileInterface)
        assert file.get_size() == size
        assert file.get_error() == error
        assert file.get_client_filename() == client_filename
        assert file.get_client_media_type() == client_media_type
        if error == UploadError.OK:
            assert str(file.get_stream()) == content

    def test_factory_implements_interface(self) -> None:
        """Test that the factory has the uploaded file factory method."""
        assert isinstance(self.factory, UploadedFileFactoryInterface)

    def test_create_uploaded_file_with_client_filename_and_media_type(self) -> None:
        """Test that every argument is reported back."""
        stream = self.create_stream(CONTENT)

        file = self.factory.create_uploaded_file(
            stream,
            len(CONTENT),
            UploadError.OK,
            "cool.txt",
            "text/plain",
        )

        self.assert_uploaded_file(file, CONTENT, len(CONTENT), UploadError.OK, "cool.txt", "text/plain")

    def test_create_uploaded_file_with_defaults(self) -> None:
        """Test that size defaults to the stream size and error to OK."""
        stream = self.create_stream(CONTENT)

        file = self.factory.create_uploaded_file(stream)

        self.assert_uploaded_file(file, CONTENT, stream.get_size())

    @pytest.mark.parametrize(
        "error",
        [error for error in UploadError if error != UploadError.OK],
        ids=lambda error: error.name,
    )
    def test_create_uploaded_file_with_error(self, error: UploadError) -> None:
        """Test that an upload error status is kept."""
        stream = self.create_stream(CONTENT)

        file = self.factory.create_uploaded_file(stream, len(CONTENT), error)

        self.assert_uploaded_file(file, CONTENT, len(CONTENT), error)
