"""
Reference stream implementation.

Wraps a Python file object and exposes the stream interface on top of
it. Strings are copied into an in-memory buffer first, so every stream
is backed by a real file-like object.
"""

import io
import logging
import os
from typing import IO, Any, Optional, Union

from ..exceptions import HTTPFactoryError, InvalidArgumentError, StreamError

logger = logging.getLogger(__name__)

ENCODING = "utf-8"

# Lone surrogates are valid in a str and must survive a round trip
ENCODING_ERRORS = "surrogatepass"


class Stream:
    """
    Stream over a file object.

    Text written to the stream is encoded as UTF-8 when the underlying
    file is binary, and text read back is decoded the same way.
    """

    def __init__(self, resource: IO[Any]) -> None:
        """
        Initialize Stream.

        Args:
            resource: An open file object. It is used as-is, including
                its current position.
        """
        if not hasattr(resource, "read") or not hasattr(resource, "seek"):
            raise InvalidArgumentError(
                f"stream resource must be a file object, got {type(resource).__name__}"
            )
        self._resource: Optional[IO[Any]] = resource

    @classmethod
    def from_string(cls, content: Union[str, bytes] = "") -> "Stream":
        """Create a stream holding ``content``, positioned at the start."""
        if isinstance(content, str):
            content = content.encode(ENCODING, ENCODING_ERRORS)
        return cls(io.BytesIO(content))

    def _require(self) -> IO[Any]:
        if self._resource is None:
            raise StreamError("Stream is detached")
        if self._resource.closed:
            raise StreamError("Stream is closed")
        return self._resource

    def _decode(self, data: Union[str, bytes]) -> str:
        if isinstance(data, bytes):
            return data.decode(ENCODING, ENCODING_ERRORS)
        return data

    def __str__(self) -> str:
        try:
            if self.is_seekable():
                self.seek(0)
            return self.get_contents()
        except (HTTPFactoryError, OSError, ValueError) as exc:
            logger.warning("Unable to render stream as text: %s", exc)
            return ""

    def close(self) -> None:
        """Close the underlying resource."""
        if self._resource is not None:
            self._resource.close()
            self._resource = None

    def detach(self) -> Optional[IO[Any]]:
        """Separate the underlying resource from the stream and return it."""
        resource, self._resource = self._resource, None
        return resource

    def get_size(self) -> Optional[int]:
        if self._resource is None or self._resource.closed:
            return None
        try:
            if self._resource.writable():
                self._resource.flush()
            return os.fstat(self._resource.fileno()).st_size
        except (AttributeError, OSError, io.UnsupportedOperation):
            pass
        if not self.is_seekable():
            return None
        position = self._resource.tell()
        size = self._resource.seek(0, os.SEEK_END)
        self._resource.seek(position)
        return size

    def tell(self) -> int:
        return self._require().tell()

    def eof(self) -> bool:
        if self._resource is None or self._resource.closed:
            return True
        size = self.get_size()
        return size is not None and self.tell() >= size

    def is_seekable(self) -> bool:
        if self._resource is None or self._resource.closed:
            return False
        return self._resource.seekable()

    def seek(self, offset: int, whence: int = os.SEEK_SET) -> None:
        if not self.is_seekable():
            raise StreamError("Stream is not seekable")
        self._require().seek(offset, whence)

    def rewind(self) -> None:
        self.seek(0)

    def is_writable(self) -> bool:
        if self._resource is None or self._resource.closed:
            return False
        return self._resource.writable()

    def write(self, data: Union[str, bytes]) -> int:
        if not self.is_writable():
            raise StreamError("Cannot write to a non-writable stream")
        resource = self._require()
        if isinstance(resource, io.TextIOBase):
            if isinstance(data, bytes):
                data = data.decode(ENCODING, ENCODING_ERRORS)
        elif isinstance(data, str):
            data = data.encode(ENCODING, ENCODING_ERRORS)
        return resource.write(data)

    def is_readable(self) -> bool:
        if self._resource is None or self._resource.closed:
            return False
        return self._resource.readable()

    def read(self, length: int = -1) -> str:
        if not self.is_readable():
            raise StreamError("Cannot read from a non-readable stream")
        return self._decode(self._require().read(length))

    def get_contents(self) -> str:
        return self.read()

    @property
    def closed(self) -> bool:
        """Get whether the stream is closed or detached."""
        return self._resource is None or self._resource.closed
