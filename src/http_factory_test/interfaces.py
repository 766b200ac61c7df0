"""
Message and factory interfaces checked by the conformance suites.

Every interface is a runtime-checkable protocol, so an implementation
satisfies it by shape alone and does not need to inherit from anything
in this package. ``isinstance`` only verifies that the methods exist;
the suites verify what they return.
"""

from enum import IntEnum
from typing import (
    IO,
    Any,
    Dict,
    List,
    Mapping,
    Optional,
    Union,
)

from typing_extensions import Protocol, runtime_checkable


class UploadError(IntEnum):
    """Status codes attached to an uploaded file."""
    OK = 0
    INI_SIZE = 1
    FORM_SIZE = 2
    PARTIAL = 3
    NO_FILE = 4
    NO_TMP_DIR = 6
    CANT_WRITE = 7
    EXTENSION = 8


@runtime_checkable
class StreamInterface(Protocol):
    """
    A readable and/or writable body.

    ``str(stream)`` must return the whole content from the beginning,
    regardless of the current position, and must never raise.
    """

    def __str__(self) -> str: ...

    def close(self) -> None: ...

    def get_size(self) -> Optional[int]: ...

    def tell(self) -> int: ...

    def eof(self) -> bool: ...

    def is_seekable(self) -> bool: ...

    def seek(self, offset: int, whence: int = 0) -> None: ...

    def rewind(self) -> None: ...

    def is_writable(self) -> bool: ...

    def write(self, data: Union[str, bytes]) -> int: ...

    def is_readable(self) -> bool: ...

    def read(self, length: int = -1) -> str: ...

    def get_contents(self) -> str:
        """Return the remaining content from the current position."""
        ...


@runtime_checkable
class UriInterface(Protocol):
    """A URI value; ``str(uri)`` renders the full reference."""

    def __str__(self) -> str: ...

    def get_scheme(self) -> str: ...

    def get_authority(self) -> str: ...

    def get_host(self) -> str: ...

    def get_port(self) -> Optional[int]: ...

    def get_path(self) -> str: ...

    def get_query(self) -> str: ...

    def get_fragment(self) -> str: ...


@runtime_checkable
class MessageInterface(Protocol):
    """Parts shared by requests and responses."""

    def get_protocol_version(self) -> str: ...

    def get_headers(self) -> Dict[str, List[str]]: ...

    def has_header(self, name: str) -> bool: ...

    def get_header(self, name: str) -> List[str]: ...

    def get_header_line(self, name: str) -> str: ...

    def get_body(self) -> StreamInterface: ...


@runtime_checkable
class RequestInterface(MessageInterface, Protocol):
    """An outgoing, client-side request."""

    def get_method(self) -> str: ...

    def get_uri(self) -> UriInterface: ...

    def get_request_target(self) -> str: ...


@runtime_checkable
class ServerRequestInterface(RequestInterface, Protocol):
    """
    An incoming, server-side request.

    The parameter collections hold only what was given to the value
    explicitly. They are never filled from the process environment.
    """

    def get_server_params(self) -> Dict[str, Any]: ...

    def get_cookie_params(self) -> Dict[str, str]: ...

    def get_query_params(self) -> Dict[str, Any]: ...

    def get_uploaded_files(self) -> Dict[str, Any]: ...

    def get_parsed_body(self) -> Any: ...

    def get_attributes(self) -> Dict[str, Any]: ...


@runtime_checkable
class ResponseInterface(MessageInterface, Protocol):
    """An outgoing, server-side response."""

    def get_status_code(self) -> int: ...

    def get_reason_phrase(self) -> str: ...


@runtime_checkable
class UploadedFileInterface(Protocol):
    """A file received through an upload."""

    def get_stream(self) -> StreamInterface: ...

    def get_size(self) -> Optional[int]: ...

    def get_error(self) -> int: ...

    def get_client_filename(self) -> Optional[str]: ...

    def get_client_media_type(self) -> Optional[str]: ...


@runtime_checkable
class StreamFactoryInterface(Protocol):

    def create_stream(self, source: Union[str, IO[Any]] = "") -> StreamInterface:
        """
        Create a stream from a string or from an open file object.

        Args:
            source: Text to copy into a new stream, or a file object
                to wrap. A file object is used as-is, whatever its
                current position.
        """
        ...

    def create_stream_from_file(self, filename: str, mode: str = "r") -> StreamInterface:
        """Open ``filename`` with ``mode`` and wrap the result."""
        ...


@runtime_checkable
class ServerRequestFactoryInterface(Protocol):

    def create_server_request(
        self,
        server: Mapping[str, Any],
        method: Optional[str] = None,
        uri: Union[str, UriInterface, None] = None,
    ) -> ServerRequestInterface:
        """
        Create a server request from a CGI-style server map.

        Args:
            server: Server parameters such as ``REQUEST_METHOD``,
                ``HTTP_HOST`` and ``REQUEST_URI``
            method: Overrides the method found in ``server``
            uri: Overrides the URI derived from ``server``

        The result must be built from the arguments alone. Implementations
        must not read ``os.environ``, ``sys.stdin`` or any other ambient
        state to fill in the method, the URI, cookies, query, body or
        uploaded files.

        The derived URI is compared as rendered by ``str()``. Implementations
        may normalise it: scheme and host lowercased, and the default port
        of the scheme (80 for http, 443 for https) dropped. The conformance
        server maps therefore only use lowercase hosts without default ports,
        so ``"http://" + HTTP_HOST + REQUEST_URI`` is expected verbatim.
        """
        ...


@runtime_checkable
class RequestFactoryInterface(Protocol):

    def create_request(self, method: str, uri: Union[str, UriInterface]) -> RequestInterface: ...


@runtime_checkable
class ResponseFactoryInterface(Protocol):

    def create_response(self, code: int = 200, reason_phrase: str = "") -> ResponseInterface:
        """
        Create a response.

        An empty ``reason_phrase`` lets the implementation pick the
        standard phrase for ``code``.
        """
        ...


@runtime_checkable
class UriFactoryInterface(Protocol):

    def create_uri(self, uri: str = "") -> UriInterface:
        """Parse ``uri``; raise ``ValueError`` when it is malformed."""
        ...


@runtime_checkable
class UploadedFileFactoryInterface(Protocol):

    def create_uploaded_file(
        self,
        stream: StreamInterface,
        size: Optional[int] = None,
        error: int = UploadError.OK,
        client_filename: Optional[str] = None,
        client_media_type: Optional[str] = None,
    ) -> UploadedFileInterface:
        """
        Create an uploaded file around ``stream``.

        When ``size`` is None the size of ``stream`` is used.
        """
        ...
