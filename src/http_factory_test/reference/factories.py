"""
Reference factories.

One factory per interface, building the values from ``messages`` and
``streams``. The server request factory works only from the arguments
it is given; it never looks at ``os.environ`` or ``sys.stdin``.
"""

import logging
from typing import IO, Any, Mapping, Optional, Union

from ..exceptions import InvalidArgumentError, StreamError
from ..interfaces import UploadError, UriInterface
from .messages import Request, Response, ServerRequest, UploadedFile, Uri
from .streams import Stream

logger = logging.getLogger(__name__)


def _as_uri(uri: Union[str, UriInterface]) -> Uri:
    if isinstance(uri, Uri):
        return uri
    if isinstance(uri, str):
        return Uri.parse(uri)
    # Foreign implementations are accepted through their string form
    return Uri.parse(str(uri))


def uri_from_server(server: Mapping[str, Any]) -> Uri:
    """
    Derive the request URI from CGI-style server parameters.

    ``HTTP_HOST`` is preferred over ``SERVER_NAME``/``SERVER_PORT`` and
    ``REQUEST_URI`` over ``PATH_INFO``/``QUERY_STRING``. Without any host
    information the result is a relative reference.
    """
    https = str(server.get("HTTPS", "")).lower()
    scheme = "https" if https not in ("", "off") else "http"

    host = str(server.get("HTTP_HOST", ""))
    if not host and server.get("SERVER_NAME"):
        host = str(server["SERVER_NAME"])
        if server.get("SERVER_PORT"):
            host += f":{server['SERVER_PORT']}"

    target = server.get("REQUEST_URI")
    if target is None:
        target = str(server.get("PATH_INFO", ""))
        if server.get("QUERY_STRING"):
            target += f"?{server['QUERY_STRING']}"

    if not host:
        return Uri.parse(str(target))
    return Uri.parse(f"{scheme}://{host}{target}")


def protocol_from_server(server: Mapping[str, Any]) -> str:
    """Extract ``1.1`` from ``SERVER_PROTOCOL=HTTP/1.1``, defaulting to 1.1."""
    protocol = str(server.get("SERVER_PROTOCOL", ""))
    if protocol.upper().startswith("HTTP/"):
        return protocol[len("HTTP/"):]
    return "1.1"


class StreamFactory:
    """Builds reference streams from strings, file objects and paths."""

    def create_stream(self, source: Union[str, bytes, IO[Any]] = "") -> Stream:
        if isinstance(source, (str, bytes)):
            logger.debug("Creating stream from %d characters", len(source))
            return Stream.from_string(source)
        logger.debug("Creating stream from resource %r", source)
        return Stream(source)

    def create_stream_from_file(self, filename: str, mode: str = "r") -> Stream:
        """
        Open ``filename`` and wrap it in a stream.

        The file is always opened in binary mode so that the stream
        handles encoding itself.

        Raises:
            InvalidArgumentError: If ``mode`` is not a valid file mode
            StreamError: If the file cannot be opened
        """
        if not mode or mode[0] not in "rwax":
            raise InvalidArgumentError(f"invalid file mode {mode!r}")

        binary_mode = mode if "b" in mode else f"{mode}b"
        try:
            resource = open(filename, binary_mode)
        except OSError as exc:
            raise StreamError(f"unable to open {filename!r}", cause=exc) from exc
        return Stream(resource)


class UriFactory:

    def create_uri(self, uri: str = "") -> Uri:
        return Uri.parse(uri)


class RequestFactory:

    def create_request(self, method: str, uri: Union[str, UriInterface]) -> Request:
        logger.debug("Creating request %s %s", method, uri)
        return Request(method=method, uri=_as_uri(uri))


class ResponseFactory:

    def create_response(self, code: int = 200, reason_phrase: str = "") -> Response:
        return Response(status_code=code, reason_phrase=reason_phrase)


class ServerRequestFactory:
    """
    Builds server requests from explicit server parameters.

    The server map is copied into the request's server params as-is.
    Cookies, query params, uploaded files and parsed body are left empty;
    callers fill them in with the ``with_*`` methods.
    """

    def create_server_request(
        self,
        server: Mapping[str, Any],
        method: Optional[str] = None,
        uri: Union[str, UriInterface, None] = None,
    ) -> ServerRequest:
        server = dict(server)

        if method is None:
            method = server.get("REQUEST_METHOD")
            if method is None:
                raise InvalidArgumentError(
                    "cannot determine HTTP method: pass it explicitly or set REQUEST_METHOD"
                )

        if uri is None:
            request_uri = uri_from_server(server)
        else:
            request_uri = _as_uri(uri)

        logger.debug("Creating server request %s %s", method, request_uri)
        return ServerRequest(
            method=str(method),
            uri=request_uri,
            protocol_version=protocol_from_server(server),
            server_params=server,
        )


class UploadedFileFactory:

    def create_uploaded_file(
        self,
        stream: Stream,
        size: Optional[int] = None,
        error: int = UploadError.OK,
        client_filename: Optional[str] = None,
        client_media_type: Optional[str] = None,
    ) -> UploadedFile:
        if size is None:
            size = stream.get_size()
        return UploadedFile(
            stream=stream,
            size=size,
            error=error,
            client_filename=client_filename,
            client_media_type=client_media_type,
        )
