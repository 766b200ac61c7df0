"""
Reference message values.

URI, request, server request, response and uploaded file values used to
run the conformance suites against something concrete. All classes are
frozen dataclasses; the ``with_*`` methods return modified copies.
"""

import dataclasses
from dataclasses import dataclass, field
from http import HTTPStatus
from typing import (
    Any,
    Dict,
    List,
    Optional,
    Tuple,
    Union,
)
from urllib.parse import urlsplit

import h11

from ..exceptions import InvalidArgumentError, StreamError
from ..interfaces import UploadError
from .streams import Stream


# Type aliases for better readability
Headers = List[Tuple[str, str]]

DEFAULT_PORTS = {"http": 80, "https": 443}


def validate_request_line(method: str, target: str) -> None:
    """
    Check that ``method`` and ``target`` form a valid HTTP request line.

    Raises:
        InvalidArgumentError: If h11 rejects either part
    """
    try:
        h11.Request(method=method, target=target, headers=[], http_version="1.0")
    except (h11.LocalProtocolError, UnicodeEncodeError) as exc:
        raise InvalidArgumentError(
            f"invalid request line {method!r} {target!r}", cause=exc
        ) from exc


@dataclass(frozen=True)
class Uri:
    """Immutable URI reference split into its components."""

    scheme: str = ""
    user_info: str = ""
    host: str = ""
    port: Optional[int] = None
    path: str = ""
    query: str = ""
    fragment: str = ""

    def __post_init__(self) -> None:
        """Normalize case and drop the port when it is the scheme default."""
        if self.port is not None and not 0 <= self.port <= 65535:
            raise InvalidArgumentError(f"port {self.port} is out of range 0-65535")

        object.__setattr__(self, "scheme", self.scheme.lower())
        object.__setattr__(self, "host", self.host.lower())
        if self.port is not None and DEFAULT_PORTS.get(self.scheme) == self.port:
            object.__setattr__(self, "port", None)

    @classmethod
    def parse(cls, uri: str) -> "Uri":
        """Create a Uri from its string form."""
        try:
            parts = urlsplit(uri)
            port = parts.port
        except ValueError as exc:
            raise InvalidArgumentError(f"unable to parse URI {uri!r}", cause=exc) from exc

        user_info, _, _ = parts.netloc.rpartition("@")
        return cls(
            scheme=parts.scheme,
            user_info=user_info,
            host=parts.hostname or "",
            port=port,
            path=parts.path,
            query=parts.query,
            fragment=parts.fragment,
        )

    def __str__(self) -> str:
        uri = ""
        if self.scheme:
            uri += f"{self.scheme}:"

        authority = self.get_authority()
        if authority or self.scheme == "file":
            uri += f"//{authority}"

        path = self.path
        if authority and path and not path.startswith("/"):
            path = f"/{path}"
        uri += path

        if self.query:
            uri += f"?{self.query}"
        if self.fragment:
            uri += f"#{self.fragment}"
        return uri

    def get_scheme(self) -> str:
        return self.scheme

    def get_authority(self) -> str:
        if not self.host:
            return ""
        authority = f"[{self.host}]" if ":" in self.host else self.host
        if self.user_info:
            authority = f"{self.user_info}@{authority}"
        if self.port is not None:
            authority += f":{self.port}"
        return authority

    def get_host(self) -> str:
        return self.host

    def get_port(self) -> Optional[int]:
        return self.port

    def get_path(self) -> str:
        return self.path

    def get_query(self) -> str:
        return self.query

    def get_fragment(self) -> str:
        return self.fragment


class _MessageMixin:
    """Header and body accessors shared by requests and responses."""

    headers: Headers
    body: Stream
    protocol_version: str

    def get_protocol_version(self) -> str:
        return self.protocol_version

    def get_headers(self) -> Dict[str, List[str]]:
        result: Dict[str, List[str]] = {}
        for name, value in self.headers:
            result.setdefault(name, []).append(value)
        return result

    def get_header(self, name: str) -> List[str]:
        """Get all values of a header (case-insensitive)."""
        name_lower = name.lower()
        return [value for header_name, value in self.headers if header_name.lower() == name_lower]

    def has_header(self, name: str) -> bool:
        return bool(self.get_header(name))

    def get_header_line(self, name: str) -> str:
        return ",".join(self.get_header(name))

    def get_body(self) -> Stream:
        return self.body


@dataclass(frozen=True)
class Request(_MessageMixin):
    """
    Immutable client-side request.

    The method and request target are validated on construction, so an
    instance always describes a request line that could go on the wire.
    """

    method: str
    uri: Uri
    headers: Headers = field(default_factory=list)
    body: Stream = field(default_factory=Stream.from_string)
    protocol_version: str = "1.1"

    # Headers are a list, so instances compare by value but cannot be hashed
    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        """Validate request data after initialization."""
        if not isinstance(self.method, str):
            raise InvalidArgumentError("method must be str")

        if not isinstance(self.uri, Uri):
            raise InvalidArgumentError("uri must be a Uri")

        validate_request_line(self.method, self.get_request_target())

    def get_method(self) -> str:
        return self.method

    def get_uri(self) -> Uri:
        return self.uri

    def get_request_target(self) -> str:
        target = self.uri.path or "/"
        if self.uri.query:
            target += f"?{self.uri.query}"
        return target

    def with_method(self, method: str) -> "Request":
        """Create a new request with a different method."""
        return dataclasses.replace(self, method=method)

    def with_uri(self, uri: Union[str, Uri]) -> "Request":
        """Create a new request with a different URI."""
        if isinstance(uri, str):
            uri = Uri.parse(uri)
        return dataclasses.replace(self, uri=uri)

    def with_header(self, name: str, value: str) -> "Request":
        """Create a new request with ``name`` replaced by a single value."""
        name_lower = name.lower()
        headers = [(n, v) for n, v in self.headers if n.lower() != name_lower]
        return dataclasses.replace(self, headers=headers + [(name, value)])

    def with_body(self, body: Stream) -> "Request":
        return dataclasses.replace(self, body=body)


@dataclass(frozen=True)
class ServerRequest(Request):
    """
    Immutable server-side request.

    Every parameter collection starts empty and only changes through the
    ``with_*`` methods. Nothing is read from the process environment.
    """

    server_params: Dict[str, Any] = field(default_factory=dict)
    cookie_params: Dict[str, str] = field(default_factory=dict)
    query_params: Dict[str, Any] = field(default_factory=dict)
    uploaded_files: Dict[str, Any] = field(default_factory=dict)
    parsed_body: Any = None
    attributes: Dict[str, Any] = field(default_factory=dict)

    __hash__ = None  # type: ignore[assignment]

    def get_server_params(self) -> Dict[str, Any]:
        return dict(self.server_params)

    def get_cookie_params(self) -> Dict[str, str]:
        return dict(self.cookie_params)

    def get_query_params(self) -> Dict[str, Any]:
        return dict(self.query_params)

    def get_uploaded_files(self) -> Dict[str, Any]:
        return dict(self.uploaded_files)

    def get_parsed_body(self) -> Any:
        return self.parsed_body

    def get_attributes(self) -> Dict[str, Any]:
        return dict(self.attributes)

    def get_attribute(self, name: str, default: Any = None) -> Any:
        return self.attributes.get(name, default)

    def with_cookie_params(self, cookies: Dict[str, str]) -> "ServerRequest":
        return dataclasses.replace(self, cookie_params=dict(cookies))

    def with_query_params(self, query: Dict[str, Any]) -> "ServerRequest":
        return dataclasses.replace(self, query_params=dict(query))

    def with_uploaded_files(self, uploaded_files: Dict[str, Any]) -> "ServerRequest":
        return dataclasses.replace(self, uploaded_files=dict(uploaded_files))

    def with_parsed_body(self, data: Any) -> "ServerRequest":
        if isinstance(data, (str, bytes, int, float)):
            raise InvalidArgumentError("parsed body must be None, a mapping or an object")
        return dataclasses.replace(self, parsed_body=data)

    def with_attribute(self, name: str, value: Any) -> "ServerRequest":
        attributes = dict(self.attributes)
        attributes[name] = value
        return dataclasses.replace(self, attributes=attributes)


@dataclass(frozen=True)
class Response(_MessageMixin):
    """Immutable server-side response."""

    status_code: int = 200
    reason_phrase: str = ""
    headers: Headers = field(default_factory=list)
    body: Stream = field(default_factory=Stream.from_string)
    protocol_version: str = "1.1"

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        """Validate the status code and fill in a standard reason phrase."""
        if isinstance(self.status_code, bool) or not isinstance(self.status_code, int):
            raise InvalidArgumentError("status_code must be int")

        if not 100 <= self.status_code <= 599:
            raise InvalidArgumentError(f"status code {self.status_code} is out of range 100-599")

        if not self.reason_phrase:
            try:
                phrase = HTTPStatus(self.status_code).phrase
            except ValueError:
                phrase = ""
            object.__setattr__(self, "reason_phrase", phrase)

    def get_status_code(self) -> int:
        return self.status_code

    def get_reason_phrase(self) -> str:
        return self.reason_phrase

    def with_status(self, code: int, reason_phrase: str = "") -> "Response":
        """Create a new response with a different status."""
        return dataclasses.replace(self, status_code=code, reason_phrase=reason_phrase)


@dataclass(frozen=True)
class UploadedFile:
    """Immutable uploaded file."""

    stream: Stream
    size: Optional[int] = None
    error: int = UploadError.OK
    client_filename: Optional[str] = None
    client_media_type: Optional[str] = None

    def __post_init__(self) -> None:
        try:
            UploadError(self.error)
        except ValueError as exc:
            raise InvalidArgumentError(f"unknown upload error status {self.error!r}", cause=exc) from exc

    def get_stream(self) -> Stream:
        if self.error != UploadError.OK:
            raise StreamError("Cannot retrieve stream due to upload error")
        return self.stream

    def get_size(self) -> Optional[int]:
        return self.size

    def get_error(self) -> int:
        return self.error

    def get_client_filename(self) -> Optional[str]:
        return self.client_filename

    def get_client_media_type(self) -> Optional[str]:
        return self.client_media_type
