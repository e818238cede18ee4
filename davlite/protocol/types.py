"""
Core protocol types for the Sans-I/O WebDAV implementation.

These dataclasses represent HTTP requests and responses at the protocol level,
independent of any I/O implementation, plus the typed resource entries
produced from a multistatus listing.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional
from urllib.parse import unquote, urlparse


class DAVMethod(Enum):
    """WebDAV HTTP methods."""

    GET = "GET"
    PUT = "PUT"
    DELETE = "DELETE"
    MKCOL = "MKCOL"
    MOVE = "MOVE"
    PROPFIND = "PROPFIND"
    POST = "POST"


class Depth(str, Enum):
    """Accepted values of the Depth header."""

    ZERO = "0"
    ONE = "1"
    INFINITY = "infinity"


@dataclass(frozen=True)
class DAVRequest:
    """
    Represents an HTTP request to be made.

    This is a pure data structure with no I/O. It describes what request
    should be made, but does not make it.

    Attributes:
        method: HTTP method (GET, PUT, PROPFIND, etc.)
        url: Full URL for the request
        headers: HTTP headers as dict
        body: Request body as bytes (optional)
    """

    method: DAVMethod
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    body: Optional[bytes] = None


@dataclass(frozen=True)
class DAVResponse:
    """
    Represents an HTTP response received.

    This is a pure data structure with no I/O. It contains the response
    data but does not fetch it.

    Attributes:
        status: HTTP status code
        headers: HTTP headers as dict
        body: Response body as bytes
    """

    status: int
    headers: dict[str, str]
    body: bytes

    @property
    def ok(self) -> bool:
        """True if status indicates success (2xx)."""
        return 200 <= self.status < 300

    @property
    def text(self) -> str:
        """Body decoded as UTF-8, undecodable bytes replaced."""
        return self.body.decode("utf-8", errors="replace")

    @property
    def reason(self) -> str:
        """Return a reason phrase for the status code."""
        reasons = {
            200: "OK",
            201: "Created",
            204: "No Content",
            207: "Multi-Status",
            301: "Moved Permanently",
            302: "Found",
            304: "Not Modified",
            400: "Bad Request",
            401: "Unauthorized",
            403: "Forbidden",
            404: "Not Found",
            405: "Method Not Allowed",
            409: "Conflict",
            412: "Precondition Failed",
            415: "Unsupported Media Type",
            423: "Locked",
            500: "Internal Server Error",
            501: "Not Implemented",
            502: "Bad Gateway",
            503: "Service Unavailable",
            507: "Insufficient Storage",
        }
        return reasons.get(self.status, "Unknown")


@dataclass(frozen=True)
class ResourceEntry:
    """
    One resource (file or collection) described by a multistatus response.

    Attributes:
        href: Path or URL of the resource, as sent by the server
        is_collection: True if the resourcetype holds a collection marker
        display_name: Human readable name, if the server sent one
        content_length: Size in bytes; always None for collections
        last_modified: Timezone-aware modification time
        etag: Opaque validator, verbatim (quotes included)
        creation_date: Timezone-aware creation time
        content_type: MIME type reported by the server
        status: Status code of the response element, if present
    """

    href: str
    is_collection: bool = False
    display_name: Optional[str] = None
    content_length: Optional[int] = None
    last_modified: Optional[datetime] = None
    etag: Optional[str] = None
    creation_date: Optional[datetime] = None
    content_type: Optional[str] = None
    status: Optional[int] = None

    @property
    def name(self) -> str:
        """Last path segment of the href, URL-decoded."""
        path = urlparse(self.href).path if "://" in self.href else self.href
        segments = [s for s in path.split("/") if s]
        if not segments:
            return ""
        return unquote(segments[-1])

    @property
    def extension(self) -> str:
        """
        File extension without the dot.

        Empty for collections, for names without a dot ("README") and for
        dotfiles whose only dot is the leading one (".bashrc").
        """
        if self.is_collection:
            return ""
        name = self.name
        if "." not in name.lstrip("."):
            return ""
        return name.rsplit(".", 1)[1]
