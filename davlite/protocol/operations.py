"""
WebDAV protocol operations combining request building and response parsing.

This class provides a high-level interface to WebDAV operations while
remaining completely I/O-free.
"""

import base64
from typing import Dict, Optional, Tuple, Union
from urllib.parse import urlparse

from davlite.lib import error

from .types import (
    DAVMethod,
    DAVRequest,
    DAVResponse,
    Depth,
    ResourceEntry,
)
from .xml_builders import (
    build_propfind_body,
    build_unzip_body,
)
from .xml_parsers import parse_multistatus


class DAVProtocol:
    """
    Sans-I/O WebDAV protocol handler.

    Builds requests and parses responses without doing any I/O.
    All HTTP communication is delegated to an external I/O implementation.
    The only state kept is the credential pair, fixed at construction.

    Example:
        protocol = DAVProtocol(username="user", password="secret")

        # Build request
        request = protocol.propfind_request("https://dav.example.com/a/", "1")

        # Execute with your I/O (not shown)
        response = io.execute(request)

        # Parse response
        entries = protocol.parse_propfind(response)
    """

    def __init__(
        self,
        username: Optional[str] = None,
        password: Optional[str] = None,
    ):
        """
        Initialize the protocol handler.

        Args:
            username: Username for Basic authentication
            password: Password for Basic authentication
        """
        self._username = username
        self._password = password
        self._auth_header = self._build_auth_header(username, password)

    @property
    def username(self) -> Optional[str]:
        return self._username

    def _build_auth_header(
        self,
        username: Optional[str],
        password: Optional[str],
    ) -> Optional[str]:
        """Build Basic auth header if a username is provided."""
        if username is None:
            return None
        credentials = f"{username}:{password or ''}"
        encoded = base64.b64encode(credentials.encode("utf-8")).decode("ascii")
        return f"Basic {encoded}"

    def _base_headers(self) -> Dict[str, str]:
        """Return base headers for all requests."""
        headers = {}
        if self._auth_header:
            headers["Authorization"] = self._auth_header
        return headers

    def _check_url(self, url: str) -> str:
        """
        Make sure url is absolute.

        Raises:
            InvalidURLError: If url lacks a scheme or host
        """
        parsed = urlparse(url)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise error.InvalidURLError(url, "an absolute http(s) URL is required")
        return url

    @staticmethod
    def check_depth(depth: Union[Depth, str, int]) -> Depth:
        """
        Normalize a Depth header value.

        Accepts a Depth member, one of the strings "0", "1", "infinity",
        or the integers 0 and 1.

        Raises:
            InvalidDepthError: For anything else
        """
        if isinstance(depth, Depth):
            return depth
        if isinstance(depth, bool) or not isinstance(depth, (str, int)):
            raise error.InvalidDepthError(reason=f"invalid depth {depth!r}")
        try:
            return Depth(str(depth))
        except ValueError:
            raise error.InvalidDepthError(
                reason=f"invalid depth {depth!r}, expected '0', '1' or 'infinity'"
            ) from None

    # =========================================================================
    # Request builders
    # =========================================================================

    def get_request(self, url: str) -> DAVRequest:
        """
        Build a GET request.

        Args:
            url: Absolute resource URL

        Returns:
            DAVRequest ready for execution
        """
        return DAVRequest(
            method=DAVMethod.GET,
            url=self._check_url(url),
            headers=self._base_headers(),
        )

    def put_request(
        self,
        url: str,
        data: bytes,
        content_type: str = "application/octet-stream",
    ) -> DAVRequest:
        """
        Build a PUT request uploading data as-is.

        Args:
            url: Absolute resource URL
            data: Resource content
            content_type: Content-Type header

        Returns:
            DAVRequest ready for execution
        """
        headers = self._base_headers()
        headers["Content-Type"] = content_type

        return DAVRequest(
            method=DAVMethod.PUT,
            url=self._check_url(url),
            headers=headers,
            body=data,
        )

    def delete_request(self, url: str) -> DAVRequest:
        """
        Build a DELETE request.

        Args:
            url: Absolute URL of the resource or collection to delete

        Returns:
            DAVRequest ready for execution
        """
        return DAVRequest(
            method=DAVMethod.DELETE,
            url=self._check_url(url),
            headers=self._base_headers(),
        )

    def mkcol_request(self, url: str) -> DAVRequest:
        """
        Build a MKCOL request.

        Args:
            url: Absolute URL of the collection to create

        Returns:
            DAVRequest ready for execution
        """
        return DAVRequest(
            method=DAVMethod.MKCOL,
            url=self._check_url(url),
            headers=self._base_headers(),
        )

    def move_request(
        self,
        source: str,
        destination: str,
        overwrite: Optional[bool] = None,
    ) -> DAVRequest:
        """
        Build a MOVE request.

        A move within the same collection is a rename.

        Args:
            source: Absolute URL of the resource to move
            destination: Absolute URL it should end up at
            overwrite: Send "Overwrite: T" or "F"; None leaves it to the server

        Returns:
            DAVRequest ready for execution
        """
        headers = self._base_headers()
        headers["Destination"] = self._check_url(destination)
        if overwrite is not None:
            headers["Overwrite"] = "T" if overwrite else "F"

        return DAVRequest(
            method=DAVMethod.MOVE,
            url=self._check_url(source),
            headers=headers,
        )

    def propfind_request(
        self,
        url: str,
        depth: Union[Depth, str, int] = Depth.ONE,
    ) -> DAVRequest:
        """
        Build a PROPFIND request asking for all properties.

        Args:
            url: Absolute resource or collection URL
            depth: "0" (the resource only), "1" (and its children) or
                "infinity" (the whole subtree)

        Returns:
            DAVRequest ready for execution
        """
        depth = self.check_depth(depth)
        headers = {
            **self._base_headers(),
            "Depth": depth.value,
            "Content-Type": "application/xml; charset=utf-8",
        }
        return DAVRequest(
            method=DAVMethod.PROPFIND,
            url=self._check_url(url),
            headers=headers,
            body=build_propfind_body(),
        )

    def unzip_request(self, url: str) -> DAVRequest:
        """
        Build the vendor specific request extracting a .zip archive
        in place on the server.

        Args:
            url: Absolute URL of the archive

        Returns:
            DAVRequest ready for execution
        """
        headers = self._base_headers()
        headers["Content-Type"] = "application/x-www-form-urlencoded"
        return DAVRequest(
            method=DAVMethod.POST,
            url=self._check_url(url),
            headers=headers,
            body=build_unzip_body(),
        )

    # =========================================================================
    # Response handling
    # =========================================================================

    def check_response(
        self,
        request: DAVRequest,
        response: DAVResponse,
    ) -> DAVResponse:
        """
        Return response unchanged if it has a 2xx status.

        Raises:
            HttpStatusError: Carrying the status and the raw body otherwise
        """
        if not response.ok:
            raise error.HttpStatusError(request.url, response.status, response.body)
        return response

    def parse_propfind(
        self,
        response: DAVResponse,
        huge_tree: bool = False,
    ) -> Tuple[ResourceEntry, ...]:
        """
        Parse a PROPFIND response.

        Args:
            response: The DAVResponse from the server
            huge_tree: Allow parsing very large XML documents

        Returns:
            Tuple of ResourceEntry, the listed resource itself first
        """
        return parse_multistatus(response.body, huge_tree=huge_tree)
