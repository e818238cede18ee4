"""
High-level WebDAV clients built on the Sans-I/O protocol layer.

DAVClient (sync) and AsyncDAVClient (async) expose one method per
supported verb.  Each call builds a request with DAVProtocol, executes
it on the I/O adapter and raises HttpStatusError unless the server
answered with a 2xx status.  Nothing is retried or cached here.

Example:
    async with AsyncDAVClient(username="user", password="secret") as client:
        await client.mkcol("https://dav.example.com/a/")
        await client.put("https://dav.example.com/a/file.txt", b"hello")
        entries = await client.list_entries("https://dav.example.com/a/")
        for entry in entries[1:]:
            print(entry.href, entry.content_length)
"""

import datetime
from tempfile import NamedTemporaryFile
from typing import Optional, Tuple, Union

from davlite.config import get_connection_params
from davlite.io import AsyncIO, AsyncIOProtocol, SyncIO, SyncIOProtocol
from davlite.lib import error
from davlite.lib.python_utilities import to_wire
from davlite.protocol import (
    DAVProtocol,
    DAVRequest,
    DAVResponse,
    Depth,
    ResourceEntry,
)


def _dump_communication(request: DAVRequest, response: DAVResponse) -> None:
    """Write one request/response exchange to a temporary file for debugging"""
    with NamedTemporaryFile(prefix="davlitecomm", delete=False) as commlog:
        commlog.write(b"=" * 80 + b"\n")
        commlog.write(f"{datetime.datetime.now():%FT%H:%M:%S}".encode("utf-8"))
        commlog.write(b"\n====>\n")
        commlog.write(f"{request.method.value} {request.url}\n".encode("utf-8"))
        commlog.write(
            b"\n".join(
                to_wire(f"{x}: {'***' if x == 'Authorization' else request.headers[x]}")
                for x in request.headers
            )
        )
        commlog.write(b"\n\n")
        if request.body:
            commlog.write(request.body)
        commlog.write(b"<====\n")
        commlog.write(f"{response.status} {response.reason}\n".encode("utf-8"))
        commlog.write(
            b"\n".join(to_wire(f"{x}: {response.headers[x]}") for x in response.headers)
        )
        commlog.write(b"\n\n")
        commlog.write(response.body)
        commlog.write(b"\n")


class DAVClient:
    """
    Synchronous WebDAV client.

    Example:
        with DAVClient(username="user", password="secret") as client:
            client.put("https://dav.example.com/a/file.txt", b"hello")
            response = client.get("https://dav.example.com/a/file.txt")
            print(response.body)
    """

    def __init__(
        self,
        username: Optional[str] = None,
        password: Optional[str] = None,
        timeout: Optional[float] = 30.0,
        verify_ssl: bool = True,
        io: Optional[SyncIOProtocol] = None,
    ):
        """
        Initialize the client.

        Args:
            username: Username for authentication
            password: Password for authentication
            timeout: Request timeout in seconds
            verify_ssl: Verify SSL certificates
            io: Transport to use instead of a new SyncIO
        """
        self.protocol = DAVProtocol(username=username, password=password)
        self.io = io if io is not None else SyncIO(timeout=timeout, verify=verify_ssl)

    @classmethod
    def from_config(
        cls, config_file: Optional[str] = None, section: str = "default"
    ) -> "DAVClient":
        """Build a client from the environment and/or a config file."""
        return cls(**get_connection_params(config_file, section))

    def close(self) -> None:
        """Close the HTTP session."""
        self.io.close()

    def __enter__(self) -> "DAVClient":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def _execute(self, request: DAVRequest) -> DAVResponse:
        """Execute a request and return the response if it succeeded."""
        response = self.io.execute(request)
        if error.debug_dump_communication:
            _dump_communication(request, response)
        return self.protocol.check_response(request, response)

    # High-level operations

    def get(self, url: str) -> DAVResponse:
        """
        Download a resource.

        Returns:
            DAVResponse whose body holds the resource bytes
        """
        return self._execute(self.protocol.get_request(url))

    def put(self, url: str, data: Union[str, bytes]) -> DAVResponse:
        """
        Upload data to url.  Text is sent UTF-8 encoded.
        """
        return self._execute(self.protocol.put_request(url, to_wire(data)))

    def delete(self, url: str) -> DAVResponse:
        """Delete a resource or a whole collection."""
        return self._execute(self.protocol.delete_request(url))

    def mkcol(self, url: str) -> DAVResponse:
        """Create a collection (directory)."""
        return self._execute(self.protocol.mkcol_request(url))

    def mv(
        self, source: str, destination: str, overwrite: Optional[bool] = None
    ) -> DAVResponse:
        """
        Move source to destination.  If only the last path segment
        changes this is a rename.
        """
        return self._execute(self.protocol.move_request(source, destination, overwrite))

    def list(self, url: str, depth: Union[Depth, str, int] = Depth.ONE) -> DAVResponse:
        """
        PROPFIND url with all properties.

        Depth "0" covers the resource only, "1" the resource and its
        children, "infinity" everything below it.  The multistatus body
        of the returned response can be handed to parse_multistatus.
        """
        return self._execute(self.protocol.propfind_request(url, depth))

    def list_entries(
        self, url: str, depth: Union[Depth, str, int] = Depth.ONE
    ) -> Tuple[ResourceEntry, ...]:
        """
        Like list, but returns the parsed entries.  The first entry
        describes url itself.
        """
        return self.protocol.parse_propfind(self.list(url, depth))

    def unzip(self, url: str) -> DAVResponse:
        """Ask the server to extract the .zip archive at url in place."""
        return self._execute(self.protocol.unzip_request(url))


class AsyncDAVClient:
    """
    Asynchronous WebDAV client.

    This is the async version of DAVClient.  The client holds no
    per-call state, so one instance may serve concurrent tasks.

    Example:
        async with AsyncDAVClient(username="user", password="secret") as client:
            entries = await client.list_entries("https://dav.example.com/a/")
    """

    def __init__(
        self,
        username: Optional[str] = None,
        password: Optional[str] = None,
        timeout: Optional[float] = 30.0,
        verify_ssl: bool = True,
        io: Optional[AsyncIOProtocol] = None,
    ):
        """
        Initialize the client.

        Args:
            username: Username for authentication
            password: Password for authentication
            timeout: Request timeout in seconds
            verify_ssl: Verify SSL certificates
            io: Transport to use instead of a new AsyncIO
        """
        self.protocol = DAVProtocol(username=username, password=password)
        self.io = io if io is not None else AsyncIO(timeout=timeout, verify_ssl=verify_ssl)

    @classmethod
    def from_config(
        cls, config_file: Optional[str] = None, section: str = "default"
    ) -> "AsyncDAVClient":
        """Build a client from the environment and/or a config file."""
        return cls(**get_connection_params(config_file, section))

    async def close(self) -> None:
        """Close the HTTP session."""
        await self.io.close()

    async def __aenter__(self) -> "AsyncDAVClient":
        return self

    async def __aexit__(self, *args) -> None:
        await self.close()

    async def _execute(self, request: DAVRequest) -> DAVResponse:
        """Execute a request and return the response if it succeeded."""
        response = await self.io.execute(request)
        if error.debug_dump_communication:
            _dump_communication(request, response)
        return self.protocol.check_response(request, response)

    # High-level operations (async versions)

    async def get(self, url: str) -> DAVResponse:
        """Download a resource."""
        return await self._execute(self.protocol.get_request(url))

    async def put(self, url: str, data: Union[str, bytes]) -> DAVResponse:
        """Upload data to url."""
        return await self._execute(self.protocol.put_request(url, to_wire(data)))

    async def delete(self, url: str) -> DAVResponse:
        """Delete a resource or collection."""
        return await self._execute(self.protocol.delete_request(url))

    async def mkcol(self, url: str) -> DAVResponse:
        """Create a collection."""
        return await self._execute(self.protocol.mkcol_request(url))

    async def mv(
        self, source: str, destination: str, overwrite: Optional[bool] = None
    ) -> DAVResponse:
        """Move or rename source to destination."""
        return await self._execute(
            self.protocol.move_request(source, destination, overwrite)
        )

    async def list(
        self, url: str, depth: Union[Depth, str, int] = Depth.ONE
    ) -> DAVResponse:
        """PROPFIND url with all properties."""
        return await self._execute(self.protocol.propfind_request(url, depth))

    async def list_entries(
        self, url: str, depth: Union[Depth, str, int] = Depth.ONE
    ) -> Tuple[ResourceEntry, ...]:
        """PROPFIND url and parse the multistatus body."""
        response = await self.list(url, depth)
        return self.protocol.parse_propfind(response)

    async def unzip(self, url: str) -> DAVResponse:
        """Extract the .zip archive at url on the server."""
        return await self._execute(self.protocol.unzip_request(url))
