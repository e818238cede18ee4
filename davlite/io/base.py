"""
What DAVClient and AsyncDAVClient expect from a transport.

A transport sends one DAVRequest exactly as built (method, URL, headers
and body are handed to the HTTP library untouched) and hands back
the server's answer as a DAVResponse.  It makes one attempt; there are
no retries.

Any HTTP status is a valid answer: a 404 or 500 comes back as a
DAVResponse like a 207 does.  Deciding what counts as failure is
DAVProtocol.check_response's job.  The only exception execute() may
raise is davlite.lib.error.TransportError, for requests that got no
answer at all (DNS, refused connection, TLS, timeout).  Its
``original`` attribute, also chained as ``__cause__``, is the HTTP
library's own exception object, unchanged.

Timeouts and certificate checking are configured on the transport
itself, not per request.
"""

from typing import Protocol, runtime_checkable

from davlite.protocol.types import DAVRequest, DAVResponse


@runtime_checkable
class SyncIOProtocol(Protocol):
    """Blocking transport, e.g. SyncIO over a requests.Session."""

    def execute(self, request: DAVRequest) -> DAVResponse:
        """
        Send request and return the server's answer, whatever its status.

        Raises:
            TransportError: no HTTP answer was received
        """
        ...

    def close(self) -> None:
        """Release the session, unless it was supplied by the caller."""
        ...


@runtime_checkable
class AsyncIOProtocol(Protocol):
    """Coroutine transport, e.g. AsyncIO over an aiohttp.ClientSession."""

    async def execute(self, request: DAVRequest) -> DAVResponse:
        """
        Send request and return the server's answer, whatever its status.

        Raises:
            TransportError: no HTTP answer was received
        """
        ...

    async def close(self) -> None:
        """Release the session, unless it was supplied by the caller."""
        ...
