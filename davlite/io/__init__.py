"""
Transports that put davlite's requests on the wire.

SyncIO uses requests, AsyncIO uses aiohttp.  Both return every HTTP
answer as a DAVResponse, error statuses included, and raise only
TransportError when no answer arrived; see davlite.io.base for the
full contract.  Pairing a transport with DAVProtocol by hand looks like
this (DAVClient and AsyncDAVClient do the same, plus status checking):

    protocol = DAVProtocol(username="user", password="secret")
    with SyncIO(timeout=10) as io:
        request = protocol.propfind_request("https://dav.example.com/a/", "1")
        response = protocol.check_response(request, io.execute(request))
        entries = protocol.parse_propfind(response)

    async with AsyncIO(verify_ssl=False) as io:
        response = await io.execute(protocol.get_request("https://dav.example.com/a/f"))
"""

from .base import AsyncIOProtocol, SyncIOProtocol
from .sync import SyncIO
from .async_ import AsyncIO

__all__ = [
    "SyncIOProtocol",
    "AsyncIOProtocol",
    "SyncIO",
    "AsyncIO",
]
