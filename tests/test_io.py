"""
Tests for the I/O adapters, with the HTTP libraries' sessions replaced
by stand-ins.
"""

import asyncio
from unittest.mock import Mock

import aiohttp
import pytest
import requests

from davlite.io import AsyncIO, AsyncIOProtocol, SyncIO, SyncIOProtocol
from davlite.lib import error
from davlite.protocol import DAVProtocol

URL = "https://dav.example.com/a/"


class FakeAiohttpResponse:
    def __init__(self, status, headers, body):
        self.status = status
        self.headers = headers
        self._body = body

    async def read(self):
        return self._body

    async def __aenter__(self):
        return self

    async def __aexit__(self, *args):
        return False


class FakeAiohttpSession:
    def __init__(self, response=None, exc=None):
        self.response = response
        self.exc = exc
        self.calls = []
        self.closed = False

    def request(self, **kwargs):
        self.calls.append(kwargs)
        if self.exc is not None:
            raise self.exc
        return self.response

    async def close(self):
        self.closed = True


class TestSyncIO:
    def test_satisfies_protocol(self):
        with SyncIO() as io:
            assert isinstance(io, SyncIOProtocol)

    def test_execute(self):
        session = Mock()
        session.request.return_value = Mock(
            status_code=207,
            headers={"Content-Type": "application/xml"},
            content=b"<multistatus/>",
        )
        io = SyncIO(session=session, timeout=10.0, verify=False)
        request = DAVProtocol(username="u", password="p").propfind_request(URL, "0")

        response = io.execute(request)

        assert response.status == 207
        assert response.headers == {"Content-Type": "application/xml"}
        assert response.body == b"<multistatus/>"
        kwargs = session.request.call_args.kwargs
        assert kwargs["method"] == "PROPFIND"
        assert kwargs["url"] == URL
        assert kwargs["headers"]["Depth"] == "0"
        assert kwargs["data"] == request.body
        assert kwargs["timeout"] == 10.0
        assert kwargs["verify"] is False

    def test_transport_error(self):
        session = Mock()
        original = requests.ConnectionError("name resolution failed")
        session.request.side_effect = original
        io = SyncIO(session=session)

        with pytest.raises(error.TransportError) as excinfo:
            io.execute(DAVProtocol().get_request(URL))

        assert excinfo.value.original is original
        assert excinfo.value.__cause__ is original
        assert excinfo.value.url == URL

    def test_error_status_returned_not_raised(self):
        session = Mock()
        session.request.return_value = Mock(status_code=500, headers={}, content=b"oops")
        response = SyncIO(session=session).execute(DAVProtocol().get_request(URL))
        assert response.status == 500
        assert response.body == b"oops"

    def test_foreign_session_not_closed(self):
        session = Mock()
        SyncIO(session=session).close()
        session.close.assert_not_called()


class TestAsyncIO:
    def test_satisfies_protocol(self):
        assert isinstance(AsyncIO(), AsyncIOProtocol)

    @pytest.mark.asyncio
    async def test_execute(self):
        session = FakeAiohttpSession(
            FakeAiohttpResponse(201, {"ETag": '"x"'}, b"")
        )
        io = AsyncIO(session=session)
        request = DAVProtocol().put_request(URL + "f.txt", b"payload")

        response = await io.execute(request)

        assert response.status == 201
        assert response.headers == {"ETag": '"x"'}
        assert session.calls == [
            {
                "method": "PUT",
                "url": URL + "f.txt",
                "headers": request.headers,
                "data": b"payload",
            }
        ]

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "original",
        [aiohttp.ClientConnectionError("refused"), asyncio.TimeoutError()],
    )
    async def test_transport_error(self, original):
        io = AsyncIO(session=FakeAiohttpSession(exc=original))
        with pytest.raises(error.TransportError) as excinfo:
            await io.execute(DAVProtocol().get_request(URL))
        assert excinfo.value.original is original

    @pytest.mark.asyncio
    async def test_error_status_returned_not_raised(self):
        session = FakeAiohttpSession(FakeAiohttpResponse(404, {}, b"missing"))
        response = await AsyncIO(session=session).execute(DAVProtocol().get_request(URL))
        assert response.status == 404
        assert response.body == b"missing"

    @pytest.mark.asyncio
    async def test_foreign_session_not_closed(self):
        session = FakeAiohttpSession()
        async with AsyncIO(session=session):
            pass
        assert not session.closed
