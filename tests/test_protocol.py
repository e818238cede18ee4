"""
Unit tests for Sans-I/O protocol layer.

These tests verify protocol logic without any HTTP mocking required.
All tests are pure - they test data transformations only.
"""

import base64

import pytest
from lxml import etree

from davlite.lib import error
from davlite.protocol import (
    # Types
    DAVMethod,
    DAVProtocol,
    DAVRequest,
    DAVResponse,
    Depth,
    ResourceEntry,
    # Builders
    build_propfind_body,
    build_unzip_body,
)

BASE = "https://dav.example.com"


class TestDAVTypes:
    """Test core DAV types."""

    def test_dav_request_immutable(self):
        """DAVRequest should be immutable (frozen dataclass)."""
        request = DAVRequest(
            method=DAVMethod.GET,
            url="https://example.com/",
            headers={},
        )
        with pytest.raises(AttributeError):
            request.url = "https://other.com/"

    def test_dav_response_ok(self):
        """ok property should return True for 2xx status codes."""
        assert DAVResponse(status=200, headers={}, body=b"").ok
        assert DAVResponse(status=201, headers={}, body=b"").ok
        assert DAVResponse(status=207, headers={}, body=b"").ok
        assert not DAVResponse(status=404, headers={}, body=b"").ok
        assert not DAVResponse(status=500, headers={}, body=b"").ok

    def test_dav_response_reason_and_text(self):
        response = DAVResponse(status=404, headers={}, body=b"gone \xff")
        assert response.reason == "Not Found"
        assert response.text.startswith("gone ")
        assert DAVResponse(status=599, headers={}, body=b"").reason == "Unknown"

    def test_resource_entry_immutable(self):
        entry = ResourceEntry(href="/a/")
        with pytest.raises(AttributeError):
            entry.href = "/b/"

    def test_resource_entry_name(self):
        assert ResourceEntry(href="/a/file.txt").name == "file.txt"
        assert ResourceEntry(href="/a/sub/", is_collection=True).name == "sub"
        assert ResourceEntry(href="/", is_collection=True).name == ""
        assert ResourceEntry(href="/a/my%20file.txt").name == "my file.txt"
        assert ResourceEntry(href="https://dav.example.com/a/b.zip").name == "b.zip"

    def test_resource_entry_extension(self):
        assert ResourceEntry(href="/a/file.txt").extension == "txt"
        assert ResourceEntry(href="/a/archive.tar.gz").extension == "gz"
        assert ResourceEntry(href="/a/README").extension == ""
        assert ResourceEntry(href="/a/.bashrc").extension == ""
        assert ResourceEntry(href="/a/.config.json").extension == "json"
        assert ResourceEntry(href="/a/notes.").extension == ""
        assert ResourceEntry(href="/a/dir.d/", is_collection=True).extension == ""


class TestXMLBuilders:
    """Test body building functions."""

    def test_build_propfind_body_allprop(self):
        body = build_propfind_body()
        tree = etree.fromstring(body)
        assert tree.tag == "{DAV:}propfind"
        assert [child.tag for child in tree] == ["{DAV:}allprop"]

    def test_build_propfind_body_declares_xml(self):
        assert build_propfind_body().startswith(b"<?xml")

    def test_propfind_request_sends_allprop_body(self):
        """PROPFIND always asks for allprop and nothing else."""
        request = DAVProtocol().propfind_request(f"{BASE}/a/")
        assert request.body == build_propfind_body()
        tree = etree.fromstring(request.body)
        assert len(tree) == 1
        assert len(tree[0]) == 0
        assert tree[0].text is None

    def test_build_unzip_body(self):
        assert build_unzip_body() == b"method=UNZIP"


class TestDAVProtocol:
    """Test the request builders of DAVProtocol."""

    def test_auth_header_attached(self):
        protocol = DAVProtocol(username="user", password="pass")
        request = protocol.get_request(f"{BASE}/a/file.txt")
        expected = base64.b64encode(b"user:pass").decode()
        assert request.headers["Authorization"] == f"Basic {expected}"

    def test_auth_header_empty_credentials(self):
        """An empty credential pair is still sent."""
        protocol = DAVProtocol(username="", password="")
        request = protocol.delete_request(f"{BASE}/a/file.txt")
        assert request.headers["Authorization"] == "Basic " + base64.b64encode(b":").decode()

    def test_no_auth_without_username(self):
        request = DAVProtocol().get_request(f"{BASE}/a/file.txt")
        assert "Authorization" not in request.headers

    def test_get_request(self):
        request = DAVProtocol().get_request(f"{BASE}/a/file.txt")
        assert request.method == DAVMethod.GET
        assert request.url == f"{BASE}/a/file.txt"
        assert request.body is None

    def test_put_request(self):
        request = DAVProtocol().put_request(f"{BASE}/a/file.txt", b"\x00\x01payload")
        assert request.method == DAVMethod.PUT
        assert request.body == b"\x00\x01payload"
        assert request.headers["Content-Type"] == "application/octet-stream"

    def test_delete_request(self):
        request = DAVProtocol().delete_request(f"{BASE}/a/")
        assert request.method == DAVMethod.DELETE
        assert request.body is None

    def test_mkcol_request(self):
        request = DAVProtocol().mkcol_request(f"{BASE}/a/new/")
        assert request.method == DAVMethod.MKCOL
        assert request.method.value == "MKCOL"
        assert request.body is None

    def test_move_request(self):
        request = DAVProtocol(username="u", password="p").move_request(
            f"{BASE}/a/old.txt", f"{BASE}/a/new.txt"
        )
        assert request.method == DAVMethod.MOVE
        assert request.url == f"{BASE}/a/old.txt"
        assert request.headers["Destination"] == f"{BASE}/a/new.txt"
        assert "Overwrite" not in request.headers
        assert request.body is None

    def test_move_request_overwrite(self):
        protocol = DAVProtocol()
        assert (
            protocol.move_request(f"{BASE}/a", f"{BASE}/b", overwrite=True).headers["Overwrite"]
            == "T"
        )
        assert (
            protocol.move_request(f"{BASE}/a", f"{BASE}/b", overwrite=False).headers["Overwrite"]
            == "F"
        )

    def test_move_request_relative_destination(self):
        with pytest.raises(error.InvalidURLError):
            DAVProtocol().move_request(f"{BASE}/a/old.txt", "/a/new.txt")

    @pytest.mark.parametrize("depth", ["0", "1", "infinity"])
    def test_propfind_request_depth(self, depth):
        request = DAVProtocol().propfind_request(f"{BASE}/a/", depth)
        assert request.method == DAVMethod.PROPFIND
        assert request.headers["Depth"] == depth
        assert b"allprop" in request.body

    def test_propfind_request_default_depth(self):
        request = DAVProtocol().propfind_request(f"{BASE}/a/")
        assert request.headers["Depth"] == "1"

    def test_propfind_request_depth_enum_and_int(self):
        protocol = DAVProtocol()
        assert protocol.propfind_request(f"{BASE}/a/", Depth.INFINITY).headers["Depth"] == "infinity"
        assert protocol.propfind_request(f"{BASE}/a/", 0).headers["Depth"] == "0"

    @pytest.mark.parametrize("depth", ["2", "Infinity", "", "one", 2, -1, None, True, 1.0])
    def test_propfind_request_invalid_depth(self, depth):
        with pytest.raises(error.InvalidDepthError):
            DAVProtocol().propfind_request(f"{BASE}/a/", depth)

    def test_invalid_depth_is_value_error(self):
        with pytest.raises(ValueError):
            DAVProtocol.check_depth("2")

    def test_unzip_request(self):
        request = DAVProtocol().unzip_request(f"{BASE}/a/archive.zip")
        assert request.method == DAVMethod.POST
        assert request.body == b"method=UNZIP"
        assert request.headers["Content-Type"] == "application/x-www-form-urlencoded"

    @pytest.mark.parametrize("url", ["/a/file.txt", "dav.example.com/a", "ftp://host/a", ""])
    def test_relative_url_rejected(self, url):
        with pytest.raises(error.InvalidURLError):
            DAVProtocol().get_request(url)

    def test_check_response_ok(self):
        protocol = DAVProtocol()
        request = protocol.get_request(f"{BASE}/a/file.txt")
        response = DAVResponse(status=200, headers={}, body=b"content")
        assert protocol.check_response(request, response) is response

    def test_check_response_error_keeps_body(self):
        protocol = DAVProtocol()
        request = protocol.get_request(f"{BASE}/a/missing.txt")
        response = DAVResponse(status=404, headers={}, body=b"<html>\x00not found</html>")
        with pytest.raises(error.HttpStatusError) as excinfo:
            protocol.check_response(request, response)
        assert excinfo.value.status == 404
        assert excinfo.value.body == b"<html>\x00not found</html>"
        assert excinfo.value.url == f"{BASE}/a/missing.txt"

    def test_parse_propfind(self):
        response = DAVResponse(
            status=207,
            headers={},
            body=b"""<?xml version="1.0"?>
            <D:multistatus xmlns:D="DAV:">
                <D:response>
                    <D:href>/a/</D:href>
                    <D:propstat>
                        <D:prop><D:resourcetype><D:collection/></D:resourcetype></D:prop>
                        <D:status>HTTP/1.1 200 OK</D:status>
                    </D:propstat>
                </D:response>
            </D:multistatus>""",
        )
        entries = DAVProtocol().parse_propfind(response)
        assert entries == (ResourceEntry(href="/a/", is_collection=True),)
