"""
Sans-I/O WebDAV protocol implementation.

This module provides protocol-level operations without any I/O.
It builds requests and parses responses as pure data transformations.

The protocol layer is organized into:
- types: Core data structures (DAVRequest, DAVResponse, ResourceEntry)
- xml_builders: Pure functions to build request bodies
- xml_parsers: Pure functions to parse XML response bodies
- operations: DAVProtocol class combining builders and parsers

Example usage:

    from davlite.protocol import DAVProtocol

    protocol = DAVProtocol(username="user", password="secret")

    # Build a request (no I/O)
    request = protocol.propfind_request("https://dav.example.com/a/", depth="1")

    # Execute via your preferred I/O (sync, async, or mock)
    response = your_http_client.execute(request)

    # Parse response (no I/O)
    entries = protocol.parse_propfind(response)
    children = entries[1:]
"""

from .types import (
    # Enums
    DAVMethod,
    Depth,
    # Request/Response
    DAVRequest,
    DAVResponse,
    # Result types
    ResourceEntry,
)
from .xml_builders import (
    build_propfind_body,
    build_unzip_body,
)
from .xml_parsers import parse_multistatus
from .operations import DAVProtocol

__all__ = [
    # Enums
    "DAVMethod",
    "Depth",
    # Request/Response
    "DAVRequest",
    "DAVResponse",
    # Result types
    "ResourceEntry",
    # Builders
    "build_propfind_body",
    "build_unzip_body",
    # Parsers
    "parse_multistatus",
    # Protocol
    "DAVProtocol",
]
