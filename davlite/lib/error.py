#!/usr/bin/env python
import logging
import os
from typing import Optional

from davlite import __version__

## Environmental variables prepended with "PYTHON_DAVLITE" are used for debug purposes,
## environmental variables prepended with "DAVLITE_" are for connection parameters
debug_dump_communication = os.environ.get("PYTHON_DAVLITE_COMMDUMP", False)
## one of DEBUG, DEVELOPMENT, PRODUCTION
debugmode = os.environ.get("PYTHON_DAVLITE_DEBUGMODE")
if not debugmode:
    if "dev" in __version__:
        debugmode = "DEVELOPMENT"
    else:
        debugmode = "PRODUCTION"

log = logging.getLogger("davlite")
if debugmode.startswith("DEBUG"):
    log.setLevel(logging.DEBUG)
else:
    log.setLevel(logging.WARNING)


def weirdness(*reasons):
    from davlite.lib.debug import xmlstring

    reason = " : ".join([xmlstring(x) for x in reasons])
    log.warning(f"Deviation from expectations found: {reason}")


class DAVError(Exception):
    url: Optional[str] = None
    reason: str = "no reason"

    def __init__(self, url: Optional[str] = None, reason: Optional[str] = None) -> None:
        if url:
            self.url = url
        if reason:
            self.reason = reason

    def __str__(self) -> str:
        return "%s at '%s', reason %s" % (
            self.__class__.__name__,
            self.url,
            self.reason,
        )


class TransportError(DAVError):
    """
    The HTTP transport failed before a response was received (DNS,
    connection refused, TLS, timeout ...).  The exception raised by the
    transport library is kept untouched in the ``original`` attribute.
    """

    original: Optional[BaseException] = None

    def __init__(
        self, url: Optional[str] = None, original: Optional[BaseException] = None
    ) -> None:
        self.original = original
        super().__init__(url, repr(original) if original is not None else None)


class HttpStatusError(DAVError):
    """
    The server answered, but not with a success status.  ``status``
    holds the HTTP status code and ``body`` the raw response bytes
    exactly as received.  What a given status means is up to the caller.
    """

    status: int = 0
    body: bytes = b""

    def __init__(
        self, url: Optional[str] = None, status: int = 0, body: bytes = b""
    ) -> None:
        self.status = status
        self.body = body
        super().__init__(url, "HTTP status %s" % status)


class ParseError(DAVError):
    pass


class MalformedError(ParseError):
    """The response body is not well-formed XML."""

    pass


class NotMultistatusError(ParseError):
    """Well-formed XML, but not a DAV:multistatus document."""

    pass


class InvalidDepthError(ParseError, ValueError):
    pass


class InvalidURLError(DAVError, ValueError):
    pass

