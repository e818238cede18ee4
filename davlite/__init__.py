#!/usr/bin/env python
import logging

__version__ = "0.1.0"

from .client import AsyncDAVClient
from .client import DAVClient
from .protocol import ResourceEntry
from .protocol import parse_multistatus

# Silence notification of no default logging handler
log = logging.getLogger("davlite")


class NullHandler(logging.Handler):
    def emit(self, record) -> None:
        pass


log.addHandler(NullHandler())

__all__ = [
    "__version__",
    "AsyncDAVClient",
    "DAVClient",
    "ResourceEntry",
    "parse_multistatus",
]
