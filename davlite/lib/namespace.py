#!/usr/bin/env python
from typing import Dict
from typing import Optional

nsmap: Dict[str, str] = {
    "D": "DAV:",
}


def ns(prefix: str, tag: Optional[str] = None) -> str:
    name = "{%s}" % nsmap[prefix]
    if tag is not None:
        name = "%s%s" % (name, tag)
    return name


def localname(tag) -> Optional[str]:
    """
    Local part of an element tag, with any namespace dropped.

    Handles Clark notation (``{DAV:}href``), plain tags (``href``) and
    tags carrying a prefix that was never bound to a namespace
    (``D:href``, which libxml2 keeps literally).  Returns None for
    comments and processing instructions, whose tag is not a string.
    """
    if not isinstance(tag, str):
        return None
    if tag.startswith("{"):
        tag = tag.split("}", 1)[1]
    return tag.rsplit(":", 1)[-1]
