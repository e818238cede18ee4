"""
Pure functions for building WebDAV request bodies.

All functions in this module are pure - they take data in and return
encoded bodies out, with no side effects or I/O.
"""
from urllib.parse import urlencode

from lxml import etree

from davlite.elements import dav


def build_propfind_body() -> bytes:
    """
    Build the PROPFIND request body asking for all live properties.

    Returns:
        UTF-8 encoded ``<propfind><allprop/></propfind>``
    """
    propfind = dav.Propfind() + dav.Allprop()
    return etree.tostring(propfind.xmlelement(), encoding="utf-8", xml_declaration=True)


def build_unzip_body() -> bytes:
    """
    Build the form body asking the server to extract an uploaded archive.

    This is a vendor extension, not part of RFC 4918: the archive URL is
    POSTed with a single ``method=UNZIP`` form field.
    """
    return urlencode({"method": "UNZIP"}).encode("ascii")
