"""
Pure functions for parsing WebDAV XML responses.

All functions in this module are pure - they take XML in and return
structured data out, with no side effects or I/O.

Servers are matched on element local names only, so documents using
``D:``, ``d:``, any other prefix or no namespace at all are all read the
same way.
"""

from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Dict, List, Optional, Tuple, Union

from lxml import etree
from lxml.etree import _Element

from davlite.elements import dav
from davlite.lib import error
from davlite.lib.namespace import localname
from davlite.lib.python_utilities import to_wire

from .types import ResourceEntry


def parse_multistatus(
    xml: Union[str, bytes],
    huge_tree: bool = False,
) -> Tuple[ResourceEntry, ...]:
    """
    Parse the body of a PROPFIND (207 Multi-Status) response.

    The first entry of a depth 1 listing normally describes the listed
    collection itself.  It is kept; callers wanting only the children
    should drop it themselves.

    Args:
        xml: Response body, decoded or raw
        huge_tree: Allow parsing very large XML documents

    Returns:
        Tuple of ResourceEntry in document order

    Raises:
        MalformedError: If the body is not well-formed XML
        NotMultistatusError: If the document is not a DAV:multistatus
    """
    tree = _parse_xml(xml, huge_tree=huge_tree)
    root = _strip_to_multistatus(tree)

    entries: List[ResourceEntry] = []
    for elem in _children(root, dav.Response.name()):
        entry = _parse_response_element(elem)
        if entry is not None:
            entries.append(entry)

    return tuple(entries)


# Helper functions


def _parse_xml(xml: Union[str, bytes], huge_tree: bool = False) -> _Element:
    """
    Parse text or bytes into an element tree.

    Decoded text is re-encoded as UTF-8 and the parser is told so, which
    overrides whatever encoding the XML declaration claims.  Documents
    whose only fault is an undeclared namespace prefix are parsed again
    in recovery mode, keeping the literal prefix in the tag.
    """
    if isinstance(xml, str):
        encoding = "utf-8"
        body = to_wire(xml)
    else:
        encoding = None
        body = xml

    def parse(recover: bool) -> _Element:
        parser = etree.XMLParser(
            encoding=encoding,
            huge_tree=huge_tree,
            recover=recover,
            resolve_entities=False,
            no_network=True,
        )
        return etree.fromstring(body, parser)

    try:
        return parse(recover=False)
    except etree.XMLSyntaxError as err:
        namespace_errors_only = len(err.error_log) > 0 and all(
            entry.domain == etree.ErrorDomains.NAMESPACE for entry in err.error_log
        )
        if not namespace_errors_only:
            raise error.MalformedError(reason=str(err)) from err

    tree = parse(recover=True)
    if tree is None:
        raise error.MalformedError(reason="no root element")
    return tree


def _strip_to_multistatus(tree: _Element) -> _Element:
    """
    Return the multistatus element of a parsed document.

    The general format is:
        <multistatus>
            <response>...</response>
            <response>...</response>
        </multistatus>

    Some servers wrap it in an extra <xml> element.
    """
    if (
        localname(tree.tag) == "xml"
        and len(tree) > 0
        and localname(tree[0].tag) == dav.MultiStatus.name()
    ):
        return tree[0]
    if localname(tree.tag) == dav.MultiStatus.name():
        return tree
    raise error.NotMultistatusError(
        reason="root element is <%s>, expected <multistatus>" % localname(tree.tag)
    )


def _children(elem: _Element, name: str) -> List[_Element]:
    """Direct children of elem whose local name is name."""
    return [child for child in elem if localname(child.tag) == name]


def _child(elem: _Element, name: str) -> Optional[_Element]:
    for child in elem:
        if localname(child.tag) == name:
            return child
    return None


def _text(elem: Optional[_Element]) -> Optional[str]:
    """
    Text content of an element, or None if it is absent or empty.

    Nested markup (which some servers put where plain text belongs) is
    flattened to its text.  Entities declared in a DTD are not expanded
    (the parser runs with resolve_entities=False), so a reference such
    as ``&e;`` comes through as that literal text.
    """
    if elem is None:
        return None
    text = "".join(elem.itertext()).strip()
    return text or None


def _parse_response_element(response: _Element) -> Optional[ResourceEntry]:
    """
    Turn a single DAV:response element into a ResourceEntry.

    Returns None when the element carries no href.
    """
    href = _text(_child(response, dav.Href.name()))
    if not href:
        error.weirdness("response element without href skipped", response)
        return None

    props = _extract_properties(response)

    is_collection = False
    resourcetype = props.get(dav.ResourceType.name())
    if resourcetype is not None:
        is_collection = _child(resourcetype, dav.Collection.name()) is not None

    content_length = None
    if not is_collection:
        content_length = _parse_length(_text(props.get(dav.GetContentLength.name())))

    status = _text(_child(response, dav.Status.name()))

    return ResourceEntry(
        href=href,
        is_collection=is_collection,
        display_name=_text(props.get(dav.DisplayName.name())),
        content_length=content_length,
        last_modified=_parse_http_date(_text(props.get(dav.GetLastModified.name()))),
        etag=_text(props.get(dav.GetEtag.name())),
        creation_date=_parse_iso_date(_text(props.get(dav.CreationDate.name()))),
        content_type=_text(props.get(dav.GetContentType.name())),
        status=_status_to_code(status),
    )


def _extract_properties(response: _Element) -> Dict[str, _Element]:
    """
    Collect the property elements of a response, keyed by local name.

    Properties inside a propstat whose status is not 2xx (typically 404
    for properties the server does not have) are ignored.  Some servers
    put <prop> straight under <response>; that is accepted as well.
    """
    prop_elements: List[_Element] = []

    for propstat in _children(response, dav.PropStat.name()):
        code = _status_to_code(_text(_child(propstat, dav.Status.name())))
        if code is not None and not 200 <= code < 300:
            continue
        prop_elements.extend(_children(propstat, dav.Prop.name()))

    prop_elements.extend(_children(response, dav.Prop.name()))

    properties: Dict[str, _Element] = {}
    for prop in prop_elements:
        for child in prop:
            name = localname(child.tag)
            if name is not None:
                properties.setdefault(name, child)
    return properties


def _parse_length(text: Optional[str]) -> Optional[int]:
    if text is None or not (text.isascii() and text.isdigit()):
        return None
    return int(text)


def _parse_http_date(text: Optional[str]) -> Optional[datetime]:
    """
    Parse an HTTP-date (RFC 1123, RFC 850 or asctime format).

    Dates without a zone are taken as UTC, as HTTP dates always are.
    Anything unparsable gives None.
    """
    if not text:
        return None
    try:
        parsed = parsedate_to_datetime(text)
    except (TypeError, ValueError, IndexError):
        return None
    if parsed is None:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _parse_iso_date(text: Optional[str]) -> Optional[datetime]:
    """Parse an RFC 3339 timestamp as used by DAV:creationdate."""
    if not text:
        return None
    if text[-1] in "Zz":
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _status_to_code(status: Optional[str]) -> Optional[int]:
    """
    Extract status code from status string like "HTTP/1.1 200 OK".

    Args:
        status: Status string

    Returns:
        Integer status code, or None if it can't be read
    """
    if not status:
        return None

    parts = status.split()
    if len(parts) >= 2:
        try:
            return int(parts[1])
        except ValueError:
            pass

    return None

