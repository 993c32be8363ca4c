"""XML sitemap encoder following the sitemaps.org 0.9 protocol.

Text escaping is left to lxml, which escapes ``&``, ``<`` and ``>`` in element
text. Double quotes stay literal in text nodes, where XML does not require
an entity; they are only escaped inside attribute values.
"""

from typing import Optional, Sequence

from lxml import etree

from sitemapgen.errors import FieldEncodingError
from sitemapgen.models.page import RECOGNIZED_FIELDS, PageRecord

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"
XSI_NS = "http://www.w3.org/2001/XMLSchema-instance"
SCHEMA_LOCATION = (
    "http://www.sitemaps.org/schemas/sitemap/0.9 "
    "http://www.sitemaps.org/schemas/sitemap/0.9/sitemap.xsd"
)

_XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>\n'


def _qname(name: str) -> str:
    return f"{{{SITEMAP_NS}}}{name}"


def _append_field(parent: etree._Element, name: str, value: Optional[str]) -> None:
    """Append ``<name>value</name>`` to *parent*; lxml escapes the text."""
    try:
        child = etree.SubElement(parent, _qname(name))
    except ValueError as exc:
        raise FieldEncodingError(name, "not a valid XML element name") from exc
    try:
        child.text = value
    except ValueError as exc:
        raise FieldEncodingError(name, "value contains characters not allowed in XML") from exc


def encode_xml(pages: Sequence[PageRecord]) -> str:
    """Render *pages* as a ``<urlset>`` document.

    Every ``<url>`` carries ``loc``, ``lastmod``, ``priority`` and
    ``changefreq`` in that order (empty when absent), followed by one element
    per extension field in insertion order.

    Raises:
        FieldEncodingError: if an extension key is not a legal element name or
            a value holds characters XML cannot represent.
    """
    urlset = etree.Element(_qname("urlset"), nsmap={"xsi": XSI_NS, None: SITEMAP_NS})
    urlset.set(f"{{{XSI_NS}}}schemaLocation", SCHEMA_LOCATION)

    for page in pages:
        url = etree.SubElement(urlset, _qname("url"))
        for name in RECOGNIZED_FIELDS:
            _append_field(url, name, getattr(page, name))
        for name, value in page.extensions.items():
            _append_field(url, name, value)

    body = etree.tostring(urlset, encoding="unicode")
    return f"{_XML_DECLARATION}{body}\n"
