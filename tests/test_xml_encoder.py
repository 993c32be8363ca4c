"""Tests for sitemapgen.services.xml_encoder.encode_xml."""

import pytest
from lxml import etree

from sitemapgen.errors import FieldEncodingError
from sitemapgen.models.page import PageRecord
from sitemapgen.services.xml_encoder import SCHEMA_LOCATION, SITEMAP_NS, XSI_NS, encode_xml

_NS = {"sm": SITEMAP_NS}


def _pages(*mappings) -> list:
    return [PageRecord.from_mapping(m) for m in mappings]


class TestEncodeXml:
    def test_single_page_example(self):
        pages = _pages(
            {"loc": "https://site.com/", "lastmod": "2024-06-27", "priority": "1.0", "changefreq": "hourly"}
        )
        output = encode_xml(pages)
        assert output.startswith('<?xml version="1.0" encoding="UTF-8"?>')
        assert (
            "<url><loc>https://site.com/</loc><lastmod>2024-06-27</lastmod>"
            "<priority>1.0</priority><changefreq>hourly</changefreq></url>"
        ) in output

    def test_root_carries_protocol_attributes(self):
        output = encode_xml(_pages({"loc": "https://site.com/"}))
        assert 'xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance"' in output
        assert 'xmlns="http://www.sitemaps.org/schemas/sitemap/0.9"' in output
        assert (
            'xsi:schemaLocation="http://www.sitemaps.org/schemas/sitemap/0.9 '
            'http://www.sitemaps.org/schemas/sitemap/0.9/sitemap.xsd"'
        ) in output

    def test_output_is_well_formed(self):
        output = encode_xml(_pages({"loc": "https://site.com/"}, {"loc": "https://site.com/b"}))
        root = etree.fromstring(output.encode("utf-8"))
        assert root.tag == f"{{{SITEMAP_NS}}}urlset"
        assert root.nsmap == {"xsi": XSI_NS, None: SITEMAP_NS}
        assert root.get(f"{{{XSI_NS}}}schemaLocation") == SCHEMA_LOCATION
        assert len(root.findall("sm:url", _NS)) == 2

    def test_absent_optional_fields_yield_empty_elements(self):
        output = encode_xml(_pages({"loc": "https://site.com/"}))
        root = etree.fromstring(output.encode("utf-8"))
        url = root.find("sm:url", _NS)
        assert [etree.QName(child).localname for child in url] == ["loc", "lastmod", "priority", "changefreq"]
        assert url.find("sm:lastmod", _NS).text is None
        assert url.find("sm:changefreq", _NS).text is None

    def test_extensions_follow_protocol_fields_in_insertion_order(self):
        pages = _pages({"video": "v.mp4", "loc": "https://site.com/", "image": "a.png", "priority": "0.5"})
        root = etree.fromstring(encode_xml(pages).encode("utf-8"))
        url = root.find("sm:url", _NS)
        names = [etree.QName(child).localname for child in url]
        assert names == ["loc", "lastmod", "priority", "changefreq", "video", "image"]
        assert url.find("sm:image", _NS).text == "a.png"

    def test_text_is_escaped(self):
        pages = _pages({"loc": "https://site.com/?a=1&b=2", "note": "<b>Tom & \"Jerry\"</b>"})
        output = encode_xml(pages)
        assert "<loc>https://site.com/?a=1&amp;b=2</loc>" in output
        assert "&lt;b&gt;Tom &amp; \"Jerry\"&lt;/b&gt;" in output
        root = etree.fromstring(output.encode("utf-8"))
        assert root.find("sm:url/sm:note", _NS).text == '<b>Tom & "Jerry"</b>'

    def test_page_order_is_preserved(self):
        locs = [f"https://site.com/{i}" for i in (3, 1, 2)]
        root = etree.fromstring(encode_xml(_pages(*({"loc": loc} for loc in locs))).encode("utf-8"))
        assert [el.text for el in root.findall("sm:url/sm:loc", _NS)] == locs

    def test_empty_collection(self):
        root = etree.fromstring(encode_xml([]).encode("utf-8"))
        assert len(root) == 0

    def test_deterministic(self):
        pages = _pages({"loc": "https://site.com/", "image": "a.png"})
        assert encode_xml(pages) == encode_xml(pages)

    @pytest.mark.parametrize("key", ["my key", "image:loc", "1st"])
    def test_invalid_element_name_is_rejected(self, key):
        with pytest.raises(FieldEncodingError) as info:
            encode_xml(_pages({"loc": "https://site.com/", key: "x"}))
        assert info.value.field == key

    def test_control_characters_are_rejected(self):
        with pytest.raises(FieldEncodingError):
            encode_xml(_pages({"loc": "https://site.com/", "note": "bell\x07"}))
