"""Sitemap generation: validate, encode, then hand off to a file sink.

Encoding happens fully in memory, so a page or format error never leaves a
partially written file behind.
"""

from typing import Callable, Dict, List, Mapping, Optional, Sequence, Union

from sitemapgen.models.page import PageRecord
from sitemapgen.models.sitemap_format import SitemapFormat
from sitemapgen.services.csv_encoder import encode_csv
from sitemapgen.services.json_encoder import encode_json
from sitemapgen.services.record_validator import validate_pages
from sitemapgen.services.sink import FileSink, LocalFileSink, PathLike
from sitemapgen.services.xml_encoder import encode_xml

PageInput = Union[PageRecord, Mapping[str, object]]

_ENCODERS: Dict[SitemapFormat, Callable[[Sequence[PageRecord]], str]] = {
    SitemapFormat.XML: encode_xml,
    SitemapFormat.JSON: encode_json,
    SitemapFormat.CSV: encode_csv,
}


def _as_records(pages: Sequence[PageInput]) -> List[PageRecord]:
    return [page if isinstance(page, PageRecord) else PageRecord.from_mapping(page) for page in pages]


def render(pages: Sequence[PageInput], sitemap_format: Union[SitemapFormat, str]) -> str:
    """Validate *pages* and return them encoded in *sitemap_format*.

    Pages are validated before the format is resolved, so a bad page is
    reported even when the format is also wrong.

    Raises:
        PageValidationError: on the first page that breaks a field rule.
        UnsupportedFormatError: if *sitemap_format* is not xml, json or csv.
        FieldEncodingError: if an extension field cannot be expressed as XML.
    """
    records = _as_records(pages)
    validate_pages(records)
    encoder = _ENCODERS[SitemapFormat.parse(sitemap_format)]
    return encoder(records)


def generate(
    pages: Sequence[PageInput],
    sitemap_format: Union[SitemapFormat, str],
    destination: PathLike,
    sink: Optional[FileSink] = None,
) -> None:
    """Render *pages* and write the result to *destination* through *sink*.

    Sink errors (:class:`~sitemapgen.errors.SinkError` subclasses for the
    default :class:`LocalFileSink`) propagate unchanged.
    """
    content = render(pages, sitemap_format)
    (sink or LocalFileSink()).write(destination, content)
