from enum import Enum
from typing import Union

from sitemapgen.errors import UnsupportedFormatError


class SitemapFormat(str, Enum):
    """Output representations a sitemap can be rendered to."""

    XML = "xml"
    JSON = "json"
    CSV = "csv"

    @classmethod
    def parse(cls, value: Union["SitemapFormat", str]) -> "SitemapFormat":
        """Return the member matching *value* exactly.

        Raises:
            UnsupportedFormatError: if *value* is not ``xml``, ``json`` or ``csv``.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise UnsupportedFormatError(value) from None
