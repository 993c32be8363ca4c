"""Field-level predicates for sitemap page values.

Every predicate is total: it returns ``False`` for anything that is not a
well-formed text value instead of raising.
"""

import re
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from urllib.parse import urlparse

from dateutil import parser as date_parser
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from sitemapgen.models.page import CHANGE_FREQUENCIES

# RFC 2396 reserved + unreserved characters, "%" for escapes, "#" for the
# fragment and "[" / "]" for IPv6 literals (RFC 2732)
_URI_CHARS_RE = re.compile(r"^[A-Za-z0-9\-_.!~*'();/?:@&=+$,%#\[\]]+$")
_BAD_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")

# W3C DATETIME reduced-precision forms: YYYY and YYYY-MM
_W3C_PARTIAL_DATE_RE = re.compile(r"^(\d{4})(?:-(\d{2}))?$")

# Basic-format calendar date: YYYYMMDD
_COMPACT_DATE_RE = re.compile(r"^\d{8}$")

# Dash-separated ISO dates are parsed strictly so that "2024-13-01" is not
# read as 13 January
_ISO_DATE_RE = re.compile(r"^\d{4}-\d{1,2}-\d{1,2}(?:[Tt ].*)?$")

# Optional sign, integer and/or fraction part, optional exponent
_DECIMAL_RE = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?$")

_DATE_ADAPTER = TypeAdapter(date)
_DATETIME_ADAPTER = TypeAdapter(datetime)


def is_valid_uri(value: object) -> bool:
    """Return True when *value* is an absolute URI with a scheme and a host."""
    if not isinstance(value, str) or not value:
        return False
    if not _URI_CHARS_RE.match(value) or _BAD_ESCAPE_RE.search(value):
        return False

    try:
        parsed = urlparse(value)
        hostname = parsed.hostname
        # Accessing .port validates it is numeric and in range
        parsed.port
    except ValueError:
        return False

    if not _SCHEME_RE.match(parsed.scheme):
        return False
    return bool(parsed.netloc) and bool(hostname)


def _is_iso_date(text: str) -> bool:
    for adapter in (_DATE_ADAPTER, _DATETIME_ADAPTER):
        try:
            adapter.validate_python(text)
            return True
        except PydanticValidationError:
            continue
    return False


def is_valid_date(value: object) -> bool:
    """Return True when *value* can be read as a calendar date or date-time.

    Any unambiguous written date is accepted: ISO 8601 / W3C DATETIME,
    ``2024/06/27``, ``June 27, 2024``, ``20240627``, RFC 2822 and so on.
    Bare numbers other than ``YYYY`` and ``YYYYMMDD`` are rejected rather
    than being read as Unix timestamps.
    """
    if not isinstance(value, str):
        return False
    text = value.strip()
    if not text:
        return False

    partial = _W3C_PARTIAL_DATE_RE.match(text)
    if partial:
        month = partial.group(2)
        return month is None or 1 <= int(month) <= 12
    if _DECIMAL_RE.match(text) and not _COMPACT_DATE_RE.match(text):
        return False
    if _ISO_DATE_RE.match(text):
        return _is_iso_date(text)

    try:
        date_parser.parse(text)
    except (ValueError, OverflowError):
        return False
    return True


def is_valid_priority(value: object) -> bool:
    """Return True when *value* is a base-10 number between 0.0 and 1.0 inclusive."""
    if not isinstance(value, str):
        return False
    text = value.strip()
    if not _DECIMAL_RE.match(text):
        return False
    try:
        return Decimal(0) <= Decimal(text) <= Decimal(1)
    except InvalidOperation:
        return False


def is_valid_change_freq(value: object) -> bool:
    """Return True when *value* is exactly one of the protocol's changefreq literals."""
    return isinstance(value, str) and value in CHANGE_FREQUENCIES
