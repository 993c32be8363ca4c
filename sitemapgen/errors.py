"""Exception hierarchy for sitemap generation.

Caller-input problems derive from :class:`ValueError` and environment
problems from :class:`RuntimeError`, so callers can tell "bad input" apart
from "bad environment" without importing this module.
"""

from enum import Enum
from typing import Optional


class SitemapError(Exception):
    """Base class for every error raised by sitemapgen."""


class InvalidInputError(SitemapError, ValueError):
    """The pages, format, or field values supplied by the caller are unusable."""


class UnsupportedFormatError(InvalidInputError):
    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(
            f"Unsupported sitemap format {value!r}. Use one of: xml, json, csv."
        )


class ValidationRule(str, Enum):
    """The page rule that was violated."""

    MISSING_LOC = "missing_loc"
    INVALID_LOC = "invalid_loc"
    INVALID_LASTMOD = "invalid_lastmod"
    INVALID_PRIORITY = "invalid_priority"
    INVALID_CHANGEFREQ = "invalid_changefreq"


_RULE_MESSAGES = {
    ValidationRule.MISSING_LOC: "loc is required",
    ValidationRule.INVALID_LOC: "loc must be an absolute URI conforming to RFC 2396",
    ValidationRule.INVALID_LASTMOD: "lastmod must be a valid date",
    ValidationRule.INVALID_PRIORITY: "priority must be a decimal between 0.0 and 1.0",
    ValidationRule.INVALID_CHANGEFREQ: (
        "changefreq must be one of: always, hourly, daily, weekly, monthly, yearly, never"
    ),
}


class PageValidationError(InvalidInputError):
    """A page failed validation. Only the first violation is reported."""

    def __init__(self, rule: ValidationRule, index: int, value: Optional[str] = None) -> None:
        self.rule = rule
        self.index = index
        self.value = value
        super().__init__(f"Invalid page at index {index}: {_RULE_MESSAGES[rule]} (got {value!r}).")

    @property
    def field(self) -> str:
        """Name of the offending page field, e.g. ``"priority"``."""
        return self.rule.value.split("_", 1)[1]


class FieldEncodingError(InvalidInputError):
    """An extension field cannot be represented in the requested format."""

    def __init__(self, field: str, reason: str) -> None:
        self.field = field
        super().__init__(f"Cannot encode field {field!r}: {reason}")


class SinkError(SitemapError, RuntimeError):
    """Persisting the generated sitemap failed."""

    def __init__(self, message: str, path: str) -> None:
        self.path = path
        super().__init__(f"{message}: {path}")


class DirectoryCreationError(SinkError):
    pass


class DirectoryNotWritableError(SinkError):
    pass


class FileNotWritableError(SinkError):
    pass


class FileWriteError(SinkError):
    pass
