"""Fail-fast validation of a page collection before it is encoded."""

from typing import Callable, Optional, Sequence, Tuple

from sitemapgen.errors import PageValidationError, ValidationRule
from sitemapgen.models.page import PageRecord
from sitemapgen.services.validators import (
    is_valid_change_freq,
    is_valid_date,
    is_valid_priority,
    is_valid_uri,
)

# Optional fields, checked in this order after loc
_OPTIONAL_CHECKS: Tuple[Tuple[str, Callable[[object], bool], ValidationRule], ...] = (
    ("lastmod", is_valid_date, ValidationRule.INVALID_LASTMOD),
    ("priority", is_valid_priority, ValidationRule.INVALID_PRIORITY),
    ("changefreq", is_valid_change_freq, ValidationRule.INVALID_CHANGEFREQ),
)


def _first_violation(page: PageRecord) -> Optional[Tuple[ValidationRule, Optional[str]]]:
    """Return the first rule *page* breaks together with the offending value."""
    if page.loc is None:
        return ValidationRule.MISSING_LOC, None
    if not is_valid_uri(page.loc):
        return ValidationRule.INVALID_LOC, page.loc

    for field, predicate, rule in _OPTIONAL_CHECKS:
        value = getattr(page, field)
        if value is not None and not predicate(value):
            return rule, value
    return None


def validate_pages(pages: Sequence[PageRecord]) -> None:
    """Check every page in order and stop at the first violation.

    Raises:
        PageValidationError: identifying the broken rule and the page index.
    """
    for index, page in enumerate(pages):
        violation = _first_violation(page)
        if violation is not None:
            rule, value = violation
            raise PageValidationError(rule, index=index, value=value)
