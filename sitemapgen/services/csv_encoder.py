"""Semicolon-separated sitemap encoder.

Values are written verbatim: no quoting is applied, so a value containing
``;`` or a newline shifts the columns of its row. Callers that need such
values should pick the JSON or XML format.
"""

from typing import Dict, List, Sequence

from sitemapgen.models.page import PageRecord

DELIMITER = ";"


def collect_columns(pages: Sequence[PageRecord]) -> List[str]:
    """Return the union of all page keys, deduplicated in first-seen order."""
    seen: Dict[str, None] = {}
    for page in pages:
        for name in page.field_names():
            seen.setdefault(name, None)
    return list(seen)


def encode_csv(pages: Sequence[PageRecord]) -> str:
    """Render *pages* as a header row plus one row per page.

    A page that lacks a column gets an empty field. Every row, including the
    last, ends with ``\\n``.
    """
    columns = collect_columns(pages)
    lines = [DELIMITER.join(columns)]
    for page in pages:
        lines.append(DELIMITER.join(page.get(name) or "" for name in columns))
    return "".join(f"{line}\n" for line in lines)
