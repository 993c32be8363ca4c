"""JSON sitemap encoder."""

import json
from typing import Dict, List, Optional, Sequence

from sitemapgen.models.page import RECOGNIZED_FIELDS, PageRecord

_INDENT = 2


def _page_to_dict(page: PageRecord) -> Dict[str, Optional[str]]:
    """Protocol fields first (``None`` when absent), then extensions in order."""
    item: Dict[str, Optional[str]] = {name: getattr(page, name) for name in RECOGNIZED_FIELDS}
    item.update(page.extensions)
    return item


def encode_json(pages: Sequence[PageRecord]) -> str:
    """Render *pages* as a pretty-printed JSON array of objects.

    Key order inside each object is preserved, never sorted.
    """
    items: List[Dict[str, Optional[str]]] = [_page_to_dict(page) for page in pages]
    return json.dumps(items, ensure_ascii=False, indent=_INDENT)
