from __future__ import annotations

import re
from typing import List

from ..text.anchors import anchor_urls
from .scanner import GENERIC_CITE_RE

_URL_FIELD_RE = re.compile(r"url=([^|]+)")


def extract_urls(text: str) -> List[str]:
    """
    Collect URLs from anchor tags and from ``url=`` fields of cite directives.

    Anchor URLs come first, then directive URLs, each group in source order.
    Duplicates are kept.
    """
    urls = anchor_urls(text)

    for match in GENERIC_CITE_RE.finditer(text):
        url_match = _URL_FIELD_RE.search(match.group(2))
        if url_match:
            urls.append(url_match.group(1))

    return urls
