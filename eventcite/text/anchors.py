from __future__ import annotations

import re
from typing import List

ANCHOR_RE = re.compile(r'<a href="([^"]+)">([^<]+)</a>')


def strip_anchors(text: str) -> str:
    """Replace ``<a href="URL">TEXT</a>`` with ``TEXT``, dropping the URL."""
    return ANCHOR_RE.sub(lambda match: match.group(2), text)


def anchor_urls(text: str) -> List[str]:
    return [match.group(1) for match in ANCHOR_RE.finditer(text)]
