from __future__ import annotations

import re

ENTITY_MAP = {
    "&amp;": "&",
    "&lt;": "<",
    "&gt;": ">",
    "&quot;": '"',
    "&#39;": "'",
    "&ndash;": "–",
    "&mdash;": "—",
    "&hellip;": "…",
    "&copy;": "©",
    "&reg;": "®",
    "&trade;": "™",
}

_ENTITY_RE = re.compile("|".join(re.escape(entity) for entity in ENTITY_MAP))


def decode_entities(text: str) -> str:
    """
    Replace the supported named character references with literal characters.

    The substitution is a single pass, so ``&amp;lt;`` decodes to ``&lt;``
    and not to ``<``. References outside ``ENTITY_MAP`` (including numeric
    ones other than ``&#39;``) are left as they are.
    """
    if "&" not in text:
        return text
    return _ENTITY_RE.sub(lambda match: ENTITY_MAP[match.group(0)], text)
