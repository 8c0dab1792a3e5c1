"""Citation extraction and text normalization for historical event descriptions."""

from .citations import (
    Citation,
    CitationType,
    ParseResult,
    extract_urls,
    format_citation,
    format_citations,
    parse_citation_fields,
    parse_citations,
)
from .text import decode_entities, strip_anchors

__version__ = "0.1.0"

__all__ = [
    "Citation",
    "CitationType",
    "ParseResult",
    "decode_entities",
    "extract_urls",
    "format_citation",
    "format_citations",
    "parse_citation_fields",
    "parse_citations",
    "strip_anchors",
]
