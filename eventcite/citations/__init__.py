"""Citation directive parsing and rendering."""

from .citation import Citation, CitationType, ParseResult
from .fields import parse_citation_fields
from .formatter import format_citation, format_citations
from .scanner import parse_citations, scan_citations, strip_residual_markup
from .urls import extract_urls

__all__ = [
    "Citation",
    "CitationType",
    "ParseResult",
    "extract_urls",
    "format_citation",
    "format_citations",
    "parse_citation_fields",
    "parse_citations",
    "scan_citations",
    "strip_residual_markup",
]
