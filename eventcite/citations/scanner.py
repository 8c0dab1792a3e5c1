from __future__ import annotations

import logging
import re
from typing import List, Tuple

from ..text.anchors import strip_anchors
from ..text.entities import decode_entities
from .citation import Citation, CitationType, ParseResult
from .fields import parse_citation_fields

logger = logging.getLogger(__name__)

CITATION_TYPES = tuple(member.value for member in CitationType)
_TYPES_ALT = "|".join(CITATION_TYPES)

# Directives never nest in the event corpus, so every pattern stops at the
# first closing brace. A nested ``{{...}}`` inside a directive is mis-parsed.
GENERIC_CITE_RE = re.compile(r"\{\{cite (" + _TYPES_ALT + r")\|([^}]*)\}\}")

CITATION_PATTERNS = (
    GENERIC_CITE_RE,
    re.compile(r"\{\{cite book[^}]*\}\}"),
    re.compile(r"\{\{cite news[^}]*\}\}"),
    re.compile(r"\{\{cite web[^}]*\}\}"),
    re.compile(r"\{\{cite journal[^}]*\}\}"),
    re.compile(r"\{\{cite magazine[^}]*\}\}"),
)

_TYPE_PREFIX_RE = re.compile(r"\{\{cite (" + _TYPES_ALT + r")\|")
_BODY_RE = re.compile(r"\{\{cite [^|]*\|(.*)\}\}", re.DOTALL)

DEAD_LINK_RE = re.compile(r"\{\{dead link\|[^}]+\}\}")
REF_NAME_RE = re.compile(r"\{\{ref name=[^}]+\}\}")
ENTITY_ARTIFACT = "ampamp"
_WHITESPACE_RE = re.compile(r"\s+")


def _citation_type(directive: str) -> CitationType:
    match = _TYPE_PREFIX_RE.match(directive)
    if match is None:
        return CitationType.WEB
    return CitationType(match.group(1))


def _directive_body(directive: str) -> str:
    match = _BODY_RE.match(directive)
    return match.group(1) if match else ""


def scan_citations(text: str) -> Tuple[str, List[Citation]]:
    """
    Remove every citation directive from ``text``.

    Returns the remaining text and the citations built from directives with a
    non-empty field body, in the order the patterns found them.
    """
    citations: List[Citation] = []

    def _consume(match: re.Match) -> str:
        directive = match.group(0)
        body = _directive_body(directive)
        if body:
            citation = parse_citation_fields(body)
            citation.type = _citation_type(directive)
            citations.append(citation)
        return ""

    for pattern in CITATION_PATTERNS:
        text, removed = pattern.subn(_consume, text)
        if removed:
            logger.debug("Removed %d directive(s) matching %s", removed, pattern.pattern)

    return text, citations


def strip_residual_markup(text: str) -> str:
    """Drop dead-link and ref-name markers, the entity artifact and extra whitespace."""
    text = DEAD_LINK_RE.sub("", text)
    text = REF_NAME_RE.sub("", text)
    text = text.replace(ENTITY_ARTIFACT, "")
    return _WHITESPACE_RE.sub(" ", text).strip()


def parse_citations(text: str) -> ParseResult:
    """
    Split a raw event description into display text and citations.

    Anchors are stripped before scanning and entities are decoded last, so
    decoded characters never take part in brace or pipe matching.
    """
    clean_text = strip_anchors(text)
    clean_text, citations = scan_citations(clean_text)
    clean_text = strip_residual_markup(clean_text)
    clean_text = decode_entities(clean_text)

    if citations:
        logger.debug("Extracted %d citation(s)", len(citations))
    return ParseResult(clean_text=clean_text, citations=citations)
