from __future__ import annotations

from typing import Iterable, List

from .citation import Citation


def format_citation(citation: Citation) -> str:
    """Render a citation as ``author, "title", work, publisher, date, url``."""
    parts: List[str] = []

    if citation.author:
        parts.append(citation.author)
    if citation.title:
        parts.append(f'"{citation.title}"')
    if citation.work:
        parts.append(citation.work)
    if citation.publisher:
        parts.append(citation.publisher)

    date = citation.date or citation.year
    if date:
        parts.append(date)

    if citation.url:
        parts.append(citation.url)

    return ", ".join(parts)


def format_citations(citations: Iterable[Citation]) -> List[str]:
    return [format_citation(citation) for citation in citations]
