from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, Dict, List


class CitationType(str, Enum):
    WEB = "web"
    NEWS = "news"
    BOOK = "book"
    JOURNAL = "journal"
    MAGAZINE = "magazine"


@dataclass
class Citation:
    """Structured record extracted from one ``{{cite ...}}`` directive."""

    type: CitationType = CitationType.WEB
    url: str | None = None
    title: str | None = None
    publisher: str | None = None
    date: str | None = None
    accessdate: str | None = None
    author: str | None = None
    work: str | None = None
    year: str | None = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"type": self.type.value}
        for item in fields(self):
            if item.name == "type":
                continue
            value = getattr(self, item.name)
            if value is not None:
                data[item.name] = value
        return data


@dataclass
class ParseResult:
    clean_text: str
    citations: List[Citation] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "cleanText": self.clean_text,
            "citations": [citation.to_dict() for citation in self.citations],
        }
