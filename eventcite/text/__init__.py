"""Markup normalization helpers for event descriptions."""

from .anchors import anchor_urls, strip_anchors
from .entities import ENTITY_MAP, decode_entities

__all__ = [
    "ENTITY_MAP",
    "anchor_urls",
    "decode_entities",
    "strip_anchors",
]
