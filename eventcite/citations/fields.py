from __future__ import annotations

from .citation import Citation

# Keys copied verbatim onto the citation field of the same name.
DIRECT_KEYS = (
    "url",
    "title",
    "publisher",
    "date",
    "accessdate",
    "author",
    "work",
    "year",
)


def parse_citation_fields(body: str) -> Citation:
    """
    Build a citation from the ``key=value|key=value`` body of a directive.

    Segments without ``=`` or with an empty key or value are skipped, as are
    unknown keys. ``last`` always overwrites ``author`` while ``first`` is
    prepended to whatever author is already set, so ``last=Smith|first=John``
    gives ``"John Smith"`` but ``first=John|last=Smith`` gives ``"Smith"``.
    """
    citation = Citation()

    for segment in body.split("|"):
        key, sep, value = segment.partition("=")
        if not sep:
            continue
        key = key.strip()
        value = value.strip()
        if not key or not value:
            continue

        if key in DIRECT_KEYS:
            setattr(citation, key, value)
        elif key == "last":
            citation.author = value
        elif key == "first":
            if citation.author:
                citation.author = f"{value} {citation.author}"
            else:
                citation.author = value

    return citation
