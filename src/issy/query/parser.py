"""GitHub-style query parsing: ``is:open priority:high login bug``.

``key:value`` tokens with a known key become qualifiers; everything else is
free text for fuzzy search.
"""

from __future__ import annotations

from dataclasses import dataclass, field

SUPPORTED_QUALIFIERS = ("is", "priority", "scope", "type", "label", "sort")


@dataclass
class ParsedQuery:
    qualifiers: dict[str, str] = field(default_factory=dict)
    search_text: str = ""


def tokenize_query(query: str) -> list[str]:
    """Split on spaces, keeping quoted phrases whole and dropping the quotes."""
    tokens: list[str] = []
    current: list[str] = []
    quote: str | None = None

    for ch in query:
        if quote is None and ch in ("'", '"'):
            quote = ch
        elif quote is not None and ch == quote:
            quote = None
        elif quote is None and ch == " ":
            if current:
                tokens.append("".join(current))
                current = []
        else:
            current.append(ch)

    if current:
        tokens.append("".join(current))
    return tokens


def parse_query(query: str | None) -> ParsedQuery:
    """Extract qualifiers and search text from a query string.

    A repeated qualifier keeps its last value. Qualifier keys are matched
    case-insensitively and stored lower-case; values are kept as typed and
    compared case-insensitively by the filter.
    """
    parsed = ParsedQuery()
    if not query or not query.strip():
        return parsed

    text_parts: list[str] = []
    for token in tokenize_query(query):
        colon = token.find(":")
        if 0 < colon < len(token) - 1:
            key = token[:colon].lower()
            if key in SUPPORTED_QUALIFIERS:
                parsed.qualifiers[key] = token[colon + 1 :]
                continue
        text_parts.append(token)

    parsed.search_text = " ".join(text_parts).strip()
    return parsed
