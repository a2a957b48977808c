"""Autocomplete for the query language, driven by the cursor position."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from issy.issues.model import VALID_PRIORITIES, VALID_SCOPES, VALID_STATUSES, VALID_TYPES
from issy.query.filtering import SORT_OPTIONS
from issy.query.parser import SUPPORTED_QUALIFIERS

MAX_LABEL_SUGGESTIONS = 10

QUALIFIER_VALUES: dict[str, tuple[str, ...]] = {
    "is": VALID_STATUSES,
    "priority": VALID_PRIORITIES,
    "scope": VALID_SCOPES,
    "type": VALID_TYPES,
    "sort": SORT_OPTIONS,
}

_QUALIFIER_DESCRIPTIONS = {
    "is": "Filter by status",
    "priority": "Filter by priority",
    "scope": "Filter by scope",
    "type": "Filter by type",
    "label": "Filter by label",
    "sort": "Sort results",
}


@dataclass(frozen=True)
class Suggestion:
    text: str
    display_text: str
    description: str = ""


def _value_description(key: str, value: str) -> str:
    if key == "is":
        return "Open issues" if value == "open" else "Closed issues"
    if key == "type":
        return "Bug report" if value == "bug" else "Improvement"
    if key == "sort":
        return f"Sort by {value}"
    return f"{key.capitalize()}: {value}"


def _key_suggestions(keys: Sequence[str]) -> list[Suggestion]:
    return [Suggestion(f"{k}:", f"{k}:", _QUALIFIER_DESCRIPTIONS[k]) for k in keys]


def _value_suggestions(key: str, partial: str, known_labels: Sequence[str] | None) -> list[Suggestion]:
    partial = partial.lower()
    if key == "label":
        labels = [label for label in known_labels or () if partial in label.lower()]
        return [Suggestion(label, label, "Label") for label in labels[:MAX_LABEL_SUGGESTIONS]]
    return [
        Suggestion(value, value, _value_description(key, value))
        for value in QUALIFIER_VALUES.get(key, ())
        if value.startswith(partial)
    ]


def get_query_suggestions(
    query: str,
    cursor_pos: int | None = None,
    known_labels: Sequence[str] | None = None,
) -> list[Suggestion]:
    """Suggestions for the token under the cursor (end of query by default).

    ``key:partial`` with a known key suggests values, a bare word suggests
    qualifier keys it prefixes, and a fresh token suggests every key.
    """
    cursor = len(query) if cursor_pos is None else max(0, min(cursor_pos, len(query)))
    before = query[:cursor]
    token = before[before.rfind(" ") + 1 :]

    if ":" in token:
        key, _, partial = token.partition(":")
        if key.lower() in SUPPORTED_QUALIFIERS:
            return _value_suggestions(key.lower(), partial, known_labels)
        return []

    if token:
        return _key_suggestions([k for k in SUPPORTED_QUALIFIERS if k.startswith(token.lower())])

    words = before.split()
    previous = words[-1] if words else None
    if previous is None or not previous.endswith(":"):
        return _key_suggestions(SUPPORTED_QUALIFIERS)
    return []
