"""Parse and generate the frontmatter header of an issue file.

The header is a flat ``key: value`` block between two ``---`` lines. It looks
like YAML but is not: values are raw strings, and only ``title`` goes through
quoting. Enum checks belong to ``issy.issues.model``; this module works on
plain ``dict[str, str]`` and never rejects input.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping

log = logging.getLogger(__name__)

_FM_PATTERN = re.compile(r"\A---[ \t]*\r?\n(.*?)^---[ \t]*(?:\r?\n|\Z)", re.DOTALL | re.MULTILINE)

# Emission order; keys outside this list are written afterwards as found
FIELD_ORDER: tuple[str, ...] = (
    "title",
    "description",
    "priority",
    "scope",
    "type",
    "labels",
    "status",
    "order",
    "created",
    "updated",
)

# Written even when empty
_REQUIRED_KEYS = {"title", "priority", "type", "status", "created"}

_TITLE_SPECIALS = set(":#[]{}&*!|>'\"%@`,\n\r")
_UNESCAPE = re.compile(r'\\(["\\nr])')


# ---------------------------------------------------------------------------
# Title quoting
# ---------------------------------------------------------------------------


def needs_quoting(title: str) -> bool:
    """True when the title carries a reserved character or edge whitespace."""
    if title != title.strip():
        return True
    return any(ch in _TITLE_SPECIALS for ch in title)


def quote_title(title: str) -> str:
    """Double-quote a title when needed, escaping backslash then quote.

    Newlines and carriage returns are escaped as ``\\n`` and ``\\r`` so the
    header stays one line per key.
    """
    if not needs_quoting(title):
        return title
    escaped = title.replace("\\", "\\\\").replace('"', '\\"')
    escaped = escaped.replace("\n", "\\n").replace("\r", "\\r")
    return f'"{escaped}"'


def unquote_title(value: str) -> str:
    """Reverse quote_title: strip matching quotes and undo double-quote escapes."""
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
        inner = value[1:-1]
        if value[0] == '"':
            escapes = {'"': '"', "\\": "\\", "n": "\n", "r": "\r"}
            return _UNESCAPE.sub(lambda m: escapes[m.group(1)], inner)
        return inner
    return value


# ---------------------------------------------------------------------------
# Codec
# ---------------------------------------------------------------------------


def parse_frontmatter(content: str) -> tuple[dict[str, str], str]:
    """Split raw file text into (frontmatter fields, body).

    Text without a leading ``---`` line and a closing ``---`` line is not an
    error: the fields come back empty and the whole text is the body.
    """
    m = _FM_PATTERN.match(content)
    if not m:
        log.debug("parse_frontmatter: no frontmatter block, treating content as body")
        return {}, content

    fields: dict[str, str] = {}
    for line in m.group(1).split("\n"):
        line = line.rstrip("\r")
        colon = line.find(":")
        if colon <= 0:
            continue
        key = line[:colon].strip()
        value = line[colon + 1 :].strip()
        if key == "title":
            value = unquote_title(value)
        fields[key] = value

    return fields, content[m.end() :]


def generate_frontmatter(fields: Mapping[str, str | None]) -> str:
    """Render fields as a ``---`` delimited header (no trailing newline).

    Keys whose value is None are skipped, and so are optional keys holding an
    empty string. Only the title is quoted; every other value is written raw.
    """
    lines = ["---"]
    ordered = [k for k in FIELD_ORDER if k in fields]
    ordered += [k for k in fields if k not in FIELD_ORDER]
    for key in ordered:
        value = fields[key]
        if value is None:
            continue
        if key == "title":
            lines.append(f"title: {quote_title(value)}")
            continue
        if value == "" and key not in _REQUIRED_KEYS:
            continue
        lines.append(f"{key}: {value}")
    lines.append("---")
    return "\n".join(lines)
