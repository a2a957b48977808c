"""Shared helpers for issue CRUD operations."""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path

from issy.config import IssyConfig
from issy.fs import atomic_write_file, read_text_file
from issy.issues.frontmatter import generate_frontmatter, parse_frontmatter
from issy.issues.model import Issue, IssueFrontmatter

log = logging.getLogger(__name__)

ID_WIDTH = 4

_ISSUE_FILE = re.compile(r"^\d{4,}-.*\.md$")
_ID_PREFIX = re.compile(r"^(\d+)-")

# Placeholder body for issues created without one
DEFAULT_BODY = "\n## Details\n\n<!-- Add detailed description here -->\n\n"


# ---------------------------------------------------------------------------
# Id helpers
# ---------------------------------------------------------------------------


def pad_id(issue_id: str | int) -> str:
    """Zero-pad an id to ID_WIDTH digits: "1" -> "0001"."""
    return str(issue_id).strip().zfill(ID_WIDTH)


def get_issue_id_from_filename(filename: str) -> str:
    """"0001-fix-bug.md" -> "0001". Falls back to the name without .md."""
    m = _ID_PREFIX.match(filename)
    if m:
        return m.group(1)
    return filename[:-3] if filename.endswith(".md") else filename


# ---------------------------------------------------------------------------
# File listing / loading
# ---------------------------------------------------------------------------


def get_issue_files(config: IssyConfig) -> list[str]:
    """Issue filenames in the issues directory, sorted by name.

    A missing directory is an empty tracker, not an error.
    """
    try:
        names = os.listdir(config.issues_dir)
    except FileNotFoundError:
        return []
    return sorted(n for n in names if _ISSUE_FILE.match(n))


def get_next_issue_number(config: IssyConfig) -> str:
    """Next free id: max existing numeric prefix + 1, or "0001"."""
    numbers = [int(get_issue_id_from_filename(f)) for f in get_issue_files(config)]
    return pad_id(max(numbers, default=0) + 1)


def find_issue_file(config: IssyConfig, issue_id: str | int) -> str | None:
    """Filename for an id in any padded/unpadded form, or None."""
    padded = pad_id(issue_id)
    for name in get_issue_files(config):
        if name.startswith(f"{padded}-") or get_issue_id_from_filename(name) == padded:
            return name
    return None


def load_issue_file(config: IssyConfig, filename: str) -> Issue | None:
    """Read and parse one issue file. Returns None if it vanished or is unreadable."""
    path = Path(config.issues_dir) / filename
    try:
        text = read_text_file(path)
    except OSError as exc:
        log.warning("load_issue_file: cannot read %s: %s", path, exc)
        return None
    if text is None:
        return None

    fields, body = parse_frontmatter(text)
    return Issue(
        id=get_issue_id_from_filename(filename),
        filename=filename,
        frontmatter=IssueFrontmatter.from_raw(fields),
        content=body,
    )


def write_issue(config: IssyConfig, issue: Issue) -> None:
    """Serialize frontmatter + body and write the issue file atomically."""
    text = f"{generate_frontmatter(issue.frontmatter.to_raw())}\n{issue.content}"
    atomic_write_file(Path(config.issues_dir) / issue.filename, text)
