"""Filesystem helpers for slugs, timestamps and atomic writes.

Issues live on disk as one markdown file each:
  <issues_dir>/<0001>-<slug>.md
"""

from __future__ import annotations

import os
import re
import tempfile
from datetime import datetime, timezone

SLUG_MAX_LEN = 50

# ---------------------------------------------------------------------------
# Slug / timestamp helpers
# ---------------------------------------------------------------------------


def slugify(text: str, max_len: int = SLUG_MAX_LEN) -> str:
    """Convert a title to a filename slug.

    Lowercases, drops anything outside [a-z0-9], whitespace and hyphens,
    turns whitespace runs into hyphens, collapses repeated hyphens, and
    truncates. Falls back to "issue" when nothing survives.
    """
    slug = text.lower()
    slug = re.sub(r"[^a-z0-9\s-]", "", slug)
    slug = re.sub(r"\s+", "-", slug)
    slug = re.sub(r"-{2,}", "-", slug)
    slug = slug[:max_len]
    return slug or "issue"


def now_stamp() -> str:
    """Current UTC time as ISO 8601 truncated to seconds: 2026-02-19T14:30:22."""
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S")


# ---------------------------------------------------------------------------
# Atomic file write
# ---------------------------------------------------------------------------


def atomic_write_file(path: str | os.PathLike[str], content: str) -> str:
    """Write content to path atomically (write-to-temp, then rename).

    Returns the final path.
    """
    path = os.fspath(path)
    d = os.path.dirname(path)
    os.makedirs(d, exist_ok=True)
    fd, tmp = tempfile.mkstemp(dir=d, suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(content)
        os.replace(tmp, path)
    except BaseException:
        try:
            os.unlink(tmp)
        except OSError:
            pass
        raise
    return path


def read_text_file(path: str | os.PathLike[str] | None) -> str | None:
    """Read a text file, returning None if missing or None."""
    if not path or not os.path.exists(path):
        return None
    with open(path, encoding="utf-8", newline="") as f:
        return f.read()
