"""Fetch a single issue by id."""

from __future__ import annotations

from issy.config import IssyConfig
from issy.issues._helpers import find_issue_file, load_issue_file
from issy.issues.model import Issue


def get_issue(config: IssyConfig, issue_id: str | int) -> Issue | None:
    """Look up an issue by id; "1", "01" and "0001" all resolve the same file.

    Returns None when no file matches.
    """
    filename = find_issue_file(config, issue_id)
    if filename is None:
        return None
    return load_issue_file(config, filename)
