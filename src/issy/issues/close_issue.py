"""Close and reopen issues, and the on-close hook."""

from __future__ import annotations

from issy.config import IssyConfig
from issy.fs import read_text_file
from issy.issues.model import Issue
from issy.issues.update_issue import update_issue


def close_issue(config: IssyConfig, issue_id: str | int) -> Issue:
    """Mark an issue closed. Its order key stays on disk."""
    return update_issue(config, issue_id, status="closed")


def reopen_issue(config: IssyConfig, issue_id: str | int, order: str | None = None) -> Issue:
    """Mark an issue open again, optionally placing it at a new roadmap key.

    Whether a key is mandatory (other open issues exist) is for the caller
    to enforce.
    """
    return update_issue(config, issue_id, status="open", order=order)


def get_on_close_content(config: IssyConfig) -> str | None:
    """Text of on_close.md in the issy root, shown after closing; None if absent."""
    return read_text_file(config.on_close_path)
