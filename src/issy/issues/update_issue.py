"""Patch fields on an existing issue."""

from __future__ import annotations

import logging

from issy.config import IssyConfig
from issy.errors import NotFoundError
from issy.fs import now_stamp
from issy.issues._helpers import write_issue
from issy.issues.get_issue import get_issue
from issy.issues.model import Issue, validate_fields

log = logging.getLogger(__name__)


def update_issue(
    config: IssyConfig,
    issue_id: str | int,
    title: str | None = None,
    description: str | None = None,
    body: str | None = None,
    priority: str | None = None,
    scope: str | None = None,
    type: str | None = None,
    labels: str | None = None,
    status: str | None = None,
    order: str | None = None,
) -> Issue:
    """Merge the provided fields into an issue and stamp ``updated``.

    None leaves a field alone. An empty string clears the optional fields
    (description, scope, labels, order). ``body`` replaces the markdown body
    wholesale; without it the body is kept byte for byte. The filename keeps
    its original slug so the id always maps to the same file.
    """
    validate_fields(title=title, priority=priority, scope=scope, type=type, status=status)

    issue = get_issue(config, issue_id)
    if issue is None:
        raise NotFoundError(f"Issue not found: {issue_id}")

    fm = issue.frontmatter
    if title is not None:
        fm.title = title
    if priority is not None:
        fm.priority = priority
    if type is not None:
        fm.type = type
    if status is not None:
        fm.status = status
    if description is not None:
        fm.description = description or None
    if scope is not None:
        fm.scope = scope or None
    if labels is not None:
        fm.labels = labels or None
    if order is not None:
        fm.order = order or None
    fm.updated = now_stamp()

    if body is not None:
        issue.content = body

    write_issue(config, issue)
    log.debug("update_issue: rewrote %s", issue.filename)
    return issue
