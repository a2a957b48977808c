"""Create a new issue file."""

from __future__ import annotations

import logging

from issy.config import IssyConfig
from issy.fs import now_stamp, slugify
from issy.issues._helpers import DEFAULT_BODY, get_next_issue_number, write_issue
from issy.issues.model import (
    DEFAULT_PRIORITY,
    DEFAULT_TYPE,
    Issue,
    IssueFrontmatter,
    validate_fields,
)

log = logging.getLogger(__name__)


def create_issue(
    config: IssyConfig,
    title: str,
    description: str | None = None,
    body: str | None = None,
    priority: str | None = None,
    scope: str | None = None,
    type: str | None = None,
    labels: str | None = None,
    order: str | None = None,
) -> Issue:
    """Validate input, assign the next id, and write <id>-<slug>.md.

    Priority defaults to medium and type to improvement. The order key is
    stored as given; picking one is the roadmap's job, not the store's.
    """
    priority = priority or DEFAULT_PRIORITY
    type = type or DEFAULT_TYPE
    validate_fields(title=title, priority=priority, scope=scope, type=type, require_title=True)

    config.ensure_dirs()
    issue_id = get_next_issue_number(config)
    filename = f"{issue_id}-{slugify(title)}.md"

    frontmatter = IssueFrontmatter(
        title=title,
        description=description or None,
        priority=priority,
        scope=scope or None,
        type=type,
        labels=labels or None,
        status="open",
        order=order or None,
        created=now_stamp(),
    )
    issue = Issue(
        id=issue_id,
        filename=filename,
        frontmatter=frontmatter,
        content=body if body is not None else DEFAULT_BODY,
    )
    write_issue(config, issue)
    log.debug("create_issue: wrote %s", filename)
    return issue
