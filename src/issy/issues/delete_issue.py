"""Delete an issue file permanently."""

from __future__ import annotations

import logging
import os

from issy.config import IssyConfig
from issy.errors import NotFoundError
from issy.issues._helpers import find_issue_file

log = logging.getLogger(__name__)


def delete_issue(config: IssyConfig, issue_id: str | int) -> None:
    """Remove the issue's file. Ids are never compacted or reused."""
    filename = find_issue_file(config, issue_id)
    if filename is None:
        raise NotFoundError(f"Issue not found: {issue_id}")
    os.unlink(config.issues_dir / filename)
    log.debug("delete_issue: removed %s", filename)
