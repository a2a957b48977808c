"""Load every issue, and the open roadmap, in default order."""

from __future__ import annotations

from collections.abc import Iterable

from issy.config import IssyConfig
from issy.issues._helpers import get_issue_files, load_issue_file
from issy.issues.model import Issue


def roadmap_sort_key(issue: Issue) -> tuple[bool, str, str]:
    """Ordered issues first by key, unordered after; ties by id ascending."""
    order = issue.frontmatter.order
    return (not order, order or "", issue.id)


def sort_by_roadmap(issues: Iterable[Issue]) -> list[Issue]:
    return sorted(issues, key=roadmap_sort_key)


def get_all_issues(config: IssyConfig) -> list[Issue]:
    """Every readable issue file, in roadmap order."""
    issues = []
    for filename in get_issue_files(config):
        issue = load_issue_file(config, filename)
        if issue is not None:
            issues.append(issue)
    return sort_by_roadmap(issues)


def get_open_issues_by_order(config: IssyConfig) -> list[Issue]:
    """Open issues in roadmap order. Closed issues keep their key but drop out."""
    return [issue for issue in get_all_issues(config) if issue.is_open]


def get_next_issue(config: IssyConfig) -> Issue | None:
    """First open issue in the roadmap, or None."""
    open_issues = get_open_issues_by_order(config)
    return open_issues[0] if open_issues else None
