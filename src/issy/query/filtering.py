"""Qualifier filters, sort orders, and the two search entry points.

Filters fail open: a qualifier whose value is not in the vocabulary does not
exclude anything, so a typo never empties the result set.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from issy.config import DEFAULT_SEARCH_THRESHOLD
from issy.issues.list_issues import sort_by_roadmap
from issy.issues.model import (
    VALID_PRIORITIES,
    VALID_SCOPES,
    VALID_STATUSES,
    VALID_TYPES,
    Issue,
)
from issy.query.parser import parse_query
from issy.query.search import rank_with_id_matches

SORT_OPTIONS = ("roadmap", "priority", "scope", "created", "created-asc", "updated", "id")

_PRIORITY_RANK = {value: rank for rank, value in enumerate(VALID_PRIORITIES)}
_SCOPE_RANK = {value: rank for rank, value in enumerate(VALID_SCOPES)}
_UNKNOWN_RANK = 999


# ---------------------------------------------------------------------------
# Sorting
# ---------------------------------------------------------------------------


def _by_rank(issues: Iterable[Issue], attr: str, ranks: dict[str, int]) -> list[Issue]:
    """Rank ascending, newest id first within a rank."""
    newest_first = sorted(issues, key=lambda i: i.id, reverse=True)
    return sorted(newest_first, key=lambda i: ranks.get(getattr(i.frontmatter, attr) or "", _UNKNOWN_RANK))


def sort_issues(issues: Iterable[Issue], sort_by: str | None = None) -> list[Issue]:
    """Return issues in the named order. Unknown names fall back to priority."""
    option = (sort_by or "roadmap").lower()

    if option == "roadmap":
        return sort_by_roadmap(issues)
    if option == "scope":
        return _by_rank(issues, "scope", _SCOPE_RANK)
    if option == "created":
        return sorted(issues, key=lambda i: (i.frontmatter.created or "", i.id), reverse=True)
    if option == "created-asc":
        return sorted(issues, key=lambda i: (i.frontmatter.created or "", i.id))
    if option == "updated":
        return sorted(
            issues,
            key=lambda i: (i.frontmatter.updated or i.frontmatter.created or "", i.id),
            reverse=True,
        )
    if option == "id":
        return sorted(issues, key=lambda i: i.id, reverse=True)
    return _by_rank(issues, "priority", _PRIORITY_RANK)


# ---------------------------------------------------------------------------
# Qualifier filtering
# ---------------------------------------------------------------------------


def _matches_choice(actual: str | None, wanted: str | None, valid: tuple[str, ...]) -> bool:
    if not wanted:
        return True
    wanted = wanted.lower()
    if wanted not in valid:
        return True
    return actual == wanted


def matches_qualifiers(issue: Issue, qualifiers: dict[str, str]) -> bool:
    """AND of every qualifier; invalid values pass."""
    fm = issue.frontmatter
    if not _matches_choice(fm.status, qualifiers.get("is"), VALID_STATUSES):
        return False
    if not _matches_choice(fm.priority, qualifiers.get("priority"), VALID_PRIORITIES):
        return False
    if not _matches_choice(fm.scope, qualifiers.get("scope"), VALID_SCOPES):
        return False
    if not _matches_choice(fm.type, qualifiers.get("type"), VALID_TYPES):
        return False
    label = qualifiers.get("label")
    if label and label.lower() not in (fm.labels or "").lower():
        return False
    return True


def filter_by_query(
    issues: Sequence[Issue], query: str, threshold: float = DEFAULT_SEARCH_THRESHOLD
) -> list[Issue]:
    """Apply a query string: qualifiers filter, then sort or fuzzy-rank.

    Without free text the ``sort:`` qualifier decides the order (roadmap by
    default). With free text, id-prefix matches come first and the rest is
    ordered by relevance; ``sort:`` is ignored.
    """
    parsed = parse_query(query)
    result = [issue for issue in issues if matches_qualifiers(issue, parsed.qualifiers)]

    if not parsed.search_text:
        return sort_issues(result, parsed.qualifiers.get("sort"))
    return rank_with_id_matches(result, parsed.search_text, threshold)


# ---------------------------------------------------------------------------
# Literal filters (dropdown-style entry point)
# ---------------------------------------------------------------------------


def filter_issues(
    issues: Iterable[Issue],
    status: str | None = None,
    priority: str | None = None,
    scope: str | None = None,
    type: str | None = None,
) -> list[Issue]:
    """Keep issues whose fields equal every given value exactly."""
    wanted = {"status": status, "priority": priority, "scope": scope, "type": type}
    return [
        issue
        for issue in issues
        if all(getattr(issue.frontmatter, k) == v for k, v in wanted.items() if v)
    ]


def filter_and_search_issues(
    issues: Sequence[Issue],
    status: str | None = None,
    priority: str | None = None,
    scope: str | None = None,
    type: str | None = None,
    search: str | None = None,
    threshold: float = DEFAULT_SEARCH_THRESHOLD,
) -> list[Issue]:
    """Literal field filters, then the same id-first fuzzy ranking as filter_by_query."""
    result = filter_issues(issues, status=status, priority=priority, scope=scope, type=type)
    if search and search.strip():
        return rank_with_id_matches(result, search.strip(), threshold)
    return result
