"""Turn "put it here" requests into order keys against the open roadmap."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from issy.config import IssyConfig
from issy.errors import NotFoundError, ValidationError
from issy.issues._helpers import pad_id
from issy.issues.list_issues import get_open_issues_by_order
from issy.issues.model import Issue
from issy.issues.update_issue import update_issue
from issy.roadmap.order_keys import (
    generate_batch_order_keys,
    generate_key_between,
    generate_n_keys_between,
    is_valid_order_key,
)

log = logging.getLogger(__name__)


def has_valid_order_key(issue: Issue) -> bool:
    """True when the issue carries a well-formed order key.

    A hand-edited key that does not parse is logged and treated as absent.
    """
    order = issue.frontmatter.order
    if not order:
        return False
    if not is_valid_order_key(order):
        log.warning("issue %s: ignoring malformed order key %r", issue.id, order)
        return False
    return True


@dataclass(frozen=True)
class Position:
    """At most one of first/last/after/before. All unset means append."""

    first: bool = False
    last: bool = False
    after: str | None = None
    before: str | None = None

    def __post_init__(self) -> None:
        if self.count() > 1:
            raise ValidationError("Only one of --before, --after, --first, or --last can be specified.")

    def count(self) -> int:
        return sum(1 for v in (self.first, self.last, self.after, self.before) if v)

    @property
    def is_set(self) -> bool:
        return self.count() > 0


def compute_order_key(
    open_issues: Sequence[Issue],
    position: Position | None = None,
    exclude_id: str | None = None,
) -> str:
    """Key for inserting at position among open_issues (already in roadmap order).

    Only issues holding a well-formed order key take part. exclude_id drops the issue
    being moved so it does not count as its own neighbour. Raises
    NotFoundError when an after/before target is not in that list.
    """
    position = position or Position()
    excluded = pad_id(exclude_id) if exclude_id else None
    candidates = sorted(
        (issue for issue in open_issues if issue.id != excluded and has_valid_order_key(issue)),
        key=lambda issue: issue.frontmatter.order,
    )
    keys = [issue.frontmatter.order for issue in candidates]

    if position.first:
        return generate_key_between(None, keys[0] if keys else None)

    if position.after or position.before:
        target = pad_id(position.after or position.before)
        idx = next((i for i, issue in enumerate(candidates) if issue.id == target), None)
        if idx is None:
            raise NotFoundError(
                f"Issue #{target} not found among open issues. "
                "The target must be an open issue in the roadmap."
            )
        if position.after:
            hi = keys[idx + 1] if idx + 1 < len(keys) else None
            return generate_key_between(keys[idx], hi)
        lo = keys[idx - 1] if idx > 0 else None
        return generate_key_between(lo, keys[idx])

    # last, or no position at all
    return generate_key_between(keys[-1] if keys else None, None)


def assign_missing_order_keys(config: IssyConfig) -> list[Issue]:
    """Give every open issue without a usable key a place at the end of the roadmap.

    Issues are placed in filename (= creation) order. Returns the updated
    issues; an empty list when nothing needed a key.
    """
    open_issues = get_open_issues_by_order(config)
    valid = {i.id for i in open_issues if has_valid_order_key(i)}
    ordered = [i for i in open_issues if i.id in valid]
    missing = sorted((i for i in open_issues if i.id not in valid), key=lambda i: i.filename)
    if not missing:
        return []

    lo = ordered[-1].frontmatter.order if ordered else None
    keys = generate_n_keys_between(lo, None, len(missing)) if lo else generate_batch_order_keys(len(missing))
    updated = [update_issue(config, issue.id, order=key) for issue, key in zip(missing, keys)]
    log.debug("assign_missing_order_keys: placed %d issue(s)", len(updated))
    return updated
