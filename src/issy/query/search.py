"""Fuzzy search over issues, and the id-prefix-first ranking rule.

Scoring follows the usual "0 is perfect, 1 is no match" convention. Each
field is scored on its own with difflib: a plain substring hit scores 0,
otherwise the best word-aligned window of the text is compared with the
query. Fields above the threshold are ignored; the remaining field scores are
combined as ``prod(max(score, eps) ** weight)`` so a good title hit outranks
an equally good body hit.
"""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from difflib import SequenceMatcher

from issy.config import DEFAULT_SEARCH_THRESHOLD
from issy.issues.model import Issue

# (field, weight), title weighs most
SEARCH_FIELDS: tuple[tuple[str, float], ...] = (
    ("title", 1.0),
    ("description", 0.7),
    ("labels", 0.5),
    ("content", 0.3),
)

WORST_SCORE = 1.0
_EPSILON = sys.float_info.epsilon
_WORD_START = re.compile(r"(?<!\w)\w")


@dataclass
class SearchResult:
    issue: Issue
    score: float = WORST_SCORE


def _field_text(issue: Issue, name: str) -> str:
    if name == "content":
        return issue.content or ""
    return getattr(issue.frontmatter, name, None) or ""


def field_score(query: str, text: str) -> float:
    """Distance between a lower-cased query and a lower-cased field text."""
    if not query or not text:
        return WORST_SCORE
    if query in text:
        return 0.0

    n = len(query)
    sizes = {max(n - 1, 1), n, n + 1}
    matcher = SequenceMatcher(autojunk=False)
    matcher.set_seq2(query)
    best = WORST_SCORE
    for m in _WORD_START.finditer(text):
        start = m.start()
        for size in sizes:
            window = text[start : start + size]
            matcher.set_seq1(window)
            # cheap upper bounds first
            if 1.0 - matcher.real_quick_ratio() >= best or 1.0 - matcher.quick_ratio() >= best:
                continue
            best = min(best, 1.0 - matcher.ratio())
    return best


class SearchIndex:
    """Lower-cased weighted field texts for a fixed set of issues."""

    def __init__(
        self,
        issues: Iterable[Issue],
        threshold: float = DEFAULT_SEARCH_THRESHOLD,
        fields: Sequence[tuple[str, float]] = SEARCH_FIELDS,
    ) -> None:
        self.threshold = threshold
        self._docs = [
            (issue, [(weight, _field_text(issue, name).lower()) for name, weight in fields])
            for issue in issues
        ]

    def __len__(self) -> int:
        return len(self._docs)

    def search(self, query: str) -> list[SearchResult]:
        """Matching issues, best first. Equal scores keep index order."""
        q = query.strip().lower()
        if not q:
            return []

        results: list[SearchResult] = []
        for issue, texts in self._docs:
            total = 1.0
            matched = False
            for weight, text in texts:
                score = field_score(q, text)
                if score <= self.threshold:
                    matched = True
                    total *= max(score, _EPSILON) ** weight
            if matched:
                results.append(SearchResult(issue, total))

        results.sort(key=lambda r: r.score)
        return results


def create_search_index(issues: Iterable[Issue], threshold: float = DEFAULT_SEARCH_THRESHOLD) -> SearchIndex:
    return SearchIndex(issues, threshold)


def search_issues(index: SearchIndex, query: str) -> list[Issue]:
    """Issues matching query, sorted by relevance."""
    return [r.issue for r in index.search(query)]


# ---------------------------------------------------------------------------
# Id-prefix composition
# ---------------------------------------------------------------------------


def id_prefix_matches(issues: Iterable[Issue], query: str) -> list[Issue]:
    """Issues whose id starts with query, leading zeros ignored on both sides.

    "1", "01" and "0001" all match 0001 (and 0010..0019, 0100..).
    """
    query = query.strip()
    normalized_query = query.lstrip("0")
    return [
        issue
        for issue in issues
        if issue.id.lstrip("0").startswith(normalized_query) or issue.id.startswith(query)
    ]


def rank_with_id_matches(
    issues: Sequence[Issue], query: str, threshold: float = DEFAULT_SEARCH_THRESHOLD
) -> list[Issue]:
    """Id-prefix matches first in their incoming order, then fuzzy matches by score.

    An id match always outranks a fuzzy match, however good its score.
    """
    id_matches = id_prefix_matches(issues, query)
    seen = {issue.id for issue in id_matches}
    remainder = [issue for issue in issues if issue.id not in seen]
    fuzzy = SearchIndex(remainder, threshold).search(query)
    return id_matches + [r.issue for r in fuzzy]
