"""Query language: parse, filter, sort, fuzzy search, autocomplete."""

from .filtering import (
    SORT_OPTIONS,
    filter_and_search_issues,
    filter_by_query,
    filter_issues,
    sort_issues,
)
from .parser import SUPPORTED_QUALIFIERS, ParsedQuery, parse_query
from .search import SearchIndex, SearchResult, create_search_index, search_issues
from .suggest import Suggestion, get_query_suggestions

__all__: list[str] = [
    "SORT_OPTIONS",
    "SUPPORTED_QUALIFIERS",
    "ParsedQuery",
    "SearchIndex",
    "SearchResult",
    "Suggestion",
    "create_search_index",
    "filter_and_search_issues",
    "filter_by_query",
    "filter_issues",
    "get_query_suggestions",
    "parse_query",
    "search_issues",
    "sort_issues",
]
