"""issy — a local issue tracker.

Issues are markdown files with a small frontmatter header, kept in
``<root>/issues/``. Open issues form a roadmap ordered by fractional keys,
and a GitHub-style query language filters, sorts and searches them.
"""

from issy.config import IssyConfig, load_config
from issy.errors import IssyError, NotFoundError, ValidationError
from issy.issues import (
    Issue,
    IssueFrontmatter,
    close_issue,
    create_issue,
    delete_issue,
    generate_frontmatter,
    get_all_issues,
    get_issue,
    get_next_issue,
    get_on_close_content,
    get_open_issues_by_order,
    parse_frontmatter,
    reopen_issue,
    update_issue,
)
from issy.query import (
    filter_and_search_issues,
    filter_by_query,
    get_query_suggestions,
    parse_query,
)
from issy.roadmap import (
    Position,
    assign_missing_order_keys,
    compute_order_key,
    generate_batch_order_keys,
)

__all__: list[str] = [
    "Issue",
    "IssueFrontmatter",
    "IssyConfig",
    "IssyError",
    "NotFoundError",
    "Position",
    "ValidationError",
    "assign_missing_order_keys",
    "close_issue",
    "compute_order_key",
    "create_issue",
    "delete_issue",
    "filter_and_search_issues",
    "filter_by_query",
    "generate_batch_order_keys",
    "generate_frontmatter",
    "get_all_issues",
    "get_issue",
    "get_next_issue",
    "get_on_close_content",
    "get_open_issues_by_order",
    "get_query_suggestions",
    "load_config",
    "parse_frontmatter",
    "parse_query",
    "reopen_issue",
    "update_issue",
]
