"""Issues are stored one markdown file each under <issy root>/issues/.

The filesystem is the only store. Every operation takes an explicit
IssyConfig naming the root it works on.
"""

from ._helpers import get_issue_files, get_issue_id_from_filename, get_next_issue_number
from .close_issue import close_issue, get_on_close_content, reopen_issue
from .create_issue import create_issue
from .delete_issue import delete_issue
from .frontmatter import generate_frontmatter, parse_frontmatter
from .get_issue import get_issue
from .list_issues import get_all_issues, get_next_issue, get_open_issues_by_order
from .model import Issue, IssueFrontmatter
from .update_issue import update_issue

__all__: list[str] = [
    "Issue",
    "IssueFrontmatter",
    "close_issue",
    "create_issue",
    "delete_issue",
    "generate_frontmatter",
    "get_all_issues",
    "get_issue",
    "get_issue_files",
    "get_issue_id_from_filename",
    "get_next_issue",
    "get_next_issue_number",
    "get_on_close_content",
    "get_open_issues_by_order",
    "parse_frontmatter",
    "reopen_issue",
    "update_issue",
]
