"""Click CLI entrypoint for `issy <subcommand>`.

Every call is stateless: the issy root is resolved once per invocation and
passed explicitly to the store. JSON output by default, --human for text.
"""

from __future__ import annotations

from dataclasses import asdict
from typing import Any, Callable, TypeVar

import click

from issy.config import IssyConfig, load_config
from issy.errors import IssyError, ValidationError
from issy.issues._helpers import pad_id
from issy.output import fail, output

T = TypeVar("T")


def _call(fn: Callable[..., T], *args: Any, **kwargs: Any) -> T:
    """Run a store call, turning IssyError into the standard error output."""
    try:
        return fn(*args, **kwargs)
    except IssyError as exc:
        fail(str(exc))


def _position_options(verb: str) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    def decorate(f: Callable[..., Any]) -> Callable[..., Any]:
        f = click.option("--last", is_flag=True, help=f"{verb} at the end of the roadmap")(f)
        f = click.option("--first", is_flag=True, help=f"{verb} at the beginning of the roadmap")(f)
        f = click.option("--after", default=None, help=f"{verb} after this issue in the roadmap")(f)
        f = click.option("--before", default=None, help=f"{verb} before this issue in the roadmap")(f)
        return f

    return decorate


def _resolve_position(
    config: IssyConfig,
    before: str | None,
    after: str | None,
    first: bool,
    last: bool,
    require_if_open: bool,
    exclude_id: str | None = None,
) -> str:
    """Order key for the requested position, enforcing the CLI's flag rules."""
    from issy.issues import get_open_issues_by_order
    from issy.roadmap import Position, compute_order_key, has_valid_order_key

    position = Position(first=first, last=last, after=after, before=before)
    open_issues = get_open_issues_by_order(config)
    excluded = pad_id(exclude_id) if exclude_id else None
    relevant = [i for i in open_issues if i.id != excluded and has_valid_order_key(i)]

    if require_if_open and relevant and not position.is_set:
        ids = ", ".join(f"#{i.id}" for i in relevant)
        raise ValidationError(
            "A position flag (--before, --after, --first, or --last) is required "
            f"when there are open issues. Open issues: {ids}"
        )
    return compute_order_key(open_issues, position, exclude_id)


@click.group()
@click.version_option(package_name="issy")
@click.option("--human", is_flag=True, help="Human-readable output instead of JSON")
@click.option("-C", "--dir", "issy_dir", default=None, help="issy root directory (default: $ISSY_DIR, nearest .issy, git root)")
@click.pass_context
def cli(ctx: click.Context, human: bool, issy_dir: str | None) -> None:
    """issy: local markdown issue tracker with a roadmap."""
    ctx.ensure_object(dict)
    ctx.obj["human"] = human
    try:
        ctx.obj["config"] = load_config(issy_dir)
    except ValueError as exc:
        fail(str(exc))


# =========================================================================
# Reading
# =========================================================================


@cli.command("list")
@click.option("--all", "-a", "show_all", is_flag=True, help="Include closed issues")
@click.option("--priority", "-p", default=None, help="high, medium, low")
@click.option("--scope", default=None, help="small, medium, large")
@click.option("--type", "-t", "issue_type", default=None, help="bug, improvement")
@click.option("--search", "-s", default=None, help="Fuzzy search text")
@click.option("--sort", default=None, help="roadmap, priority, scope, created, created-asc, updated, id")
@click.pass_context
def list_cmd(
    ctx: click.Context,
    show_all: bool,
    priority: str | None,
    scope: str | None,
    issue_type: str | None,
    search: str | None,
    sort: str | None,
) -> None:
    """List issues (open ones in roadmap order by default)."""
    from issy.issues import get_all_issues
    from issy.query import filter_by_query

    config: IssyConfig = ctx.obj["config"]
    parts: list[str] = []
    if not show_all:
        parts.append("is:open")
    if priority:
        parts.append(f"priority:{priority}")
    if scope:
        parts.append(f"scope:{scope}")
    if issue_type:
        parts.append(f"type:{issue_type}")
    parts.append(f"sort:{sort or config.default_sort}")
    if search:
        parts.append(search)

    issues = filter_by_query(get_all_issues(config), " ".join(parts), config.search_threshold)
    output({"issues": [i.to_dict() for i in issues], "total": len(issues)}, ctx.obj["human"])


@cli.command("search")
@click.argument("query")
@click.option("--all", "-a", "show_all", is_flag=True, help="Include closed issues")
@click.pass_context
def search_cmd(ctx: click.Context, query: str, show_all: bool) -> None:
    """Search issues with the query language (qualifiers + fuzzy text)."""
    from issy.issues import get_all_issues
    from issy.query import filter_by_query

    config: IssyConfig = ctx.obj["config"]
    full_query = query if show_all else f"is:open {query}"
    issues = filter_by_query(get_all_issues(config), full_query, config.search_threshold)
    output({"query": query, "issues": [i.to_dict() for i in issues], "total": len(issues)}, ctx.obj["human"])


@cli.command("read")
@click.argument("issue_id")
@click.pass_context
def read_cmd(ctx: click.Context, issue_id: str) -> None:
    """Show one issue."""
    from issy.issues import get_issue

    issue = get_issue(ctx.obj["config"], issue_id)
    if issue is None:
        fail(f"Issue not found: {issue_id}")
    output({"issue": issue.to_dict()}, ctx.obj["human"])


@cli.command("next")
@click.pass_context
def next_cmd(ctx: click.Context) -> None:
    """Show the next issue to work on (top of the roadmap)."""
    from issy.issues import get_next_issue

    issue = get_next_issue(ctx.obj["config"])
    if issue is None:
        output({"issue": None, "message": "No open issues."}, ctx.obj["human"])
        return
    output({"issue": issue.to_dict()}, ctx.obj["human"])


@cli.command("suggest")
@click.argument("query", default="")
@click.option("--cursor", default=None, type=int, help="Cursor position (default: end of query)")
@click.pass_context
def suggest_cmd(ctx: click.Context, query: str, cursor: int | None) -> None:
    """Autocomplete suggestions for a partial query."""
    from issy.issues import get_all_issues
    from issy.query import get_query_suggestions

    labels = sorted({label for i in get_all_issues(ctx.obj["config"]) for label in i.frontmatter.label_list})
    suggestions = get_query_suggestions(query, cursor, labels)
    output({"suggestions": [asdict(s) for s in suggestions]}, ctx.obj["human"])


# =========================================================================
# Writing
# =========================================================================


@cli.command("create")
@click.option("--title", "-t", required=True, help="Issue title")
@click.option("--description", "-d", default=None, help="Short description")
@click.option("--body", "-b", default=None, help="Markdown body content")
@click.option("--priority", "-p", default=None, help="high, medium, low")
@click.option("--scope", default=None, help="small, medium, large")
@click.option("--type", "issue_type", default=None, help="bug, improvement")
@click.option("--labels", "-l", default=None, help="Comma-separated labels")
@_position_options("Insert")
@click.pass_context
def create_cmd(
    ctx: click.Context,
    title: str,
    description: str | None,
    body: str | None,
    priority: str | None,
    scope: str | None,
    issue_type: str | None,
    labels: str | None,
    before: str | None,
    after: str | None,
    first: bool,
    last: bool,
) -> None:
    """Create an issue and place it in the roadmap."""
    from issy.issues import create_issue

    config: IssyConfig = ctx.obj["config"]
    order = _call(_resolve_position, config, before, after, first, last, require_if_open=True)
    issue = _call(
        create_issue,
        config,
        title=title,
        description=description,
        body=body,
        priority=priority,
        scope=scope,
        type=issue_type,
        labels=labels,
        order=order,
    )
    output({"message": f"Created issue: {issue.filename}", "issue": issue.to_dict()}, ctx.obj["human"])


@cli.command("update")
@click.argument("issue_id")
@click.option("--title", "-t", default=None, help="New title")
@click.option("--description", "-d", default=None, help="New description")
@click.option("--body", "-b", default=None, help="New markdown body")
@click.option("--priority", "-p", default=None, help="New priority")
@click.option("--scope", default=None, help="New scope")
@click.option("--type", "issue_type", default=None, help="New type")
@click.option("--labels", "-l", default=None, help="New labels")
@_position_options("Move")
@click.pass_context
def update_cmd(
    ctx: click.Context,
    issue_id: str,
    title: str | None,
    description: str | None,
    body: str | None,
    priority: str | None,
    scope: str | None,
    issue_type: str | None,
    labels: str | None,
    before: str | None,
    after: str | None,
    first: bool,
    last: bool,
) -> None:
    """Update fields of an issue, optionally moving it in the roadmap."""
    from issy.issues import update_issue

    config: IssyConfig = ctx.obj["config"]
    order = None
    if before or after or first or last:
        order = _call(
            _resolve_position, config, before, after, first, last, require_if_open=False, exclude_id=issue_id
        )
    issue = _call(
        update_issue,
        config,
        issue_id,
        title=title,
        description=description,
        body=body,
        priority=priority,
        scope=scope,
        type=issue_type,
        labels=labels,
        order=order,
    )
    output({"message": f"Updated issue: {issue.filename}", "issue": issue.to_dict()}, ctx.obj["human"])


@cli.command("close")
@click.argument("issue_id")
@click.pass_context
def close_cmd(ctx: click.Context, issue_id: str) -> None:
    """Close an issue and print the on-close hook, if any."""
    from issy.issues import close_issue, get_on_close_content

    config: IssyConfig = ctx.obj["config"]
    issue = _call(close_issue, config, issue_id)
    result: dict[str, Any] = {"message": "Issue closed.", "issue": issue.to_dict()}
    on_close = get_on_close_content(config)
    if on_close:
        result["on_close"] = on_close
    output(result, ctx.obj["human"])


@cli.command("reopen")
@click.argument("issue_id")
@_position_options("Insert")
@click.pass_context
def reopen_cmd(
    ctx: click.Context,
    issue_id: str,
    before: str | None,
    after: str | None,
    first: bool,
    last: bool,
) -> None:
    """Reopen a closed issue and place it back in the roadmap."""
    from issy.issues import reopen_issue

    config: IssyConfig = ctx.obj["config"]
    order = _call(
        _resolve_position, config, before, after, first, last, require_if_open=True, exclude_id=issue_id
    )
    issue = _call(reopen_issue, config, issue_id, order)
    output({"message": "Issue reopened.", "issue": issue.to_dict()}, ctx.obj["human"])


@cli.command("delete")
@click.argument("issue_id")
@click.confirmation_option(prompt="Delete this issue permanently?")
@click.pass_context
def delete_cmd(ctx: click.Context, issue_id: str) -> None:
    """Delete an issue file. Its id is not reassigned."""
    from issy.issues import delete_issue

    _call(delete_issue, ctx.obj["config"], issue_id)
    output({"status": "deleted", "id": pad_id(issue_id)}, ctx.obj["human"])


@cli.command("migrate")
@click.pass_context
def migrate_cmd(ctx: click.Context) -> None:
    """Give open issues without an order key a place at the end of the roadmap."""
    from issy.roadmap import assign_missing_order_keys

    updated = _call(assign_missing_order_keys, ctx.obj["config"])
    output({"issues": [i.to_dict() for i in updated], "total": len(updated)}, ctx.obj["human"])


if __name__ == "__main__":
    cli()
