"""CLI output formatting — JSON by default, readable text with --human."""
from __future__ import annotations

import json
import sys
from typing import Any, NoReturn

import click

_RULE = "-" * 70


def output(data: dict[str, Any], human: bool = False) -> None:
    """Print result as JSON (default) or human-readable text.

    A dict carrying "error" goes to stderr and exits 1.
    """
    if "error" in data:
        fail(data)
    if human:
        click.echo(_format_human(data))
    else:
        click.echo(json.dumps(data, indent=2, default=str))


def fail(data: dict[str, Any] | str) -> NoReturn:
    """Print an error payload as JSON on stderr and exit 1."""
    if isinstance(data, str):
        data = {"error": data}
    click.echo(json.dumps(data, indent=2, default=str), err=True)
    sys.exit(1)


def format_issue_row(issue: dict[str, Any]) -> str:
    fm = issue["frontmatter"]
    status = "OPEN  " if fm.get("status") == "open" else "CLOSED"
    return (
        f"  {issue['id']}  {fm.get('priority', ''):<6}  {fm.get('type', ''):<11}  "
        f"{status}  {fm.get('title', '')[:45]}"
    )


def format_issue_detail(issue: dict[str, Any]) -> str:
    fm = issue["frontmatter"]
    lines = ["=" * 70, f"  {fm.get('title', '')}", "=" * 70, f"  ID:          {issue['id']}"]
    for label, key in (
        ("Status", "status"),
        ("Priority", "priority"),
        ("Scope", "scope"),
        ("Type", "type"),
        ("Labels", "labels"),
        ("Order", "order"),
        ("Created", "created"),
        ("Updated", "updated"),
    ):
        if fm.get(key):
            lines.append(f"  {label + ':':<12} {fm[key]}")
    if fm.get("description"):
        lines.append(f"  {fm['description']}")
    lines.append(_RULE)
    lines.append(issue.get("content", ""))
    return "\n".join(lines)


def _format_human(data: dict[str, Any]) -> str:
    lines: list[str] = []

    issues = data.get("issues")
    if isinstance(issues, list):
        if not issues:
            return "No issues found."
        lines.append("  ID    Pri     Type         Status  Title")
        lines.append(f"  {_RULE}")
        lines.extend(format_issue_row(i) for i in issues)
        lines.append("")
        lines.append(f"  Total: {len(issues)} issue(s)")
        return "\n".join(lines)

    issue = data.get("issue")
    if issue is None and "issue" in data:
        return str(data.get("message", "No issue."))
    if isinstance(issue, dict):
        if data.get("message"):
            lines.append(str(data["message"]))
        lines.append(format_issue_detail(issue))
        if data.get("on_close"):
            lines.append("")
            lines.append(str(data["on_close"]).strip())
        return "\n".join(lines)

    suggestions = data.get("suggestions")
    if isinstance(suggestions, list):
        for s in suggestions:
            lines.append(f"  {s['display_text']:<20} {s.get('description', '')}")
        return "\n".join(lines) or "No suggestions."

    for k, v in data.items():
        if isinstance(v, (list, dict)):
            lines.append(f"{k}: {json.dumps(v, indent=2, default=str)}")
        else:
            lines.append(f"{k}: {v}")
    return "\n".join(lines)
