"""Shared constants: env var names, default paths, resolvers.

Single source of truth for locating the issy root directory. The resolved
root is handed to ``issy.config.load_config`` and threaded explicitly through
every store call; nothing here is cached at module level.
"""

from __future__ import annotations

import os
from pathlib import Path

# ---------------------------------------------------------------------------
# Env var names
# ---------------------------------------------------------------------------

ENV_DIR = "ISSY_DIR"
ENV_ROOT = "ISSY_ROOT"

# ---------------------------------------------------------------------------
# Default paths
# ---------------------------------------------------------------------------

ISSY_DIR_NAME = ".issy"
ISSUES_DIR_NAME = "issues"
CONFIG_FILE_NAME = "config.yaml"
ON_CLOSE_FILE_NAME = "on_close.md"

# Upward search depth for .issy / .git discovery
MAX_WALK_DEPTH = 20


# ---------------------------------------------------------------------------
# Resolvers
# ---------------------------------------------------------------------------


def find_issy_dir_upward(start: str | Path) -> Path | None:
    """Walk up from start looking for an existing .issy directory."""
    current = Path(start).expanduser().resolve()
    for _ in range(MAX_WALK_DEPTH):
        candidate = current / ISSY_DIR_NAME
        if candidate.is_dir():
            return candidate
        if current.parent == current:
            break
        current = current.parent
    return None


def find_git_root(start: str | Path) -> Path | None:
    """Return the directory holding .git above start, or None outside a repo."""
    current = Path(start).expanduser().resolve()
    for _ in range(MAX_WALK_DEPTH):
        if (current / ".git").exists():
            return current
        if current.parent == current:
            break
        current = current.parent
    return None


def resolve_issy_dir(start: str | Path | None = None) -> Path:
    """Resolve the issy root: ENV_DIR > existing .issy upward > git root > start dir.

    start overrides ENV_ROOT / cwd as the discovery origin.
    """
    explicit = os.getenv(ENV_DIR)
    if explicit:
        return Path(explicit).expanduser().resolve()

    origin = Path(start or os.getenv(ENV_ROOT) or os.getcwd())

    found = find_issy_dir_upward(origin)
    if found:
        return found

    git_root = find_git_root(origin)
    if git_root:
        return git_root / ISSY_DIR_NAME

    return origin.expanduser().resolve() / ISSY_DIR_NAME
