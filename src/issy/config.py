from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import yaml

from issy.defaults import (
    CONFIG_FILE_NAME,
    ISSUES_DIR_NAME,
    ON_CLOSE_FILE_NAME,
    resolve_issy_dir,
)

log = logging.getLogger(__name__)

DEFAULT_SEARCH_THRESHOLD = 0.4
DEFAULT_SORT = "roadmap"

_CONFIG_KEYS = {"search_threshold", "default_sort"}


@dataclass(frozen=True)
class IssyConfig:
    """Explicit handle to one issy root. Passed to every store function."""

    root: Path
    search_threshold: float = DEFAULT_SEARCH_THRESHOLD
    default_sort: str = DEFAULT_SORT

    @property
    def issues_dir(self) -> Path:
        return self.root / ISSUES_DIR_NAME

    @property
    def config_path(self) -> Path:
        return self.root / CONFIG_FILE_NAME

    @property
    def on_close_path(self) -> Path:
        return self.root / ON_CLOSE_FILE_NAME

    def ensure_dirs(self) -> None:
        self.issues_dir.mkdir(parents=True, exist_ok=True)


def load_config(root: str | Path | None = None) -> IssyConfig:
    """Build an IssyConfig for root (resolved from env/cwd when None).

    Reads the optional config.yaml next to the issues directory. A missing
    file yields defaults; a file that is not a YAML mapping raises ValueError.
    """
    root_path = Path(root).expanduser().resolve() if root else resolve_issy_dir()
    cfg_path = root_path / CONFIG_FILE_NAME
    if not cfg_path.exists():
        return IssyConfig(root=root_path)

    raw = yaml.safe_load(cfg_path.read_text(encoding="utf-8")) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"{cfg_path}: top-level config must be a YAML mapping")

    unknown = set(raw) - _CONFIG_KEYS
    if unknown:
        log.warning("load_config: ignoring unknown keys in %s: %s", cfg_path, sorted(unknown))

    threshold = raw.get("search_threshold", DEFAULT_SEARCH_THRESHOLD)
    try:
        threshold = float(threshold)
    except (TypeError, ValueError):
        raise ValueError(f"{cfg_path}: search_threshold must be a number, got {threshold!r}")
    if not 0.0 <= threshold <= 1.0:
        raise ValueError(f"{cfg_path}: search_threshold must be between 0 and 1, got {threshold}")

    default_sort = str(raw.get("default_sort", DEFAULT_SORT)).strip().lower() or DEFAULT_SORT

    return IssyConfig(root=root_path, search_threshold=threshold, default_sort=default_sort)
