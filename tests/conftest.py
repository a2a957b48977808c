"""Shared fixtures: an isolated issy root per test."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from issy.config import IssyConfig


@pytest.fixture
def config(tmp_path):
    """IssyConfig rooted in a temp .issy/ with an empty issues/ dir."""
    root = tmp_path / ".issy"
    cfg = IssyConfig(root=root)
    cfg.ensure_dirs()
    return cfg


@pytest.fixture
def runner():
    return CliRunner()
