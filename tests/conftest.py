"""Shared fixtures for pageslug tests.

This module provides:
- Config isolation between tests
- A factory for asset files with controlled modification times
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from pathlib import Path

import pytest

from pageslug.config import set_config

SECOND_NS = 1_000_000_000


@pytest.fixture(autouse=True)
def reset_config():
    """Every test starts from the default configuration."""
    set_config(None)
    yield
    set_config(None)
    logging.getLogger("pageslug").setLevel(logging.NOTSET)


@pytest.fixture
def asset_dir(tmp_path: Path) -> Path:
    path = tmp_path / "public"
    path.mkdir()
    return path


@pytest.fixture
def make_asset(asset_dir: Path) -> Callable[..., Path]:
    """Create a file in ``asset_dir``; ``mtime`` is in whole seconds."""

    def _make(name: str, content: str = "", mtime: int | None = None) -> Path:
        path = asset_dir / name
        path.write_text(content, encoding="utf-8")
        if mtime is not None:
            os.utime(path, ns=(mtime * SECOND_NS, mtime * SECOND_NS))
        return path

    return _make
