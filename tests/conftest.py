"""Shared fixtures for poststore tests."""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import Callable

import pytest

from tests.helpers import FIXTURE_SITE


@pytest.fixture
def site_dir(tmp_path: Path) -> Path:
    """A writable copy of the two-essay fixture site."""
    target = tmp_path / "site"
    shutil.copytree(FIXTURE_SITE, target)
    return target


@pytest.fixture
def write_post(site_dir: Path) -> Callable[[str, str], Path]:
    """Return a helper that writes a file into ``site_dir/_posts``."""

    def _write(name: str, content: str) -> Path:
        path = site_dir / "_posts" / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write
