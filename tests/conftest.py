"""Shared fixtures for css_audit tests."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest


@pytest.fixture
def write_css(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write a stylesheet under tmp_path and return its path."""

    def _write(name: str, source: str) -> Path:
        path = tmp_path / name
        path.write_text(source, encoding="utf-8")
        return path

    return _write
