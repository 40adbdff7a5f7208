"""Shared pytest fixtures for VERSTAMP tests."""

import json
import os
from collections.abc import Callable
from datetime import UTC, datetime
from pathlib import Path

import pytest

from verstamp.config.settings import Settings


@pytest.fixture(autouse=True)
def clean_verstamp_env(monkeypatch):
    """Keep VERSTAMP_* variables from the developer's shell out of tests."""
    for key in list(os.environ):
        if key.startswith("VERSTAMP_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 3, 1, 12, 30, 45, 123456, tzinfo=UTC)


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Create a project with package.json at 1.2.3 and an empty src/version."""
    (tmp_path / "package.json").write_text(json.dumps({"name": "revolution", "version": "1.2.3"}))
    (tmp_path / "src" / "version").mkdir(parents=True)
    return tmp_path


@pytest.fixture
def write_manifest(project_root: Path) -> Callable[[dict], Path]:
    """Return a helper that rewrites package.json with the given content."""

    def _write(data: dict) -> Path:
        path = project_root / "package.json"
        path.write_text(json.dumps(data))
        return path

    return _write


@pytest.fixture
def artifact_path(project_root: Path) -> Path:
    return project_root / Settings().artifact_relpath
