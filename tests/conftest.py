from __future__ import annotations

import sys
from pathlib import Path

import pytest


def pytest_configure() -> None:
    """Make `src/app_dirs` importable without installing the package."""
    repo_root = Path(__file__).resolve().parents[1]
    src = repo_root / "src"
    if src.exists():
        sys.path.insert(0, str(src))


@pytest.fixture(autouse=True)
def _isolate_host_profile(monkeypatch):
    """Keep the developer's platform override and the cached host profile out of tests."""
    from app_dirs.dirs import host_profile

    monkeypatch.delenv("APP_DIRS_PLATFORM", raising=False)
    host_profile.cache_clear()
    yield
    host_profile.cache_clear()
