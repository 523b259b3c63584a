"""
Shared fixtures.

Puts the project `src/` on sys.path so `pytest` works from the repo root
without installing the package.
"""

from __future__ import annotations

import pathlib
import sys

import pytest

_REPO_ROOT = pathlib.Path(__file__).resolve().parents[1]
_SRC = _REPO_ROOT / "src"
if str(_SRC) not in sys.path:
    sys.path.insert(0, str(_SRC))

from combsort.api import MemorySortLog, create_app  # noqa: E402
from combsort.settings import Settings  # noqa: E402


@pytest.fixture
def sort_log() -> MemorySortLog:
    return MemorySortLog()


@pytest.fixture
def app(sort_log):
    app = create_app(Settings(max_array_length=1000), sort_log=sort_log)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()
