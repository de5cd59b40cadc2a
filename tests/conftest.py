from __future__ import annotations

import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from taskline.service import TaskService  # noqa: E402


@pytest.fixture
def service() -> Iterator[TaskService]:
    """Task service backed by an in-memory database."""
    svc = TaskService(":memory:")
    try:
        yield svc
    finally:
        svc.close()


@pytest.fixture
def outputs() -> list[str]:
    return []
