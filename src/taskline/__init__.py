"""taskline: interactive tracker for todos, deadlines and events."""

from __future__ import annotations

import tomllib
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

__all__ = ["__version__"]

DISTRIBUTION_NAME = "taskline"


def _version_from_pyproject() -> str | None:
    """Read [project].version from the nearest pyproject.toml for source checkouts."""
    for base in Path(__file__).resolve().parents:
        pyproject = base / "pyproject.toml"
        if not pyproject.exists():
            continue
        try:
            data = tomllib.loads(pyproject.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError:
            return None
        project = data.get("project", {})
        if project.get("name") != DISTRIBUTION_NAME:
            continue
        value = project.get("version")
        return str(value) if value else None
    return None


def _resolve_version() -> str:
    local = _version_from_pyproject()
    if local is not None:
        return local
    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        return "0+unknown"


__version__ = _resolve_version()
