"""Version lookup for mylang."""

from __future__ import annotations

import tomllib
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

DIST_NAME = "mylang"
UNKNOWN_VERSION = "0.0.0"

# src/mylang/_version.py -> repository root
_PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


def _version_from_pyproject(path: Path) -> str | None:
    """Read ``[project].version`` from a source checkout's pyproject.toml."""
    try:
        with path.open("rb") as f:
            project = tomllib.load(f).get("project", {})
    except (OSError, tomllib.TOMLDecodeError):
        return None
    if project.get("name") != DIST_NAME:
        return None
    return project.get("version")


def get_version() -> str:
    """Return the installed distribution version.

    Falls back to the checkout's pyproject.toml when mylang runs from source
    without being installed, and to ``0.0.0`` when neither is available.
    """
    try:
        return version(DIST_NAME)
    except PackageNotFoundError:
        return _version_from_pyproject(_PYPROJECT) or UNKNOWN_VERSION
