"""Tests for version lookup."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from pathlib import Path

import pytest

from mylang import _version


def _not_installed(name: str) -> str:
    raise PackageNotFoundError(name)


class TestVersionFromPyproject:
    """A source checkout's pyproject.toml supplies the version."""

    def test_reads_project_version(self, tmp_path: Path) -> None:
        path = tmp_path / "pyproject.toml"
        path.write_text('[project]\nname = "mylang"\nversion = "1.2.3"\n')
        assert _version._version_from_pyproject(path) == "1.2.3"

    def test_other_project_is_ignored(self, tmp_path: Path) -> None:
        path = tmp_path / "pyproject.toml"
        path.write_text('[project]\nname = "other"\nversion = "9.9.9"\n')
        assert _version._version_from_pyproject(path) is None

    @pytest.mark.parametrize("body", [None, "[project\n"])
    def test_missing_or_broken_file(self, tmp_path: Path, body: str | None) -> None:
        path = tmp_path / "pyproject.toml"
        if body is not None:
            path.write_text(body)
        assert _version._version_from_pyproject(path) is None


class TestGetVersion:
    """Installed metadata wins; the checkout and a placeholder are fallbacks."""

    def test_installed_metadata(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(_version, "version", lambda name: "4.5.6")
        assert _version.get_version() == "4.5.6"

    def test_falls_back_to_pyproject(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        path = tmp_path / "pyproject.toml"
        path.write_text('[project]\nname = "mylang"\nversion = "0.9.0"\n')
        monkeypatch.setattr(_version, "version", _not_installed)
        monkeypatch.setattr(_version, "_PYPROJECT", path)
        assert _version.get_version() == "0.9.0"

    def test_unknown_version(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setattr(_version, "version", _not_installed)
        monkeypatch.setattr(_version, "_PYPROJECT", tmp_path / "missing.toml")
        assert _version.get_version() == _version.UNKNOWN_VERSION
