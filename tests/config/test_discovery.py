"""Tests for config file discovery."""

from __future__ import annotations

from pathlib import Path

import pytest

from brandmark.config.discovery import find_config, load_toml


@pytest.fixture(autouse=True)
def _no_env_override(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("BRANDMARK_CONFIG", raising=False)


class TestFindConfig:
    def test_finds_in_start_dir(self, tmp_path: Path) -> None:
        (tmp_path / "brandmark.toml").write_text("")
        assert find_config(tmp_path) == (tmp_path / "brandmark.toml").resolve()

    def test_walks_up(self, tmp_path: Path) -> None:
        (tmp_path / "brandmark.toml").write_text("")
        nested = tmp_path / "a" / "b" / "c"
        nested.mkdir(parents=True)
        assert find_config(nested) == (tmp_path / "brandmark.toml").resolve()

    def test_nearest_wins(self, tmp_path: Path) -> None:
        (tmp_path / "brandmark.toml").write_text("")
        inner = tmp_path / "site"
        inner.mkdir()
        (inner / "brandmark.toml").write_text("")
        assert find_config(inner) == (inner / "brandmark.toml").resolve()

    def test_pyproject_with_section(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text("[tool.brandmark]\n")
        assert find_config(tmp_path) == (tmp_path / "pyproject.toml").resolve()

    def test_pyproject_without_section_is_skipped(self, tmp_path: Path) -> None:
        inner = tmp_path / "pkg"
        inner.mkdir()
        (inner / "pyproject.toml").write_text("[tool.ruff]\nline-length = 100\n")
        (tmp_path / "brandmark.toml").write_text("")
        assert find_config(inner) == (tmp_path / "brandmark.toml").resolve()

    def test_dedicated_file_beats_pyproject(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text("[tool.brandmark]\n")
        (tmp_path / "brandmark.toml").write_text("")
        assert find_config(tmp_path) == (tmp_path / "brandmark.toml").resolve()

    def test_env_var_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        custom = tmp_path / "elsewhere.toml"
        custom.write_text("")
        monkeypatch.setenv("BRANDMARK_CONFIG", str(custom))
        assert find_config(tmp_path / "ignored") == custom

    def test_env_var_missing_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BRANDMARK_CONFIG", str(tmp_path / "nope.toml"))
        (tmp_path / "brandmark.toml").write_text("")
        assert find_config(tmp_path) is None


class TestLoadToml:
    def test_plain_file(self, tmp_path: Path) -> None:
        path = tmp_path / "brandmark.toml"
        path.write_text("[server]\nport = 1\n")
        assert load_toml(path) == {"server": {"port": 1}}

    def test_pyproject_extracts_section(self, tmp_path: Path) -> None:
        path = tmp_path / "pyproject.toml"
        path.write_text('[project]\nname = "x"\n[tool.brandmark.server]\nport = 2\n')
        assert load_toml(path) == {"server": {"port": 2}}

    def test_pyproject_without_section(self, tmp_path: Path) -> None:
        path = tmp_path / "pyproject.toml"
        path.write_text('[project]\nname = "x"\n')
        assert load_toml(path) == {}
