# topmark:header:start
#
#   project      : DocForge
#   file         : test_config_io.py
#   file_relpath : tests/config/test_config_io.py
#   license      : MIT
#   copyright    : (c) 2025 DocForge contributors
#
# topmark:header:end

"""Tests for config file discovery and TOML helpers."""

from __future__ import annotations

from pathlib import Path

from docforge.config.io import (
    discover_config_file,
    extract_docforge_table,
    get_string_list_value_checked,
)


def test_docforge_toml_wins_over_pyproject(tmp_path: Path) -> None:
    """``docforge.toml`` is preferred when both files exist."""
    (tmp_path / "docforge.toml").write_text('source = "src"\n', encoding="utf-8")
    (tmp_path / "pyproject.toml").write_text("[tool.docforge]\n", encoding="utf-8")

    assert discover_config_file(tmp_path) == tmp_path / "docforge.toml"


def test_pyproject_discovered_only_with_table(tmp_path: Path) -> None:
    """A pyproject.toml counts as a config file only with ``[tool.docforge]``."""
    pyproject = tmp_path / "pyproject.toml"
    pyproject.write_text('[project]\nname = "x"\n', encoding="utf-8")
    assert discover_config_file(tmp_path) is None

    pyproject.write_text('[project]\nname = "x"\n[tool.docforge]\ntitle = "T"\n', encoding="utf-8")
    assert discover_config_file(tmp_path) == pyproject


def test_extract_table_from_plain_config() -> None:
    """Any file other than pyproject.toml is a DocForge table as a whole."""
    data = {"title": "T"}

    assert extract_docforge_table(Path("docforge.toml"), data) is data


def test_scalar_accepted_as_list() -> None:
    """A single string is accepted where a list is expected."""
    assert get_string_list_value_checked({"source": "src"}, "source") == ["src"]
    assert get_string_list_value_checked({}, "source") is None
