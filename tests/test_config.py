"""Tests for configuration defaults, validation and pyproject loading."""

from __future__ import annotations

import importlib
import logging
import sys
import textwrap
from typing import TYPE_CHECKING

import pytest

from kovercov.config import ReporterConfig, find_pyproject, load_config
from kovercov.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

    from _pytest.monkeypatch import MonkeyPatch


def test_defaults() -> None:
    config = ReporterConfig()
    assert config.total_threshold == 70
    assert config.file_threshold == 70
    assert config.fail_if_under_threshold is True
    assert config.link_repository is True
    assert config.count_not_found is True
    assert config.dedupe_touched_files is False


@pytest.mark.parametrize(
    ("kwargs", "pattern"),
    [
        ({"total_threshold": -1}, "out of range"),
        ({"file_threshold": 101}, "out of range"),
        ({"file_threshold": 50.5}, "integer percentage"),
        ({"total_threshold": True}, "integer percentage"),
        ({"link_repository": "yes"}, "must be a boolean"),
    ],
)
def test_invalid_values_are_rejected(kwargs: dict[str, object], pattern: str) -> None:
    with pytest.raises(ConfigError, match=pattern):
        ReporterConfig(**kwargs)  # type: ignore[arg-type]


def test_config_error_is_a_value_error() -> None:
    with pytest.raises(ValueError, match="out of range"):
        ReporterConfig(total_threshold=200)


def test_boundaries_are_accepted() -> None:
    assert ReporterConfig(total_threshold=0, file_threshold=100).file_threshold == 100


def test_with_overrides_skips_none() -> None:
    base = ReporterConfig(file_threshold=90)
    assert base.with_overrides(file_threshold=None, total_threshold=None) is base
    assert base.with_overrides(total_threshold=80, link_repository=False) == ReporterConfig(
        total_threshold=80, file_threshold=90, link_repository=False
    )


def test_with_overrides_validates() -> None:
    with pytest.raises(ConfigError):
        ReporterConfig().with_overrides(total_threshold=500)


def _write_pyproject(tmp_path: Path, body: str) -> Path:
    py = tmp_path / "pyproject.toml"
    py.write_text(textwrap.dedent(body), encoding="utf-8")
    return py


def test_load_config_reads_tool_table(tmp_path: Path) -> None:
    py = _write_pyproject(
        tmp_path,
        """
        [tool.kovercov]
        total-threshold = 80
        file_threshold = 95
        fail-if-under-threshold = false
        count_not_found = false
        """,
    )
    assert load_config(py) == ReporterConfig(
        total_threshold=80,
        file_threshold=95,
        fail_if_under_threshold=False,
        count_not_found=False,
    )


def test_load_config_without_table_returns_base(tmp_path: Path) -> None:
    py = _write_pyproject(
        tmp_path,
        """
        [tool.pytest.ini_options]
        addopts = ["-q"]
        """,
    )
    base = ReporterConfig(total_threshold=10)
    assert load_config(py, base=base) is base


@pytest.mark.parametrize(
    ("body", "pattern"),
    [
        ("[tool.kovercov]\nthreshold = 1\n", "unknown option 'threshold'"),
        ("[tool.kovercov]\nfile_threshold = 'high'\n", "integer percentage"),
        ("[tool]\nkovercov = 3\n", "must be a table"),
        ("[tool.kovercov\n", "failed to read"),
    ],
)
def test_load_config_rejects_bad_files(tmp_path: Path, body: str, pattern: str) -> None:
    py = _write_pyproject(tmp_path, body)
    with pytest.raises(ConfigError, match=pattern):
        load_config(py)


def test_find_pyproject_walks_upward(tmp_path: Path) -> None:
    py = _write_pyproject(tmp_path, "[project]\nname = 'x'\n")
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)
    assert find_pyproject(nested) == py.resolve()


def test_import_has_no_side_effects(monkeypatch: MonkeyPatch) -> None:
    """Importing the package should not configure logging."""
    basic_called = False

    def fake_basic(*args: object, **kwargs: object) -> None:
        nonlocal basic_called
        basic_called = True

    monkeypatch.setattr(logging, "basicConfig", fake_basic)

    sys.modules.pop("kovercov.reporter", None)
    importlib.import_module("kovercov.reporter")

    assert not basic_called
