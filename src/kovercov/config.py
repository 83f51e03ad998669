"""Central configuration and constants for ``kovercov``."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, fields, replace
from typing import TYPE_CHECKING, Any

from kovercov.errors import ConfigError
from kovercov.model.types import FULL_COVERAGE

if TYPE_CHECKING:
    from pathlib import Path

# Default logging format used by the CLI entry point.
LOG_FORMAT = "%(levelname)s: %(message)s"

DEFAULT_THRESHOLD = 70

REPOSITORY_NAME = "danger-kover"
REPOSITORY_URL = "https://github.com/JCarlosR/danger-kover"

_TOOL_TABLE = "kovercov"


@dataclass(frozen=True, slots=True)
class ReporterConfig:
    """Knobs controlling thresholds, escalation and the report footer.

    Fields
    ------
    total_threshold:
        Minimum acceptable project-wide coverage percentage (0..100).
    file_threshold:
        Minimum acceptable coverage percentage for each touched file (0..100).
    fail_if_under_threshold:
        Escalate advisories as failures; when ``False`` they are warnings.
    link_repository:
        Append the attribution footer.
    count_not_found:
        Append the count of touched files missing from the report.
    dedupe_touched_files:
        Drop repeated touched file names before classification.
    """

    total_threshold: int = DEFAULT_THRESHOLD
    file_threshold: int = DEFAULT_THRESHOLD
    fail_if_under_threshold: bool = True
    link_repository: bool = True
    count_not_found: bool = True
    dedupe_touched_files: bool = False

    def __post_init__(self) -> None:
        for name in ("total_threshold", "file_threshold"):
            _check_threshold(name, getattr(self, name))
        for name in ("fail_if_under_threshold", "link_repository", "count_not_found", "dedupe_touched_files"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                msg = f"{name} must be a boolean, got {value!r}"
                raise ConfigError(msg)

    def with_overrides(self, **overrides: Any) -> ReporterConfig:
        """Return a copy with every non-``None`` override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes) if changes else self


def _check_threshold(name: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"{name} must be an integer percentage, got {value!r}"
        raise ConfigError(msg)
    if value < 0 or value > FULL_COVERAGE:
        msg = f"{name} out of range (0..{FULL_COVERAGE}): {value}"
        raise ConfigError(msg)


def find_pyproject(start: Path) -> Path | None:
    """Walk upward from *start* and return the nearest ``pyproject.toml``."""
    cur = start.resolve()
    for p in (cur, *cur.parents):
        candidate = p / "pyproject.toml"
        if candidate.is_file():
            return candidate
    return None


def load_config(pyproject: Path, *, base: ReporterConfig | None = None) -> ReporterConfig:
    """Read ``[tool.kovercov]`` from *pyproject* on top of *base*.

    Keys match the :class:`ReporterConfig` field names; dashes are accepted in
    place of underscores. A file without the table yields *base* unchanged.
    """
    base = base or ReporterConfig()
    try:
        with pyproject.open("rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        msg = f"failed to read {pyproject}: {e}"
        raise ConfigError(msg) from e

    table = data.get("tool", {}).get(_TOOL_TABLE)
    if table is None:
        return base
    if not isinstance(table, dict):
        msg = f"[tool.{_TOOL_TABLE}] in {pyproject} must be a table"
        raise ConfigError(msg)

    known = {f.name for f in fields(ReporterConfig)}
    overrides: dict[str, Any] = {}
    for raw_key, value in table.items():
        key = raw_key.replace("-", "_")
        if key not in known:
            msg = f"unknown option {raw_key!r} in [tool.{_TOOL_TABLE}] of {pyproject}"
            raise ConfigError(msg)
        overrides[key] = value
    return replace(base, **overrides)


__all__ = [
    "DEFAULT_THRESHOLD",
    "LOG_FORMAT",
    "REPOSITORY_NAME",
    "REPOSITORY_URL",
    "ReporterConfig",
    "find_pyproject",
    "load_config",
]
