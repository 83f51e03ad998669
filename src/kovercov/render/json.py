from __future__ import annotations

import json
from functools import cache
from importlib import resources
from typing import TYPE_CHECKING

from jsonschema import validate

from kovercov import __version__

if TYPE_CHECKING:
    from kovercov.model.counters import CoverageCounter
    from kovercov.model.summary import ModuleCoverage

_SCHEMA_FILE = "schema.json"


@cache
def get_schema() -> dict[str, object]:
    """Load and cache the JSON schema for structured output."""
    text = resources.files("kovercov.data").joinpath(_SCHEMA_FILE).read_text(encoding="utf-8")
    return json.loads(text)


def _counter(c: CoverageCounter) -> dict[str, object]:
    return {
        "missed": c.missed,
        "covered": c.covered,
        "total": c.total,
        "percent": round(c.percent, 2),
    }


def format_json(summary: ModuleCoverage) -> str:
    """Render a module summary as validated JSON."""
    schema = get_schema()
    payload: dict[str, object] = {
        "schema": str(schema["$id"]),
        "tool": {"name": "kovercov", "version": __version__},
        "module": summary.module_name,
        "total": _counter(summary.total),
        "files": [{"file": f.name, "coverage": _counter(f.counter)} for f in summary.files],
        "unreported": list(summary.unreported),
        "advisories": [{"message": a.message, "severity": str(a.severity)} for a in summary.advisories],
        "passed": not summary.failed,
    }

    validate(payload, schema)
    return json.dumps(payload, indent=2, sort_keys=True, ensure_ascii=False)


__all__ = ["format_json", "get_schema"]
