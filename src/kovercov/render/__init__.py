"""Renderers for a module coverage summary."""

from __future__ import annotations

from typing import TYPE_CHECKING

from kovercov.model.types import OutputFormat
from kovercov.render.markdown import format_markdown

if TYPE_CHECKING:
    from kovercov.config import ReporterConfig
    from kovercov.model.summary import ModuleCoverage


def render(summary: ModuleCoverage, config: ReporterConfig, *, fmt: OutputFormat, color: bool = False) -> str:
    if fmt is OutputFormat.JSON:
        from kovercov.render.json import format_json  # noqa: PLC0415

        return format_json(summary)
    if fmt is OutputFormat.HUMAN:
        from kovercov.render.human import format_human  # noqa: PLC0415

        return format_human(summary, config, color=color)
    return format_markdown(summary, config)


__all__ = ["format_markdown", "render"]
