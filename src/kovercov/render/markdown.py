"""Markdown body posted to the review host."""

from __future__ import annotations

from typing import TYPE_CHECKING

from kovercov.config import REPOSITORY_NAME, REPOSITORY_URL

if TYPE_CHECKING:
    from kovercov.config import ReporterConfig
    from kovercov.model.summary import ModuleCoverage

NOT_IN_REPORT = "The new and updated files are not part of this module coverage report 👀.\n"
TABLE_HEADER = "**Modified files:**\n\nFile | Coverage\n:-----|:-----:\n"


def format_percent(value: float) -> str:
    return f"{value:.2f}%"


def format_markdown(summary: ModuleCoverage, config: ReporterConfig) -> str:
    """Render the coverage summary exactly as it is sent to the host."""
    parts = [f"### 🎯 {summary.module_name} Code Coverage: **`{format_percent(summary.percent)}`**\n\n"]

    if not summary.files:
        parts.append(NOT_IN_REPORT)
    else:
        parts.append(TABLE_HEADER)
        parts.extend(f"`{f.name}` | **`{format_percent(f.percent)}`**\n" for f in summary.files)

    if config.count_not_found:
        parts.append(f"\n\nNumber of files not found in coverage report: {len(summary.unreported)}.")

    if config.link_repository:
        parts.append(f"\n\nCode coverage by [{REPOSITORY_NAME}]({REPOSITORY_URL}).")

    return "".join(parts)


__all__ = ["NOT_IN_REPORT", "TABLE_HEADER", "format_markdown", "format_percent"]
