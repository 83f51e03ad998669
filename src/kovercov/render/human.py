from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

from kovercov.render.markdown import format_percent

if TYPE_CHECKING:
    from kovercov.config import ReporterConfig
    from kovercov.model.summary import FileCoverage, ModuleCoverage


def _render_rich_table(table: Table, *, color: bool) -> str:
    buf = StringIO()
    console = Console(
        file=buf,
        force_terminal=color,
        color_system="standard" if color else None,
        no_color=not color,
        width=10_000,
    )
    console.print(table)
    return buf.getvalue().rstrip()


def _style(f: FileCoverage, config: ReporterConfig) -> str:
    if f.percent == 0:
        return "bold red"
    if f.percent < config.file_threshold:
        return "yellow"
    return "green"


def format_human(summary: ModuleCoverage, config: ReporterConfig, *, color: bool = False) -> str:
    """Render the summary as a terminal table."""
    total = format_percent(summary.percent)
    heading = f"{summary.module_name} code coverage: {total}"
    if summary.percent < config.total_threshold:
        heading = f"{heading} (under {config.total_threshold}%)"

    parts = [heading]
    if summary.files:
        table = Table(show_header=True, header_style="bold")
        table.add_column("File")
        table.add_column("Covered", justify="right")
        table.add_column("Missed", justify="right")
        table.add_column("Coverage", justify="right")
        for f in summary.files:
            table.add_row(
                f.name,
                str(f.counter.covered),
                str(f.counter.missed),
                format_percent(f.percent),
                style=_style(f, config) if color else None,
            )
        parts.append(_render_rich_table(table, color=color))
    else:
        parts.append("No touched files in this coverage report.")

    if config.count_not_found:
        parts.append(f"Files not found in coverage report: {len(summary.unreported)}")
    return "\n".join(parts)


__all__ = ["format_human"]
