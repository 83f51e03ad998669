from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import typer

from kovercov.changes import GitChangeSet, StaticChangeSet
from kovercov.cli.errors import (
    EXIT_CONFIG,
    EXIT_DATAERR,
    EXIT_GENERIC,
    EXIT_NOINPUT,
    EXIT_OK,
    EXIT_THRESHOLD,
)
from kovercov.config import ReporterConfig, find_pyproject, load_config
from kovercov.errors import ChangeSetError, ConfigError, KoverReportError, MalformedReportError
from kovercov.io import color_allowed, write_output
from kovercov.model.types import OutputFormat
from kovercov.render import render
from kovercov.reporter import KoverReporter
from kovercov.sinks import CollectingSink

if TYPE_CHECKING:
    from kovercov.changes import ChangeSet
    from kovercov.model.summary import ModuleCoverage


def _resolve_config(
    config_file: Path | None,
    *,
    total_threshold: int | None,
    file_threshold: int | None,
    warn_only: bool,
    no_link: bool,
    no_count: bool,
    dedupe: bool,
) -> ReporterConfig:
    pyproject = config_file or find_pyproject(Path.cwd())
    base = load_config(pyproject) if pyproject is not None else ReporterConfig()
    # flags only ever turn a default off (or dedupe on); absent flags defer to the file
    return base.with_overrides(
        total_threshold=total_threshold,
        file_threshold=file_threshold,
        fail_if_under_threshold=False if warn_only else None,
        link_repository=False if no_link else None,
        count_not_found=False if no_count else None,
        dedupe_touched_files=True if dedupe else None,
    )


def _resolve_changes(
    *,
    modified: list[str] | None,
    added: list[str] | None,
    base: str | None,
    head: str | None,
) -> ChangeSet:
    if base is not None:
        if modified or added:
            msg = "--base cannot be combined with --modified/--added"
            raise typer.BadParameter(msg)
        return GitChangeSet(base_ref=base, head_ref=head)
    if head is not None:
        msg = "--head requires --base"
        raise typer.BadParameter(msg)
    return StaticChangeSet(modified=tuple(modified or ()), added=tuple(added or ()))


def _run(reporter: KoverReporter, module: str, report_path: str) -> ModuleCoverage:
    try:
        return reporter.report(module, report_path)
    except MalformedReportError as exc:
        typer.echo(f"ERROR: {exc}", err=True)
        raise typer.Exit(code=EXIT_DATAERR) from exc
    except KoverReportError as exc:
        typer.echo(f"ERROR: {exc}", err=True)
        raise typer.Exit(code=EXIT_NOINPUT) from exc
    except ChangeSetError as exc:
        typer.echo(f"ERROR: {exc}", err=True)
        raise typer.Exit(code=EXIT_GENERIC) from exc


def report_cmd(
    module: Annotated[str, typer.Argument(help="Display name of the project or module.")],
    report_file: Annotated[str, typer.Argument(metavar="REPORT", help="Path to a Kover XML coverage report.")],
    modified: Annotated[
        list[str] | None,
        typer.Option("-m", "--modified", help="Modified file path (repeatable)."),
    ] = None,
    added: Annotated[
        list[str] | None,
        typer.Option("-a", "--added", help="Added file path (repeatable)."),
    ] = None,
    base: Annotated[
        str | None,
        typer.Option("--base", help="Take touched files from `git diff` against this ref."),
    ] = None,
    head: Annotated[
        str | None,
        typer.Option("--head", help="Compare --base...HEAD-REF instead of the working tree."),
    ] = None,
    total_threshold: Annotated[
        int | None,
        typer.Option("--total-threshold", min=0, max=100, help="Minimum total coverage % (default 70)."),
    ] = None,
    file_threshold: Annotated[
        int | None,
        typer.Option("--file-threshold", min=0, max=100, help="Minimum coverage % per touched file (default 70)."),
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option("--config", help="pyproject.toml to read [tool.kovercov] from (default: nearest)."),
    ] = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option("--format", help="Output format: markdown, json, human."),
    ] = OutputFormat.MARKDOWN,
    output: Annotated[
        Path | None,
        typer.Option("--output", help="Write output to PATH (use '-' for stdout)."),
    ] = None,
    *,
    warn_only: Annotated[
        bool,
        typer.Option("--warn-only", help="Warn instead of failing when under a threshold."),
    ] = False,
    no_link: Annotated[
        bool,
        typer.Option("--no-link-repository", help="Omit the attribution footer."),
    ] = False,
    no_count: Annotated[
        bool,
        typer.Option("--no-count-not-found", help="Omit the count of files missing from the report."),
    ] = False,
    dedupe: Annotated[
        bool,
        typer.Option("--dedupe", help="Ignore repeated touched file names."),
    ] = False,
) -> None:
    """Report coverage of touched files as well as overall coverage."""
    try:
        config = _resolve_config(
            config_file,
            total_threshold=total_threshold,
            file_threshold=file_threshold,
            warn_only=warn_only,
            no_link=no_link,
            no_count=no_count,
            dedupe=dedupe,
        )
    except ConfigError as exc:
        typer.echo(f"ERROR: {exc}", err=True)
        raise typer.Exit(code=EXIT_CONFIG) from exc

    changes = _resolve_changes(modified=modified, added=added, base=base, head=head)
    sink = CollectingSink()
    summary = _run(KoverReporter(changes, sink, config), module, report_file)

    if output_format is OutputFormat.MARKDOWN:
        text = "\n".join(sink.markdowns)
    else:
        text = render(summary, config, fmt=output_format, color=color_allowed(output))
    write_output(text, output)

    for advisory in sink.advisories:
        typer.echo(f"{advisory.severity.upper()}: {advisory.message}", err=True)

    raise typer.Exit(code=EXIT_THRESHOLD if summary.failed else EXIT_OK)


def register(app: typer.Typer) -> None:
    app.command("report")(report_cmd)


__all__ = ["register", "report_cmd"]
