"""Kover coverage reporter for change requests.

Parses a Kover XML report, matches it against the files touched by a change
request and posts a markdown coverage table plus advisories for every file or
module under its threshold.

Example
-------
Report coverage of modified files, failing if either total project coverage
or any modified file's coverage is under 70%::

    reporter = KoverReporter(GitChangeSet("origin/main", "HEAD"), sink)
    reporter.report("Project Name", "build/reports/kover/report.xml")

Warn instead of failing, with custom thresholds::

    config = ReporterConfig(total_threshold=80, file_threshold=95, fail_if_under_threshold=False)
    KoverReporter(changes, sink, config).report("Project Name", "path/to/report.xml")
"""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from kovercov import logger
from kovercov.changes import touched_file_names
from kovercov.config import ReporterConfig
from kovercov.inputs.kover import load_kover_report
from kovercov.model.summary import Advisory, FileCoverage, ModuleCoverage
from kovercov.model.types import Severity
from kovercov.render.markdown import format_markdown

if TYPE_CHECKING:
    import os

    from kovercov.changes import ChangeSet
    from kovercov.model.counters import KoverReport
    from kovercov.sinks import ReviewSink


class KoverReporter:
    """Report coverage of touched files as well as overall coverage."""

    def __init__(self, changes: ChangeSet, sink: ReviewSink, config: ReporterConfig | None = None) -> None:
        self.changes = changes
        self.sink = sink
        self.config = config or ReporterConfig()

    def report(self, module_name: str, report_path: str | os.PathLike[str]) -> ModuleCoverage:
        """Post the coverage summary of *module_name* read from *report_path*.

        Nothing is sent to the sink when the report is missing or malformed;
        the corresponding :mod:`kovercov.errors` exception propagates instead.
        """
        kover = load_kover_report(report_path)
        summary = self.summarize(module_name, kover)

        advisories: list[Advisory] = []
        for f in summary.files:
            message = self._file_message(f)
            if message is not None:
                advisories.append(self._advise(message))

        self.sink.markdown(format_markdown(summary, self.config))

        if summary.percent < self.config.total_threshold:
            advisories.append(
                self._advise(
                    f"Oops! The module {module_name} codebase is under {self.config.total_threshold}% coverage."
                )
            )

        logger.info(
            "%s: %.2f%% total, %d files reported, %d not in report, %d advisories",
            module_name,
            summary.percent,
            len(summary.files),
            len(summary.unreported),
            len(advisories),
        )
        return replace(summary, advisories=tuple(advisories))

    def summarize(self, module_name: str, kover: KoverReport) -> ModuleCoverage:
        """Classify touched files against *kover* without emitting anything."""
        touched = touched_file_names(self.changes, dedupe=self.config.dedupe_touched_files)

        unreported: list[str] = []
        covered: dict[str, FileCoverage] = {}
        for name in touched:
            counter = kover.lookup(name)
            if counter is None:
                unreported.append(name)
            else:
                covered[name] = FileCoverage(name=name, counter=counter)

        logger.debug("files not in report: %s", unreported)
        logger.debug("touched files coverage: %s", {n: f.percent for n, f in covered.items()})
        logger.debug(
            "count_not_found=%s link_repository=%s",
            self.config.count_not_found,
            self.config.link_repository,
        )

        return ModuleCoverage(
            module_name=module_name,
            total=kover.total,
            files=tuple(covered[name] for name in sorted(covered)),
            unreported=tuple(unreported),
        )

    def _file_message(self, f: FileCoverage) -> str | None:
        if f.percent == 0:
            return f"Oops! {f.name} does not have any test coverage."
        if f.percent < self.config.file_threshold:
            return f"Oops! {f.name} is under {self.config.file_threshold}% coverage."
        return None

    def _advise(self, message: str) -> Advisory:
        """Warn or fail, depending on ``fail_if_under_threshold``."""
        severity = Severity.FAIL if self.config.fail_if_under_threshold else Severity.WARN
        self.sink.advise(message, severity)
        return Advisory(message=message, severity=severity)


__all__ = ["KoverReporter"]
