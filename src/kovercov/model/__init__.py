"""Typed model objects shared by the reporter and renderers."""

from __future__ import annotations

from kovercov.model.counters import CoverageCounter, KoverReport
from kovercov.model.metrics import pct
from kovercov.model.summary import Advisory, FileCoverage, ModuleCoverage
from kovercov.model.types import FULL_COVERAGE, CoveragePercent, OutputFormat, Severity

__all__ = [
    "FULL_COVERAGE",
    "Advisory",
    "CoverageCounter",
    "CoveragePercent",
    "FileCoverage",
    "KoverReport",
    "ModuleCoverage",
    "OutputFormat",
    "Severity",
    "pct",
]
