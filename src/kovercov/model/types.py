"""Shared type aliases and enumerations used across kovercov."""

from __future__ import annotations

from enum import StrEnum
from typing import TypeAlias

# ---------------------------------------------------------------------------
# Common type aliases
# ---------------------------------------------------------------------------

CoveragePercent: TypeAlias = float
"""Percentage value in the inclusive range ``0`` to ``100``."""

FULL_COVERAGE = 100


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class Severity(StrEnum):
    """How an advisory is escalated to the review host."""

    FAIL = "fail"
    WARN = "warn"


class OutputFormat(StrEnum):
    """Supported output formats for the command line front-end."""

    MARKDOWN = "markdown"
    JSON = "json"
    HUMAN = "human"


__all__ = [
    "FULL_COVERAGE",
    "CoveragePercent",
    "OutputFormat",
    "Severity",
]
