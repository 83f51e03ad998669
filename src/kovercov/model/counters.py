from __future__ import annotations

from dataclasses import dataclass, field

from kovercov.model.metrics import pct


@dataclass(frozen=True, slots=True)
class CoverageCounter:
    """Missed/covered instruction counts as found in a Kover ``<counter>``."""

    missed: int = 0
    covered: int = 0

    def __post_init__(self) -> None:
        """Validate that counts are non-negative."""
        if self.missed < 0 or self.covered < 0:
            msg = "CoverageCounter fields must be >= 0"
            raise ValueError(msg)

    @property
    def total(self) -> int:
        return self.missed + self.covered

    @property
    def percent(self) -> float:
        return pct(self.covered, self.total)

    def __add__(self, other: CoverageCounter) -> CoverageCounter:
        return CoverageCounter(missed=self.missed + other.missed, covered=self.covered + other.covered)


@dataclass(frozen=True, slots=True)
class KoverReport:
    """Parsed Kover XML report.

    Fields
    ------
    total:
        Project-wide INSTRUCTION counter (direct child of ``<report>``).
    by_source:
        INSTRUCTION counters summed over every ``<class>`` sharing a
        ``sourcefilename``.
    """

    total: CoverageCounter
    by_source: dict[str, CoverageCounter] = field(default_factory=dict)

    def lookup(self, source_file: str) -> CoverageCounter | None:
        return self.by_source.get(source_file)


__all__ = ["CoverageCounter", "KoverReport"]
