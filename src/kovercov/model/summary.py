from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from kovercov.model.types import Severity

if TYPE_CHECKING:
    from kovercov.model.counters import CoverageCounter


@dataclass(frozen=True, slots=True)
class Advisory:
    message: str
    severity: Severity

    @property
    def is_failure(self) -> bool:
        return self.severity is Severity.FAIL


@dataclass(frozen=True, slots=True)
class FileCoverage:
    """Coverage of one touched source file found in the report."""

    name: str
    counter: CoverageCounter

    @property
    def percent(self) -> float:
        return self.counter.percent


@dataclass(frozen=True, slots=True)
class ModuleCoverage:
    """Outcome of a single reporter invocation.

    ``files`` is sorted by file name; ``unreported`` keeps discovery order.
    """

    module_name: str
    total: CoverageCounter
    files: tuple[FileCoverage, ...] = ()
    unreported: tuple[str, ...] = ()
    advisories: tuple[Advisory, ...] = ()

    @property
    def percent(self) -> float:
        return self.total.percent

    @property
    def failed(self) -> bool:
        return any(a.is_failure for a in self.advisories)


__all__ = ["Advisory", "FileCoverage", "ModuleCoverage"]
