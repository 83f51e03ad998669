from __future__ import annotations

from kovercov.model.types import FULL_COVERAGE


def pct(covered: int, total: int, *, empty: float = 0.0) -> float:
    """Return the coverage percentage, defaulting to `empty` when no total exists."""
    return empty if total == 0 else covered * float(FULL_COVERAGE) / total


__all__ = ["pct"]
