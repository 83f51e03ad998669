"""Destinations for rendered markdown and advisories."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from kovercov.model.summary import Advisory
from kovercov.model.types import Severity


class ReviewSink(Protocol):
    """What a review host offers the reporter for its output."""

    def markdown(self, text: str) -> None: ...

    def advise(self, message: str, severity: Severity) -> None: ...


@dataclass(slots=True)
class CollectingSink:
    """Sink that records every call in order.

    ``events`` interleaves both kinds as ``("markdown", text)`` and
    ``(severity, message)`` pairs.
    """

    markdowns: list[str] = field(default_factory=list)
    advisories: list[Advisory] = field(default_factory=list)
    events: list[tuple[str, str]] = field(default_factory=list)

    def markdown(self, text: str) -> None:
        self.markdowns.append(text)
        self.events.append(("markdown", text))

    def advise(self, message: str, severity: Severity) -> None:
        self.advisories.append(Advisory(message=message, severity=severity))
        self.events.append((str(severity), message))

    @property
    def failures(self) -> list[str]:
        return [a.message for a in self.advisories if a.severity is Severity.FAIL]

    @property
    def warnings(self) -> list[str]:
        return [a.message for a in self.advisories if a.severity is Severity.WARN]


__all__ = ["CollectingSink", "ReviewSink"]
