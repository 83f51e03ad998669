from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

from kovercov import logger
from kovercov.errors import InvalidReportPathError, KoverReportError, MalformedReportError, ReportNotFoundError
from kovercov.inputs.xml_reader import local_name, read_root
from kovercov.model.counters import CoverageCounter, KoverReport

if TYPE_CHECKING:
    from collections.abc import Iterator

    from kovercov.inputs.xml_reader import ElementLike

INSTRUCTION = "INSTRUCTION"


def load_kover_report(path: str | os.PathLike[str]) -> KoverReport:
    """Read the Kover XML report at *path*.

    Raises
    ------
    InvalidReportPathError
        *path* is empty.
    ReportNotFoundError
        Nothing readable exists at *path*.
    MalformedReportError
        The document is not a Kover report with a root INSTRUCTION counter.
    """
    raw = os.fspath(path)
    if not raw:
        msg = "Please specify file name."
        raise InvalidReportPathError(msg)

    p = Path(raw)
    if not p.is_file():
        msg = f"No Kover xml report found at {raw}"
        raise ReportNotFoundError(msg)

    try:
        content = p.read_bytes()
    except FileNotFoundError as exc:
        msg = f"No Kover xml report found at {raw}"
        raise ReportNotFoundError(msg) from exc
    except OSError as exc:
        msg = f"unable to read Kover xml report {raw}: {exc}"
        raise KoverReportError(msg) from exc

    return parse_kover_root(read_root(content, source=raw), source=raw)


def parse_kover_root(root: ElementLike, *, source: object = "<memory>") -> KoverReport:
    """Build a :class:`KoverReport` from an already parsed ``<report>`` element.

    Only INSTRUCTION counters are consulted and elements are matched by local
    name, so a namespaced report reads the same as a plain one. The project
    total is the first INSTRUCTION counter directly under ``<report>``. Every
    INSTRUCTION counter directly under a ``<class>`` adds to the entry of its
    ``sourcefilename``, so a file declaring several classes is summed rather
    than averaged.
    """
    total = next(_instruction_counters(root, source=source), None)
    if total is None:
        msg = f"no report-level INSTRUCTION counter in {source}"
        raise MalformedReportError(msg)

    by_source: dict[str, CoverageCounter] = {}
    for cls in root.iter():
        if local_name(cls.tag) != "class":
            continue
        filename = cls.get("sourcefilename")
        if not filename:
            continue
        for counter in _instruction_counters(cls, source=source):
            previous = by_source.get(filename)
            by_source[filename] = counter if previous is None else previous + counter

    logger.debug("parsed %d source files from %s", len(by_source), source)
    return KoverReport(total=total, by_source=by_source)


def _instruction_counters(el: ElementLike, *, source: object) -> Iterator[CoverageCounter]:
    for counter in el:
        if local_name(counter.tag) != "counter" or counter.get("type") != INSTRUCTION:
            continue
        yield CoverageCounter(
            missed=_parse_count(counter, "missed", source=source),
            covered=_parse_count(counter, "covered", source=source),
        )


def _parse_count(counter: ElementLike, attr: str, *, source: object) -> int:
    raw = counter.get(attr)
    if raw is None:
        msg = f"INSTRUCTION counter without {attr!r} attribute in {source}"
        raise MalformedReportError(msg)
    try:
        value = int(raw)
    except ValueError as exc:
        msg = f"invalid {attr!r} value in {source}: {raw!r}"
        raise MalformedReportError(msg) from exc
    if value < 0:
        msg = f"negative {attr!r} value in {source}: {value}"
        raise MalformedReportError(msg)
    return value


__all__ = ["INSTRUCTION", "load_kover_report", "parse_kover_root"]
