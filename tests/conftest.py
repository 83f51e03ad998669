from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from pathlib import Path

import pytest
from click.testing import CliRunner

ClassSpec = tuple[str, int, int]
"""``(sourcefilename, missed, covered)`` of one ``<class>`` element."""


def _counters(missed: int, covered: int) -> str:
    # Kover writes every counter type; only INSTRUCTION matters to the reporter.
    return (
        f'<counter type="INSTRUCTION" missed="{missed}" covered="{covered}"/>'
        f'<counter type="BRANCH" missed="{covered}" covered="{missed}"/>'
        '<counter type="LINE" missed="1" covered="1"/>'
    )


@pytest.fixture
def cli_runner() -> CliRunner:
    """Return a Click CLI runner for invoking the command-line interface."""
    return CliRunner()


@pytest.fixture
def kover_xml_content() -> Callable[..., str]:
    def build(total: tuple[int, int] = (10, 90), classes: Iterable[ClassSpec] = ()) -> str:
        class_xml: list[str] = []
        for idx, (source, missed, covered) in enumerate(classes):
            stem = source.rsplit(".", 1)[0]
            class_xml.append(
                f'<class name="com/example/{stem}{idx}" sourcefilename="{source}">'
                '<method name="run" desc="()V">'
                '<counter type="INSTRUCTION" missed="99" covered="99"/>'
                "</method>"
                f"{_counters(missed, covered)}"
                "</class>"
            )
        missed, covered = total
        return (
            '<?xml version="1.0" ?>'
            '<report name="Intellij Coverage Report">'
            '<package name="com/example">'
            f"{''.join(class_xml)}"
            '<counter type="INSTRUCTION" missed="12345" covered="1"/>'
            "</package>"
            f"{_counters(missed, covered)}"
            "</report>"
        )

    return build


@pytest.fixture
def kover_xml_file(tmp_path: Path, kover_xml_content: Callable[..., str]) -> Callable[..., Path]:
    def write(
        total: tuple[int, int] = (10, 90),
        classes: Sequence[ClassSpec] = (),
        *,
        filename: str = "report.xml",
    ) -> Path:
        xml_file = tmp_path / filename
        xml_file.write_text(kover_xml_content(total, classes), encoding="utf-8")
        return xml_file

    return write
