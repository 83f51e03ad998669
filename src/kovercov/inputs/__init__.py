"""Readers turning Kover XML files into typed reports."""

from __future__ import annotations

from kovercov.inputs.kover import load_kover_report, parse_kover_root
from kovercov.inputs.xml_reader import read_root

__all__ = ["load_kover_report", "parse_kover_root", "read_root"]
