"""Centralised exception hierarchy for kovercov."""

from __future__ import annotations


class KoverError(Exception):
    """Base class for all custom kovercov exceptions."""


class KoverReportError(KoverError):
    """Base class for errors related to Kover XML report handling."""


class InvalidReportPathError(KoverReportError, ValueError):
    """No report path was given."""


class ReportNotFoundError(KoverReportError):
    """Kover XML report could not be located on disk."""


class MalformedReportError(KoverReportError):
    """Kover XML report was found but does not contain a usable report."""


class ConfigError(KoverError, ValueError):
    """Reporter configuration is invalid."""


class ChangeSetError(KoverError):
    """The set of touched files could not be determined."""


__all__ = [
    "ChangeSetError",
    "ConfigError",
    "InvalidReportPathError",
    "KoverError",
    "KoverReportError",
    "MalformedReportError",
    "ReportNotFoundError",
]
