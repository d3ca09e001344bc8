"""Severity definitions for signature findings."""

from __future__ import annotations

from enum import Enum


class Severity(str, Enum):
    """Enumerate the supported severity levels, most urgent first."""

    CRITICAL = "CRITICAL"
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"


SEVERITY_ORDER = (
    Severity.CRITICAL,
    Severity.HIGH,
    Severity.MEDIUM,
)
