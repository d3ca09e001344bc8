"""Render scan results for people (text) and machines (JSON)."""

from __future__ import annotations

import json
from pathlib import Path
from typing import List

from .config import DEFAULT_SNIPPET_WIDTH
from .result import ScanResult
from .severity import Severity
from .verdict import Status

RESET = "\x1b[0m"
RED = "\x1b[31m"
GREEN = "\x1b[32m"
YELLOW = "\x1b[33m"
BLUE = "\x1b[34m"
CYAN = "\x1b[36m"
BOLD = "\x1b[1m"
DIM = "\x1b[2m"

SEPARATOR = "-" * 51

LEVEL_COLORS = {
    Severity.CRITICAL: RED,
    Severity.HIGH: YELLOW,
    Severity.MEDIUM: BLUE,
}

STATUS_STYLES = {
    Status.CLEAN: (GREEN, "PASS"),
    Status.BLOCKED: (RED + BOLD, "BLOCKED"),
    Status.WARNING: (YELLOW + BOLD, "WARNING"),
    Status.INFO: (BLUE, "INFO"),
}

DISCLAIMER = (
    "DISCLAIMER & LIMITATION OF LIABILITY\n"
    "Talos Guard is a heuristic analysis tool provided \"AS IS\". It detects known\n"
    "threat patterns but cannot guarantee safety. Absence of evidence is not evidence\n"
    "of absence. You are solely responsible for reviewing code before installation."
)


class _Palette:
    def __init__(self, enabled: bool) -> None:
        self.enabled = enabled

    def __call__(self, text: str, *codes: str) -> str:
        if not self.enabled or not codes:
            return text
        return "".join(codes) + text + RESET


def truncate(text: str, width: int = DEFAULT_SNIPPET_WIDTH) -> str:
    """Cut ``text`` to ``width`` characters, marking the cut with ``...``."""

    if len(text) > width:
        return text[:width] + "..."
    return text


def format_banner(version: str, color: bool = True) -> str:
    paint = _Palette(color)
    lines = [
        paint(f"Talos Guard v{version}", CYAN, BOLD),
        "",
        paint(DISCLAIMER, YELLOW),
    ]
    return "\n".join(lines)


def format_text_report(
    result: ScanResult,
    color: bool = True,
    snippet_width: int = DEFAULT_SNIPPET_WIDTH,
) -> str:
    """Create a human-readable report for console output."""

    paint = _Palette(color)
    verdict = result.verdict
    lines: List[str] = []
    lines.append(paint(f"SCAN REPORT: {result.source}", BOLD))
    lines.append(SEPARATOR)

    style, label = STATUS_STYLES[verdict.status]
    if verdict.status is Status.CLEAN:
        lines.append(paint(f"{label}: {verdict.message}", style))
        lines.append(paint(f"    ({verdict.caveat})", DIM))
        return "\n".join(lines)

    for finding in result.findings:
        level = finding.level
        lines.append(paint(f"[{level.value}] {finding.signature.description}", LEVEL_COLORS[level]))
        lines.append(f"    Location: Line {finding.line_number}")
        lines.append(f"    Match:    {paint(truncate(finding.line_text, snippet_width), DIM)}")

    lines.append(SEPARATOR)
    lines.append(f"{paint('SUMMARY:', BOLD)} {result.summary.total} issues found.")
    counts = ", ".join(f"{severity}: {count}" for severity, count in result.summary.as_rows())
    lines.append(f"    {counts}")
    lines.append("")
    lines.append(paint(f"{label}: {verdict.message}", style))
    return "\n".join(lines)


def format_json_report(result: ScanResult) -> str:
    return json.dumps(result.to_dict(), indent=2)


def write_report(payload: str, output_path: str) -> Path:
    """Write ``payload`` to ``output_path``, creating parent directories."""

    output_file = Path(output_path)
    output_file.parent.mkdir(parents=True, exist_ok=True)
    output_file.write_text(payload + "\n", encoding="utf-8")
    return output_file
