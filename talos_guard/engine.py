"""Line-oriented signature matching."""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from .result import Finding, ScanResult
from .signatures import Signature, all_signatures
from .utils import extract_code_blocks

logger = logging.getLogger(__name__)


def analyze(
    content: str,
    source: str,
    signatures: Optional[Sequence[Signature]] = None,
    line_offset: int = 0,
) -> List[Finding]:
    """Scan ``content`` line by line and return every signature hit.

    Lines are split on ``\\n`` only and numbered from 1 (plus
    ``line_offset``). Every line is tested against every signature in
    catalog order, so findings come out in line order and then catalog
    order. A signature contributes at most one finding per line no matter
    how often it occurs on that line.
    """

    catalog = all_signatures() if signatures is None else signatures
    findings: List[Finding] = []
    for index, line in enumerate(content.split("\n"), start=1):
        for signature in catalog:
            if signature.matches(line):
                findings.append(
                    Finding(
                        source=source,
                        line_number=index + line_offset,
                        line_text=line.strip(),
                        signature=signature,
                    )
                )
    logger.debug("%s: %d finding(s)", source, len(findings))
    return findings


def analyze_code_blocks(
    content: str,
    source: str,
    signatures: Optional[Sequence[Signature]] = None,
) -> List[Finding]:
    """Like :func:`analyze` but only inside fenced Markdown code blocks.

    Line numbers still refer to the whole document.
    """

    findings: List[Finding] = []
    for block in extract_code_blocks(content):
        logger.debug("%s: scanning %s block at line %d", source, block.lang, block.first_line)
        findings.extend(analyze(block.code, source, signatures, line_offset=block.start))
    return findings


def scan(
    content: str,
    source: str,
    signatures: Optional[Sequence[Signature]] = None,
    code_blocks_only: bool = False,
) -> ScanResult:
    """Analyze ``content`` and bundle the findings into a :class:`ScanResult`."""

    if code_blocks_only:
        findings = analyze_code_blocks(content, source, signatures)
    else:
        findings = analyze(content, source, signatures)
    return ScanResult.from_findings(source, findings)
