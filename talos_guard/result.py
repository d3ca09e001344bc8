"""Core result data structures for the scanner."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Dict, List, Tuple

from .severity import SEVERITY_ORDER, Severity
from .signatures import Signature
from .verdict import Verdict, aggregate


@dataclass(frozen=True)
class Finding:
    """One signature matching one line of scanned content."""

    source: str
    line_number: int
    line_text: str
    signature: Signature

    @property
    def level(self) -> Severity:
        return self.signature.level

    def to_dict(self) -> Dict[str, object]:
        return {
            "source": self.source,
            "line": self.line_number,
            "content": self.line_text,
            **self.signature.to_dict(),
        }


@dataclass
class Summary:
    """Aggregate finding counts by severity."""

    critical: int = 0
    high: int = 0
    medium: int = 0

    def increment(self, severity: Severity) -> None:
        attr = severity.value.lower()
        setattr(self, attr, getattr(self, attr) + 1)

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)

    def as_rows(self) -> List[Tuple[str, int]]:
        """Return severity/count pairs ordered for reporting."""

        return [(severity.value, getattr(self, severity.value.lower())) for severity in SEVERITY_ORDER]

    @property
    def total(self) -> int:
        return sum(getattr(self, severity.value.lower()) for severity in SEVERITY_ORDER)


@dataclass
class ScanResult:
    """Bundle the findings of one scan with their summary and verdict."""

    source: str
    summary: Summary = field(default_factory=Summary)
    findings: List[Finding] = field(default_factory=list)

    @classmethod
    def from_findings(cls, source: str, findings: List[Finding]) -> "ScanResult":
        result = cls(source=source)
        for finding in findings:
            result.add_finding(finding)
        return result

    def add_finding(self, finding: Finding) -> None:
        self.summary.increment(finding.level)
        self.findings.append(finding)

    @property
    def verdict(self) -> Verdict:
        return aggregate(self.findings)

    @property
    def passed(self) -> bool:
        return self.verdict.passed

    def exit_code(self) -> int:
        return self.verdict.exit_code()

    def to_dict(self) -> Dict[str, object]:
        return {
            "source": self.source,
            "summary": self.summary.to_dict(),
            "verdict": self.verdict.to_dict(),
            "findings": [finding.to_dict() for finding in self.findings],
            "passed": self.passed,
        }
