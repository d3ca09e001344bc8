"""Reduce a list of findings to a pass/fail verdict."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import TYPE_CHECKING, Dict, Sequence

from .severity import Severity

if TYPE_CHECKING:  # pragma: no cover
    from .result import Finding


class Outcome(str, Enum):
    PASS = "PASS"
    FAIL = "FAIL"


class Status(str, Enum):
    """Which branch of the aggregation policy produced the verdict."""

    CLEAN = "CLEAN"
    BLOCKED = "BLOCKED"
    WARNING = "WARNING"
    INFO = "INFO"


CLEAN_CAVEAT = "This does not guarantee the file is safe."

_MESSAGES = {
    Status.CLEAN: "No threat signatures detected.",
    Status.BLOCKED: "Critical threats detected.",
    Status.WARNING: "High-risk patterns detected. Review manually.",
    Status.INFO: "Low-risk capabilities detected.",
}


@dataclass(frozen=True)
class Verdict:
    """Outcome of a scan plus the counts that decided it."""

    outcome: Outcome
    status: Status
    critical: int = 0
    high: int = 0

    @property
    def passed(self) -> bool:
        return self.outcome is Outcome.PASS

    @property
    def message(self) -> str:
        return _MESSAGES[self.status]

    @property
    def caveat(self) -> str | None:
        return CLEAN_CAVEAT if self.status is Status.CLEAN else None

    def exit_code(self) -> int:
        return 0 if self.passed else 1

    def to_dict(self) -> Dict[str, object]:
        data = asdict(self)
        data["outcome"] = self.outcome.value
        data["status"] = self.status.value
        data["message"] = self.message
        return data


def aggregate(findings: Sequence["Finding"]) -> Verdict:
    """Apply the blocking policy to ``findings``.

    Evaluated in priority order:

    * no findings: PASS (clean, with the caveat that this proves nothing)
    * any CRITICAL: FAIL, blocked
    * any HIGH: FAIL, manual review required
    * MEDIUM only: PASS, informational
    """

    critical = sum(1 for finding in findings if finding.signature.level is Severity.CRITICAL)
    high = sum(1 for finding in findings if finding.signature.level is Severity.HIGH)

    if not findings:
        return Verdict(Outcome.PASS, Status.CLEAN)
    if critical > 0:
        return Verdict(Outcome.FAIL, Status.BLOCKED, critical, high)
    if high > 0:
        return Verdict(Outcome.FAIL, Status.WARNING, critical, high)
    return Verdict(Outcome.PASS, Status.INFO, critical, high)
