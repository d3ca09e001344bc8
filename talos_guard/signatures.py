"""Built-in catalog of threat signatures.

Each signature pairs a regular expression with a severity and a short
description. Patterns are searched anywhere within a single line of content.
The catalog is compiled once at import time and never mutated.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict, Tuple

from .severity import Severity


@dataclass(frozen=True)
class Signature:
    """A named detection rule."""

    id: str
    level: Severity
    pattern: str
    description: str
    ignore_case: bool = False
    _regex: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        flags = re.IGNORECASE if self.ignore_case else 0
        object.__setattr__(self, "_regex", re.compile(self.pattern, flags))

    def matches(self, line: str) -> bool:
        """Return True if the pattern occurs anywhere in ``line``."""

        return self._regex.search(line) is not None

    def to_dict(self) -> Dict[str, str]:
        return {
            "id": self.id,
            "level": self.level.value,
            "description": self.description,
        }


SIGNATURES: Tuple[Signature, ...] = (
    # Active exfiltration / command and control
    Signature(
        id="NET_WEBHOOK",
        level=Severity.CRITICAL,
        pattern=r"webhook\.site|pipedream\.net|requestbin|interactsh",
        description="Known exfiltration endpoint detected",
        ignore_case=True,
    ),
    Signature(
        id="NET_IP_RAW",
        level=Severity.CRITICAL,
        pattern=r"\b\d{1,3}\.\d{1,3}\.\d{1,3}\.\d{1,3}\b",
        description="Hardcoded IP address (potential C2)",
    ),
    Signature(
        id="FS_SSH_KEY",
        level=Severity.CRITICAL,
        pattern=r"\.ssh/(id_rsa|id_ed25519|known_hosts)",
        description="Accessing SSH private keys",
    ),
    Signature(
        id="FS_AWS_CRED",
        level=Severity.CRITICAL,
        pattern=r"\.aws/credentials",
        description="Accessing AWS credentials",
    ),
    # Suspicious behaviour
    Signature(
        id="ENV_READ",
        level=Severity.HIGH,
        pattern=r"(cat|grep|printenv|env).*\.env",
        description="Reading sensitive .env files",
    ),
    Signature(
        id="ENV_JSON",
        level=Severity.HIGH,
        pattern=r"credentials\.json|client_secret\.json",
        description="Accessing credential JSON files",
    ),
    Signature(
        id="OBF_EVAL",
        level=Severity.HIGH,
        pattern=r"eval\s*\(",
        description="Dynamic code execution (eval)",
    ),
    Signature(
        id="OBF_BASE64",
        level=Severity.HIGH,
        pattern=r"base64\s+(-d|--decode)",
        description="Base64 decoding (possible obfuscation)",
    ),
    Signature(
        id="SHELL_PIPE",
        level=Severity.HIGH,
        pattern=r"\|\s*(sh|bash|zsh)",
        description="Piping content directly to shell",
    ),
    Signature(
        id="NET_CURL_UPLOAD",
        level=Severity.HIGH,
        pattern=r"curl.*-F|curl.*--data|curl.*-d",
        description="Data exfiltration via cURL",
    ),
    # Capabilities to watch
    Signature(
        id="NET_GENERIC",
        level=Severity.MEDIUM,
        pattern=r"curl|wget|fetch\(",
        description="Generic network access",
    ),
    Signature(
        id="FS_WRITE",
        level=Severity.MEDIUM,
        pattern=r">\s*/|write\(",
        description="File system write detected",
    ),
)

_BY_ID: Dict[str, Signature] = {signature.id: signature for signature in SIGNATURES}

if len(_BY_ID) != len(SIGNATURES):  # pragma: no cover
    raise RuntimeError("Duplicate signature id in catalog")


def all_signatures() -> Tuple[Signature, ...]:
    """Return the ordered signature catalog (the same tuple on every call)."""

    return SIGNATURES


def get_signature(signature_id: str) -> Signature:
    """Look up a catalog entry by id, raising ``KeyError`` if unknown."""

    return _BY_ID[signature_id]
