"""Basic file IO helpers."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml


def read_yaml_file(path: Path) -> Any:
    """Return the parsed YAML if the file exists, otherwise ``None``."""

    if not path.exists():
        return None
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle)


def read_text_file(path: Path) -> str:
    """Return the file contents as UTF-8 text, replacing undecodable bytes.

    Unlike :func:`read_yaml_file` a missing file is an error here; callers
    decide how to surface ``OSError``.
    """

    return path.read_text(encoding="utf-8", errors="replace")
