"""Optional YAML settings for the command line and reporter."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .acquire import REQUEST_TIMEOUT
from .errors import ConfigError
from .utils import read_yaml_file

REPORT_FORMATS = ("text", "json")
DEFAULT_SNIPPET_WIDTH = 60


@dataclass(frozen=True)
class Settings:
    format: str = "text"
    color: bool = True
    snippet_width: int = DEFAULT_SNIPPET_WIDTH
    output: Optional[str] = None
    timeout: float = REQUEST_TIMEOUT
    code_blocks_only: bool = False

    def merge(self, **overrides: Any) -> "Settings":
        """Return a copy with every non-``None`` override applied."""

        changes = {key: value for key, value in overrides.items() if value is not None}
        return _validate(replace(self, **changes))


def load_settings(path: str | Path | None) -> Settings:
    """Load settings from ``path``; ``None`` yields the defaults."""

    if path is None:
        return Settings()

    config_path = Path(path)
    try:
        raw = read_yaml_file(config_path)
    except (yaml.YAMLError, OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Cannot read config {config_path}: {exc}") from exc
    if raw is None:
        if not config_path.exists():
            raise ConfigError(f"Config file not found: {config_path}")
        return Settings()
    if not isinstance(raw, dict):
        raise ConfigError(f"Config at {config_path} must be a mapping")

    known = {item.name for item in fields(Settings)}
    unknown = sorted(str(key) for key in raw if key not in known)
    if unknown:
        raise ConfigError(f"Unknown config key(s): {', '.join(unknown)}")

    return _validate(Settings(**_coerce(raw)))


def _coerce(raw: Dict[str, Any]) -> Dict[str, Any]:
    values = dict(raw)
    for key in ("color", "code_blocks_only"):
        if key in values and not isinstance(values[key], bool):
            raise ConfigError(f"'{key}' must be true or false")
    if "snippet_width" in values and (
        isinstance(values["snippet_width"], bool) or not isinstance(values["snippet_width"], int)
    ):
        raise ConfigError("'snippet_width' must be an integer")
    if "timeout" in values:
        if isinstance(values["timeout"], bool) or not isinstance(values["timeout"], (int, float)):
            raise ConfigError("'timeout' must be a number")
        values["timeout"] = float(values["timeout"])
    if "output" in values and values["output"] is not None:
        values["output"] = str(values["output"])
    return values


def _validate(settings: Settings) -> Settings:
    if settings.format not in REPORT_FORMATS:
        raise ConfigError(f"'format' must be one of: {', '.join(REPORT_FORMATS)}")
    if settings.snippet_width <= 0:
        raise ConfigError("'snippet_width' must be positive")
    if settings.timeout <= 0:
        raise ConfigError("'timeout' must be positive")
    return settings
