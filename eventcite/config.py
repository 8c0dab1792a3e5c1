from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

import yaml

OUTPUT_FORMATS = ("text", "json")
_KNOWN_KEYS = {"format", "urls", "lines", "log_level", "log_file"}


@dataclass
class CliConfig:
    format: str = "text"
    urls: bool = False
    lines: bool = False
    log_level: str | None = None
    log_file: str | None = None
    extra: Dict[str, Any] = field(default_factory=dict)


def load_cli_config(path: str | Path) -> CliConfig:
    try:
        data = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ValueError(f"Config {path} is not valid YAML: {exc}") from exc
    if data is None:
        return CliConfig()
    if not isinstance(data, dict):
        raise ValueError(f"Config {path} must be a mapping, got {type(data).__name__}")

    output_format = str(data.get("format", "text")).lower()
    if output_format not in OUTPUT_FORMATS:
        raise ValueError(
            f"Unsupported format: {output_format} (expected one of {', '.join(OUTPUT_FORMATS)})"
        )

    for key in ("urls", "lines"):
        if not isinstance(data.get(key, False), bool):
            raise ValueError(f"Invalid {key}: {data[key]!r} (expected true or false)")
    for key in ("log_level", "log_file"):
        value = data.get(key)
        if value is not None and not isinstance(value, str):
            raise ValueError(f"Invalid {key}: {value!r} (expected a string)")

    return CliConfig(
        format=output_format,
        urls=data.get("urls", False),
        lines=data.get("lines", False),
        log_level=data.get("log_level"),
        log_file=data.get("log_file"),
        extra={k: v for k, v in data.items() if k not in _KNOWN_KEYS},
    )
