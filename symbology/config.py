"""Configuration loading for the symbology tools."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

INPUT_FORMATS = ("osi", "activity")
OUTPUT_FORMATS = ("osi", "osi-unpadded", "schwab")


@dataclass(frozen=True)
class AppConfig:
    strict_calendar: bool = False
    input_format: str = "osi"
    output_format: str = "schwab"
    symbol_column: str = "symbol"


DEFAULT_CONFIG_PATH = Path("config.yaml")
DEFAULT_ENV_PATH = Path(".env")

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


class ConfigError(RuntimeError):
    """Raised when configuration values are invalid."""


def _load_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping.")
    return data


def _get_env(name: str) -> Optional[str]:
    value = os.getenv(name)
    return value.strip() if value else None


def _load_dotenv(path: Path) -> None:
    if not path.exists():
        return
    for line in path.read_text(encoding="utf-8").splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        if "=" not in stripped:
            continue
        key, value = stripped.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key and key not in os.environ:
            os.environ[key] = value


def _coerce_bool(name: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    normalized = str(value).strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ConfigError(f"{name} must be a boolean, got {value!r}.")


def _choice(name: str, value: str, choices: tuple[str, ...]) -> str:
    if value not in choices:
        raise ConfigError(f"{name} must be one of {', '.join(choices)}; got {value!r}.")
    return value


def load_config(path: Optional[Path] = None) -> AppConfig:
    _load_dotenv(DEFAULT_ENV_PATH)
    config_path = path or DEFAULT_CONFIG_PATH
    raw = _load_yaml(config_path)

    options_cfg = raw.get("options", {}) or {}
    csv_cfg = raw.get("csv", {}) or {}

    strict = _get_env("SYMBOLOGY_STRICT_CALENDAR")
    if strict is None:
        strict = options_cfg.get("strict_calendar", False)
    input_format = _get_env("SYMBOLOGY_INPUT_FORMAT") or options_cfg.get("input_format") or "osi"
    output_format = (
        _get_env("SYMBOLOGY_OUTPUT_FORMAT") or options_cfg.get("output_format") or "schwab"
    )
    symbol_column = csv_cfg.get("symbol_column") or "symbol"

    return AppConfig(
        strict_calendar=_coerce_bool("strict_calendar", strict),
        input_format=_choice("input_format", str(input_format), INPUT_FORMATS),
        output_format=_choice("output_format", str(output_format), OUTPUT_FORMATS),
        symbol_column=str(symbol_column),
    )
