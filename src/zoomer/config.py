"""
Bot configuration — ~/.zoomer/config.json plus ZOOMER_* environment overrides.
"""

import json
import os
from pathlib import Path
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ValidationError, field_validator

from zoomer.errors import ConfigError

CONFIG_FILE = Path.home() / ".zoomer" / "config.json"

ENV_OVERRIDES = {
    "ZOOMER_PREFIX": "prefix",
    "ZOOMER_SELF_USER_ID": "self_user_id",
    "ZOOMER_STOP_ON_DECODE_ERROR": "stop_on_decode_error",
    "ZOOMER_LOG_LEVEL": "log_level",
}

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class BotConfig(BaseModel):
    prefix: str = "++"
    self_user_id: Optional[int] = None
    stop_on_decode_error: bool = False
    log_level: str = "WARNING"

    @field_validator("prefix")
    @classmethod
    def _prefix_not_blank(cls, v: str) -> str:
        if not v or v.strip() != v:
            raise ValueError("prefix must be non-empty and contain no surrounding whitespace")
        return v

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level


def _read_file(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text())
    except FileNotFoundError:
        return {}
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Cannot read config {path}: {e}")
    if not isinstance(data, dict):
        raise ConfigError(f"Config {path} must contain a JSON object")
    return data


def load_config(path: Optional[Path] = None, environ: Optional[Mapping[str, str]] = None) -> BotConfig:
    """Load config from file, then apply environment overrides."""
    env = os.environ if environ is None else environ
    data = _read_file(path or CONFIG_FILE)
    for var, key in ENV_OVERRIDES.items():
        if env.get(var):
            data[key] = env[var]
    try:
        return BotConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config: {e}")


def save_config(cfg: BotConfig, path: Optional[Path] = None) -> None:
    path = path or CONFIG_FILE
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(cfg.model_dump(), indent=2))
