from __future__ import annotations

import os
import tomllib
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from .errors import ConfigError
from .models import AppConfig

if TYPE_CHECKING:
    from pathlib import Path

COLLAPSE_KEY_ENV = "GCM_COLLAPSE_KEY"


def _apply_env_overrides(data: dict[str, Any]) -> dict[str, Any]:
    collapse_key = os.environ.get(COLLAPSE_KEY_ENV)
    if not collapse_key:
        return data
    message = data.get("message", {})
    if not isinstance(message, dict):
        # leave the bad value for model validation to report
        return data
    return {**data, "message": {**message, "collapse_key": collapse_key}}


def load_config(path: Path) -> AppConfig:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        msg = f"config not readable: {path}"
        raise ConfigError(msg) from exc
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        msg = "toml parse error"
        raise ConfigError(msg) from exc

    try:
        return AppConfig.from_raw(_apply_env_overrides(data))
    except ValidationError as exc:
        msg = f"invalid config: {path}"
        raise ConfigError(msg) from exc
