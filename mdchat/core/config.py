"""JSON-backed chat configuration."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

LOGGER = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "config.json"
CONFIG_ENV_VAR = "MDCHAT_CONFIG"


class ConfigError(Exception):
    """Raised when the configuration document is missing or malformed."""


@dataclass
class ChatConfig:
    """Settings read from the configuration document."""

    model: str
    ai_name: str
    system_prompt: str
    style: str

    @classmethod
    def from_dict(cls, data: object) -> "ChatConfig":
        if not isinstance(data, dict):
            raise ConfigError("configuration must be a JSON object")

        values = {}
        for key in ("model", "ai_name", "system_prompt", "style"):
            value = data.get(key, "")
            if not isinstance(value, str):
                raise ConfigError(f"'{key}' must be a string, got {type(value).__name__}")
            values[key] = value
        return cls(**values)


def resolve_config_path(explicit: Optional[str] = None) -> Path:
    """Pick the config path: explicit argument, then env var, then ./config.json."""
    return Path(explicit or os.getenv(CONFIG_ENV_VAR) or DEFAULT_CONFIG_PATH)


def load_config(path: Union[str, Path]) -> ChatConfig:
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as fh:
            data = json.load(fh)
    except OSError as exc:
        raise ConfigError(f"cannot read {path}: {exc.strerror or exc}") from exc
    except UnicodeDecodeError as exc:
        raise ConfigError(f"{path} is not valid UTF-8: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"invalid JSON in {path}: {exc}") from exc

    config = ChatConfig.from_dict(data)
    LOGGER.debug("config loaded from %s (model=%s, style=%s)", path, config.model, config.style)
    return config
