from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

CONFIG_ENV_VAR = "SMARTCAMPUS_CONFIG"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _default_config_path() -> Path:
    env_path = os.getenv(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)
    return Path(__file__).resolve().parent.parent / "config.yaml"


def _require_bool(value: Any, default: bool, name: str) -> bool:
    if value is None:
        return default
    if not isinstance(value, bool):
        raise ValueError(f"{name} must be a boolean")
    return value


def _require_log_level(value: Any, default: str, name: str) -> str:
    if value is None:
        return default
    if not isinstance(value, str) or value.upper() not in LOG_LEVELS:
        raise ValueError(f"{name} must be one of {', '.join(LOG_LEVELS)}")
    return value.upper()


def _require_str_list(value: Any, default: tuple[str, ...], name: str) -> tuple[str, ...]:
    if value is None:
        return default
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ValueError(f"{name} must be a list of strings")
    return tuple(value)


@dataclass(frozen=True)
class CorsConfig:
    allow_origins: tuple[str, ...] = ("*",)


@dataclass(frozen=True)
class Config:
    log_level: str = "INFO"
    seed_rooms: bool = True
    cors: CorsConfig = field(default_factory=CorsConfig)

    @classmethod
    def load(cls, path: Path | str | None = None) -> "Config":
        config_path = Path(path) if path else _default_config_path()
        if not config_path.exists():
            return cls()
        raw = yaml.safe_load(config_path.read_text()) or {}
        if not isinstance(raw, dict):
            raise ValueError("config.yaml must contain a mapping")
        return cls.from_dict(raw)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Config":
        defaults = cls()
        cors_data = data.get("cors")
        if cors_data is not None and not isinstance(cors_data, dict):
            raise ValueError("cors must be a mapping")
        cors_data = cors_data or {}
        return cls(
            log_level=_require_log_level(
                data.get("log_level"), defaults.log_level, "log_level"
            ),
            seed_rooms=_require_bool(
                data.get("seed_rooms"), defaults.seed_rooms, "seed_rooms"
            ),
            cors=CorsConfig(
                allow_origins=_require_str_list(
                    cors_data.get("allow_origins"),
                    defaults.cors.allow_origins,
                    "cors.allow_origins",
                )
            ),
        )
