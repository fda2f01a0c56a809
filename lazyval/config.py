"""YAML-backed configuration for the lazyval CLI."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Type, TypeVar

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from lazyval.core.types import LazyMode

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "LAZYVAL_CONFIG"

SectionT = TypeVar("SectionT", bound=BaseModel)


class LoggingConfig(BaseModel):
    model_config = ConfigDict(extra="ignore")

    log_level: str = "INFO"
    log_file: Path = Path.home() / ".lazyval" / "lazyval.log"

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, value: Any) -> str:
        return str(value).strip().upper() or "INFO"


class DeveloperConfig(BaseModel):
    model_config = ConfigDict(extra="ignore")

    debug_mode: bool = False


class RaceConfig(BaseModel):
    """Defaults for the race and retry demonstrations."""

    model_config = ConfigDict(extra="ignore")

    race_threads: int = Field(default=10, ge=1)
    race_delay_ms: int = Field(default=50, ge=0)
    race_value: int = 777
    race_mode: LazyMode = LazyMode.MULTI_THREAD
    retry_failures: int = Field(default=1, ge=0)
    retry_attempts: int = Field(default=3, ge=1)

    @field_validator("race_mode", mode="before")
    @classmethod
    def _normalize_mode(cls, value: Any) -> LazyMode:
        return LazyMode.from_value(value)


class Config:
    """Application configuration loaded from a flat YAML mapping."""

    DEFAULT_CONFIG_FILE = Path.home() / ".lazyval" / "config.yaml"

    def __init__(self, config_path: Optional[Path] = None) -> None:
        self.config_path = self._resolve_path(config_path)
        raw = self._load_raw(self.config_path)

        self.logging = self._build_section(LoggingConfig, raw, "logging")
        self.developer = self._build_section(DeveloperConfig, raw, "developer")
        self.race = self._build_section(RaceConfig, raw, "race")

    def _resolve_path(self, config_path: Optional[Path]) -> Path:
        if config_path is not None:
            return Path(config_path).expanduser()
        env_path = os.environ.get(CONFIG_ENV_VAR, "").strip()
        if env_path:
            return Path(env_path).expanduser()
        return self.DEFAULT_CONFIG_FILE

    @staticmethod
    def _load_raw(path: Path) -> Dict[str, Any]:
        if not path.exists():
            return {}

        try:
            payload = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        except (OSError, yaml.YAMLError) as exc:
            logger.warning("Ignoring unreadable config file %s: %s", path, exc)
            return {}

        if not isinstance(payload, dict):
            logger.warning("Ignoring config file %s: expected a mapping", path)
            return {}
        return payload

    @staticmethod
    def _build_section(model: Type[SectionT], raw: Dict[str, Any], name: str) -> SectionT:
        values = {key: raw[key] for key in model.model_fields if key in raw}
        try:
            return model.model_validate(values)
        except (ValidationError, ValueError) as exc:
            logger.warning("Invalid %s settings, using defaults: %s", name, exc)
            return model()
