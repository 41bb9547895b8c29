from __future__ import annotations

import os
from functools import cache
from pathlib import Path
from typing import ClassVar

import yaml
from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from colx.errors import ConfigError, UnknownBackendError
from colx.logger import get_logger
from colx.mapx.backend import Backend


log = get_logger("colx.config")


class MapSettings(BaseModel):
    # backend used by the CLI and by callers that ask the settings for one
    default_backend: Backend = Field(default=Backend.HASH)


class LRUSettings(BaseModel):
    capacity: int = Field(default=128, ge=1)


class LoggingSettings(BaseModel):
    level: str = Field(default="INFO")
    json_output: bool = Field(default=False)


class ColxSettings(BaseSettings):
    """
    Library settings.

    Source of truth:
      1) YAML file (structured config)
      2) flat COLX_* env overrides, merged explicitly in from_yaml().
    """

    model_config: ClassVar[SettingsConfigDict] = SettingsConfigDict(
        env_prefix="",  # no automatic prefixing
        extra="ignore",
        case_sensitive=False,
    )

    maps: MapSettings = Field(default_factory=MapSettings)
    lru: LRUSettings = Field(default_factory=LRUSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    # ---------- YAML loader with explicit env merge ----------
    @classmethod
    def from_yaml(cls, path: Path | None = None) -> ColxSettings:
        """
        Load settings from YAML, then overlay COLX_* env vars.
        Search order if path is not provided:
          ./colx.yaml
          ~/.config/colx/config.yaml
        """
        candidates: list[Path] = []
        if path is not None:
            candidates.append(path)
        else:
            candidates.extend([Path("colx.yaml"), Path.home() / ".config" / "colx" / "config.yaml"])

        raw: dict[str, object] = {}
        for p in candidates:
            if p.exists():
                loaded = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
                if not isinstance(loaded, dict):
                    raise ConfigError(f"YAML at {p} must define a mapping at the root")
                raw = loaded
                log.debug("config loaded", path=str(p))
                break

        try:
            cfg = cls.model_validate(raw)
        except ValidationError as e:
            raise ConfigError(f"Invalid colx settings: {e}") from e

        def _get_env(name: str) -> str | None:
            v = os.getenv(name)
            if v is not None and v != "":
                return v
            return None

        backend = _get_env("COLX_DEFAULT_BACKEND")
        if backend is not None:
            try:
                cfg.maps.default_backend = Backend.parse(backend)
            except UnknownBackendError as e:
                raise ConfigError(f"COLX_DEFAULT_BACKEND is not a known backend: {backend!r}") from e

        capacity = _get_env("COLX_LRU_CAPACITY")
        if capacity is not None:
            try:
                parsed = int(capacity)
            except ValueError as e:
                raise ConfigError(f"COLX_LRU_CAPACITY must be an integer, got {capacity!r}") from e
            # same lower bound as LRUSettings.capacity
            if parsed < 1:
                raise ConfigError(f"COLX_LRU_CAPACITY must be >= 1, got {parsed}")
            cfg.lru.capacity = parsed

        level = _get_env("COLX_LOG_LEVEL")
        if level is not None:
            cfg.logging.level = level.strip().upper()

        json_raw = _get_env("COLX_LOG_JSON")
        if json_raw is not None:
            truthy = {"1", "true", "yes", "on"}
            cfg.logging.json_output = json_raw.strip().lower() in truthy

        return cfg


@cache
def get_settings() -> ColxSettings:
    return ColxSettings.from_yaml()


__all__ = [
    "ColxSettings",
    "LRUSettings",
    "LoggingSettings",
    "MapSettings",
    "get_settings",
]
