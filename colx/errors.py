from __future__ import annotations


class ColxError(Exception):
    """Base class for errors raised by colx."""


class UnknownBackendError(ColxError, ValueError):
    """Raised when a backend name does not match any known container backend."""

    def __init__(self, name: object) -> None:
        super().__init__(f"Unknown backend: {name!r}. Expected one of: hash, array, linked.")
        self.name = name


class ConfigError(ColxError, RuntimeError):
    """Raised when configuration sources cannot be turned into settings."""


__all__ = [
    "ColxError",
    "ConfigError",
    "UnknownBackendError",
]
