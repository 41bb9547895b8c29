from __future__ import annotations

from pathlib import Path

import pytest

from colx.config import ColxSettings
from colx.errors import ConfigError, UnknownBackendError
from colx.mapx import Backend


# ---- Env cleanup ----
@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for k in ["COLX_DEFAULT_BACKEND", "COLX_LRU_CAPACITY", "COLX_LOG_LEVEL", "COLX_LOG_JSON"]:
        monkeypatch.delenv(k, raising=False)


def _write_yaml(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


# ---- 1) Defaults without a file ----
def test_defaults(tmp_path: Path) -> None:
    cfg = ColxSettings.from_yaml(tmp_path / "absent.yaml")
    assert cfg.maps.default_backend is Backend.HASH
    assert cfg.lru.capacity == 128
    assert cfg.logging.level == "INFO"
    assert cfg.logging.json_output is False


# ---- 2) YAML values ----
def test_yaml_values(tmp_path: Path) -> None:
    cfg = ColxSettings.from_yaml(
        _write_yaml(
            tmp_path / "colx.yaml",
            """\
maps:
  default_backend: linked
lru:
  capacity: 16
logging:
  level: DEBUG
""",
        )
    )
    assert cfg.maps.default_backend is Backend.LINKED
    assert cfg.lru.capacity == 16
    assert cfg.logging.level == "DEBUG"


# ---- 3) Env overrides win over YAML ----
def test_env_overrides(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("COLX_DEFAULT_BACKEND", "Array")
    monkeypatch.setenv("COLX_LRU_CAPACITY", "3")
    monkeypatch.setenv("COLX_LOG_LEVEL", "warning")
    monkeypatch.setenv("COLX_LOG_JSON", "yes")
    cfg = ColxSettings.from_yaml(_write_yaml(tmp_path / "colx.yaml", "lru:\n  capacity: 16\n"))
    assert cfg.maps.default_backend is Backend.ARRAY
    assert cfg.lru.capacity == 3
    assert cfg.logging.level == "WARNING"
    assert cfg.logging.json_output is True


# ---- 4) Broken sources ----
def test_non_mapping_root_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigError) as ei:
        ColxSettings.from_yaml(_write_yaml(tmp_path / "colx.yaml", "- a\n- b\n"))
    assert "mapping at the root" in str(ei.value)


def test_invalid_yaml_value_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        ColxSettings.from_yaml(_write_yaml(tmp_path / "colx.yaml", "lru:\n  capacity: 0\n"))


def test_bad_env_capacity_raises(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("COLX_LRU_CAPACITY", "lots")
    with pytest.raises(ConfigError) as ei:
        ColxSettings.from_yaml(tmp_path / "absent.yaml")
    assert "COLX_LRU_CAPACITY" in str(ei.value)


def test_bad_env_backend_raises(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("COLX_DEFAULT_BACKEND", "skiplist")
    with pytest.raises(ConfigError) as ei:
        ColxSettings.from_yaml(tmp_path / "absent.yaml")
    assert "COLX_DEFAULT_BACKEND" in str(ei.value)
    assert isinstance(ei.value.__cause__, UnknownBackendError)


def test_bad_backend_same_error_from_yaml_and_env(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    path = _write_yaml(tmp_path / "colx.yaml", "maps:\n  default_backend: skiplist\n")
    with pytest.raises(ConfigError):
        ColxSettings.from_yaml(path)
    monkeypatch.setenv("COLX_DEFAULT_BACKEND", "skiplist")
    with pytest.raises(ConfigError):
        ColxSettings.from_yaml(tmp_path / "absent.yaml")


# ---- 5) Zero capacity is rejected from every source ----
def test_zero_env_capacity_raises(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("COLX_LRU_CAPACITY", "0")
    with pytest.raises(ConfigError) as ei:
        ColxSettings.from_yaml(tmp_path / "absent.yaml")
    assert ">= 1" in str(ei.value)
