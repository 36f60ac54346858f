from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

from .settings import settings


class UIConfig(BaseModel):
    page_title: str = "Pokédex"
    grid_columns: int = 6
    show_images: bool = True

    @field_validator("grid_columns")
    @classmethod
    def positive_columns(cls, v):
        if v <= 0: raise ValueError("grid_columns must be > 0")
        return v


class LoaderConfig(BaseModel):
    # overrides settings.batch_size when set
    batch_size: int | None = None

    @field_validator("batch_size")
    @classmethod
    def positive_batch(cls, v):
        if v is not None and v <= 0: raise ValueError("batch_size must be > 0")
        return v


class RuntimeConfig(BaseModel):
    ui: UIConfig = Field(default_factory=UIConfig)
    loader: LoaderConfig = Field(default_factory=LoaderConfig)

    def effective_batch_size(self) -> int:
        return self.loader.batch_size or settings.batch_size


def _config_dir(base_dir: str) -> Path:
    p = Path(base_dir) / "config"
    p.mkdir(parents=True, exist_ok=True)
    return p


def _runtime_path(base_dir: str) -> Path:
    return _config_dir(base_dir) / "runtime_config.yaml"


def _defaults_path(base_dir: str) -> Path:
    # optional file; if present, merged under runtime
    return _config_dir(base_dir) / "service_defaults.yaml"


def _load_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    return data or {}


def _deep_merge(a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
    out = dict(a)
    for k, v in b.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _deep_merge(out[k], v)
        else:
            out[k] = v
    return out


def load_runtime_config(base_dir: str | None = None) -> RuntimeConfig:
    base_dir = base_dir or settings.data_dir
    defaults = _load_yaml(_defaults_path(base_dir))
    runtime = _load_yaml(_runtime_path(base_dir))
    merged = _deep_merge(defaults, runtime)
    return RuntimeConfig(**merged)


def save_runtime_config(cfg: RuntimeConfig, base_dir: str | None = None) -> None:
    base_dir = base_dir or settings.data_dir
    runtime_path = _runtime_path(base_dir)
    raw = cfg.model_dump()
    runtime_path.write_text(yaml.safe_dump(raw, sort_keys=False, allow_unicode=True), encoding="utf-8")
