import pytest
import yaml
from pydantic import ValidationError

from pokedex.config.runtime_config import (
    LoaderConfig,
    RuntimeConfig,
    UIConfig,
    load_runtime_config,
    save_runtime_config,
)


def test_defaults_without_files(tmp_path):
    cfg = load_runtime_config(str(tmp_path))
    assert cfg.ui.grid_columns == 6
    assert cfg.loader.batch_size is None
    assert cfg.effective_batch_size() == 151


def test_runtime_overrides_service_defaults(tmp_path):
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    (config_dir / "service_defaults.yaml").write_text(
        yaml.safe_dump({"ui": {"grid_columns": 4, "page_title": "Dex"}, "loader": {"batch_size": 20}}),
        encoding="utf-8",
    )
    (config_dir / "runtime_config.yaml").write_text(
        yaml.safe_dump({"ui": {"grid_columns": 8}}), encoding="utf-8"
    )

    cfg = load_runtime_config(str(tmp_path))
    assert cfg.ui.grid_columns == 8
    assert cfg.ui.page_title == "Dex"
    assert cfg.effective_batch_size() == 20


def test_save_then_load(tmp_path):
    cfg = RuntimeConfig(ui=UIConfig(show_images=False), loader=LoaderConfig(batch_size=3))
    save_runtime_config(cfg, str(tmp_path))
    assert load_runtime_config(str(tmp_path)) == cfg


def test_invalid_values_rejected():
    with pytest.raises(ValidationError):
        UIConfig(grid_columns=0)
    with pytest.raises(ValidationError):
        LoaderConfig(batch_size=-1)
