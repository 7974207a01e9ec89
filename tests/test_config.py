import json
import logging
from pathlib import Path

import pytest

from config import LandscapeConfig, config_from_dict, load_config
from safe_parse import parse_size, to_float, to_int


def test_safe_parse_helpers():
    assert to_int("7") == 7
    assert to_int("720.0") == 720
    assert to_int("bad", default=3) == 3
    assert to_int(True, default=4) == 4
    assert to_float("1.5") == 1.5
    assert to_float("nan", default=2.5) == 2.5
    assert to_float(None, default=None) is None


def test_parse_size():
    assert parse_size("800x600") == (800, 600)
    assert parse_size(" 1280 X 720 ") == (1280, 720)
    for bad in ("800", "0x600", "axb", "800x600x2"):
        with pytest.raises(ValueError):
            parse_size(bad)


def test_config_validation():
    with pytest.raises(ValueError):
        LandscapeConfig(layer_count=0)
    with pytest.raises(ValueError):
        LandscapeConfig(width=-1)
    cfg = LandscapeConfig().with_overrides(width=300, seed=None)
    assert cfg.width == 300
    assert cfg.seed is None


def test_config_from_dict_coerces_and_warns(caplog):
    with caplog.at_level(logging.WARNING):
        cfg = config_from_dict({"layer_count": "4", "width": "oops", "hue": "12.5", "colour": 1})
    assert cfg.layer_count == 4
    assert cfg.width == LandscapeConfig().width
    assert cfg.hue == 12.5
    assert "unknown key" in caplog.text
    assert "to_float" in caplog.text


def test_load_config(tmp_path: Path):
    path = tmp_path / "landscape.json"
    path.write_text(json.dumps({"layer_count": 3, "width": 640, "height": 360, "seed": 8}),
                    encoding="utf-8")
    cfg = load_config(path)
    assert cfg.viewport == (640, 360)
    assert cfg.layer_count == 3
    assert cfg.seed == 8

    bad = tmp_path / "list.json"
    bad.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(bad)
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.json")


def test_config_null_keeps_base_for_required_fields():
    base = LandscapeConfig(seed=5, hue=30.0)
    cfg = config_from_dict({"layer_count": None, "width": None, "noise_falloff": None,
                            "seed": None, "hue": None}, base)
    assert cfg.layer_count == base.layer_count
    assert cfg.width == base.width
    assert cfg.noise_falloff == base.noise_falloff
    assert cfg.seed is None
    assert cfg.hue is None
