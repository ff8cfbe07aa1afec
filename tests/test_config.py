import json

from config import asset_paths, load_config


def test_defaults_when_file_missing(tmp_path):
    config = load_config(tmp_path / "config.json")
    assert config["font"]["size"] == 60
    assert config["label"]["text"] == "물 품 보 관 함"
    assert asset_paths(config)["cell"].name == "locker-cell.png"


def test_user_values_deep_merged(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"assets": {"directory": str(tmp_path)}, "font": {"size": 48}}), encoding="utf-8")
    config = load_config(path)
    assert config["font"]["size"] == 48
    assert config["font"]["path"].endswith("Pretendard-Medium.otf")
    assert asset_paths(config)["control_panel"] == tmp_path / "control-panel.png"


def test_defaults_not_shared_between_loads(tmp_path):
    first = load_config(tmp_path / "none.json")
    first["assets"]["directory"] = "/elsewhere"
    assert load_config(tmp_path / "none.json")["assets"]["directory"] != "/elsewhere"
