"""설정 파일 로더 모듈."""

import copy
import json
from pathlib import Path

# 기본 설정 경로
_CONFIG_PATH = Path(__file__).parent / "config.json"
_ROOT = Path(__file__).parent

# 기본값: config.json에 누락된 키가 있을 때 사용
_DEFAULTS = {
    "assets": {
        "directory": str(_ROOT / "assets"),
        "cell": "locker-cell.png",
        "handle": "handle.png",
        "control_panel": "control-panel.png",
    },
    "font": {
        "path": str(_ROOT / "assets" / "fonts" / "Pretendard-Medium.otf"),
        "size": 60,
    },
    "label": {
        "text": "물 품 보 관 함",
        "color": [255, 255, 255],
    },
    "logging": {
        "level": "INFO",
    },
}


def _deep_merge(base: dict, override: dict) -> dict:
    """base 딕셔너리에 override 값을 병합한다 (깊은 병합)."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def load_config(path: Path | None = None) -> dict:
    """설정 파일을 읽어 딕셔너리로 반환한다.

    파일이 없으면 기본값을 사용한다.
    """
    config_path = path or _CONFIG_PATH
    if config_path.exists():
        with open(config_path, encoding="utf-8") as f:
            user_config = json.load(f)
        return _deep_merge(copy.deepcopy(_DEFAULTS), user_config)
    return copy.deepcopy(_DEFAULTS)


def asset_paths(config: dict) -> dict[str, Path]:
    """설정의 에셋 파일명을 디렉토리 기준 절대 경로로 바꾼다."""
    assets = config["assets"]
    directory = Path(assets["directory"])
    return {
        name: directory / assets[name]
        for name in ("cell", "handle", "control_panel")
    }
