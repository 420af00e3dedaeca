"""설정 파일 로더 모듈."""

import copy
import json
from pathlib import Path

# 기본 설정 경로
_CONFIG_PATH = Path(__file__).parent / "config.json"

# 기본값 — config.json에 누락된 키가 있을 때 사용
_DEFAULTS = {
    "blend": {
        "alpha": 0.5,
        "offset": [1, 0],
    },
    "logging": {
        "level": "INFO",
    },
}


def _deep_merge(base: dict, override: dict) -> dict:
    """base 딕셔너리에 override 값을 병합한다 (깊은 병합)."""
    result = copy.deepcopy(base)
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
        return _deep_merge(_DEFAULTS, user_config)
    return copy.deepcopy(_DEFAULTS)


def blend_settings(config: dict) -> tuple[tuple[int, int], float]:
    """설정에서 블렌딩 (offset, alpha)를 꺼낸다. 누락된 값은 기본값."""
    blend = config.get("blend", {})
    dx, dy = blend.get("offset", _DEFAULTS["blend"]["offset"])
    alpha = blend.get("alpha", _DEFAULTS["blend"]["alpha"])
    return (int(dx), int(dy)), float(alpha)
