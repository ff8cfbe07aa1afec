"""미리보기 진입점: 설정 정규화, 합성, PNG/base64 인코딩.

문서 조립·HTTP 계층은 base64 형태(render_locker_grid_base64)를 사용한다.
"""

import base64
import logging
import threading
from pathlib import Path
from typing import Any, Mapping

from config import asset_paths, load_config
from locker.assets import AssetStore
from locker.errors import RenderFailed
from locker.options import LayoutConfig, normalize_config
from renderer.canvas import encode_image
from renderer.layers import LockerCompositor
from renderer.text import register_font

logger = logging.getLogger(__name__)

MIME_TYPE = "image/png"

# 템플릿과 글꼴은 프로세스 전역으로 한 번만 준비한다
_lock = threading.Lock()
_compositor: LockerCompositor | None = None


def _build(settings: dict) -> LockerCompositor:
    register_font(settings["font"]["path"])
    assets = AssetStore.load(asset_paths(settings))
    if not assets.complete:
        logger.warning("누락된 에셋: %s", ", ".join(assets.missing()))
    return LockerCompositor(
        assets,
        label_text=settings["label"]["text"],
        label_color=settings["label"]["color"],
        font_size=settings["font"]["size"],
    )


def init_engine(settings: dict | None = None, asset_dir: Path | str | None = None) -> LockerCompositor:
    """에셋 로드와 글꼴 등록. 동시 렌더를 시작하기 전에 호출한다."""
    global _compositor
    settings = settings or load_config()
    if asset_dir is not None:
        settings["assets"]["directory"] = str(asset_dir)
    with _lock:
        _compositor = _build(settings)
    return _compositor


def _get_compositor() -> LockerCompositor:
    global _compositor
    with _lock:
        if _compositor is None:
            _compositor = _build(load_config())
        return _compositor


def render_config(config: LayoutConfig, compositor: LockerCompositor | None = None) -> bytes:
    """정규화된 설정을 PNG 바이트로 렌더링한다.

    Raises:
        RenderFailed: 합성 중 오류
        EncodingFailure: PNG 직렬화 실패
    """
    compositor = compositor or _get_compositor()
    try:
        image = compositor.compose(config)
    except (OSError, ValueError, MemoryError) as e:
        logger.error("미리보기 렌더링 실패: %s", e)
        raise RenderFailed("locker preview rendering failed") from e

    data = encode_image(image, "PNG")
    logger.info(
        "Generated 2D preview for %dx%d locker (frame: %s)",
        config.columns, config.tiers, config.frame_type.value,
    )
    return data


def render_locker_grid(columns: int, tiers: int, **options: Any) -> bytes:
    """열·단 수와 옵션으로 PNG 미리보기를 만든다.

    options는 camelCase 요청 키(controlPanelColumn 등)와 snake_case 이름
    (control_panel_column 등)을 모두 받는다.

    Raises:
        InvalidConfig: 검증 실패 (렌더링 전에 모든 위반 필드와 함께)
    """
    config = normalize_config(options, columns=columns, tiers=tiers)
    return render_config(config)


def render_locker_grid_base64(columns: int, tiers: int, **options: Any) -> str:
    """render_locker_grid 결과의 base64 문자열."""
    return base64.b64encode(render_locker_grid(columns, tiers, **options)).decode("ascii")


def preview_payload(request: Mapping[str, Any]) -> dict:
    """미리보기 요청 본문을 받아 응답 본문 {"image", "mimeType"}를 만든다."""
    config = normalize_config(request)
    image = base64.b64encode(render_config(config)).decode("ascii")
    return {"image": image, "mimeType": MIME_TYPE}
