"""텍스트 렌더링 모듈: 상부 프레임 간판 문구를 그린다.

등록된 Pretendard 글꼴을 우선 쓰고, 없으면 OS별 한글 시스템 글꼴 목록으로
대체한다. 글꼴 문제로 전체 렌더가 실패하지는 않는다.
"""

import logging
import os
import sys as _sys
from pathlib import Path

from PIL import Image, ImageDraw, ImageFont

from locker.errors import TextRenderFailure

logger = logging.getLogger(__name__)

_FONT_DIR = Path(__file__).parent.parent / "assets" / "fonts"
_DEFAULT_FONT = _FONT_DIR / "Pretendard-Medium.otf"


def _find_fallback() -> str:
    """OS에 맞는 한글 폴백 폰트 경로를 반환한다."""
    if _sys.platform == "win32":
        candidates = ["C:/Windows/Fonts/malgun.ttf", "C:/Windows/Fonts/gulim.ttc"]
    elif _sys.platform == "darwin":
        candidates = [
            "/System/Library/Fonts/AppleSDGothicNeo.ttc",
            "/System/Library/Fonts/Supplemental/AppleGothic.ttf",
        ]
    else:
        candidates = [
            "/usr/share/fonts/truetype/nanum/NanumGothic.ttf",
            "/usr/share/fonts/truetype/noto/NotoSansCJK-Regular.ttc",
            "/usr/share/fonts/opentype/noto/NotoSansCJK-Regular.ttc",
            "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
        ]
    for path in candidates:
        if os.path.exists(path):
            return path
    return ""


# 프로세스 전역 등록 상태: 동시 렌더 시작 전에 한 번만 설정한다
_registered_font: str | None = None
_font_cache: dict[tuple[str, int], ImageFont.FreeTypeFont] = {}


def register_font(path: Path | str | None = None) -> bool:
    """간판용 글꼴을 등록한다. 실패하면 폴백 글꼴을 쓰도록 두고 False를 반환한다."""
    global _registered_font
    font_path = Path(path) if path else _DEFAULT_FONT
    if not font_path.exists():
        logger.warning("간판 글꼴 없음: %s (시스템 글꼴 사용)", font_path)
        _registered_font = None
        return False
    try:
        ImageFont.truetype(str(font_path), 12)
    except OSError as e:
        logger.warning("간판 글꼴 등록 실패: %s (%s)", font_path, e)
        _registered_font = None
        return False
    _registered_font = str(font_path)
    logger.info("간판 글꼴 등록: %s", font_path.name)
    return True


def registered_font() -> str | None:
    return _registered_font


def _get_font(size: int) -> ImageFont.FreeTypeFont:
    """폰트를 로드한다 (캐싱)."""
    path = _registered_font or _find_fallback()
    key = (path, size)
    if key not in _font_cache:
        if path and os.path.exists(path):
            _font_cache[key] = ImageFont.truetype(path, size)
        else:
            _font_cache[key] = ImageFont.load_default(size)
    return _font_cache[key]


def render_label(
    text: str,
    width: int,
    height: int,
    font_size: int = 60,
    color: tuple = (255, 255, 255, 255),
) -> Image.Image:
    """width x height 투명 서브 캔버스 중앙에 문구를 그린다.

    Raises:
        TextRenderFailure: 글꼴을 열 수 없거나 글리프 측정 결과가 비어 있을 때
    """
    if not isinstance(text, str) or not text.strip():
        raise TextRenderFailure("frame label is empty")
    try:
        font = _get_font(font_size)
        bbox = font.getbbox(text)
    except (OSError, ValueError) as e:
        raise TextRenderFailure(f"font measurement failed: {e}") from e
    if bbox[2] - bbox[0] <= 0:
        raise TextRenderFailure("font may not support the label glyphs")

    layer = Image.new("RGBA", (width, height), (0, 0, 0, 0))
    draw = ImageDraw.Draw(layer)
    try:
        draw.text((width / 2, height / 2), text, font=font, fill=tuple(color), anchor="mm")
    except (OSError, ValueError) as e:
        raise TextRenderFailure(f"glyph rendering failed: {e}") from e
    return layer


def render_frame_label(
    text: str,
    width: int,
    height: int,
    font_size: int = 60,
    color: tuple = (255, 255, 255, 255),
) -> Image.Image | None:
    """간판 문구 레이어. 실패하면 로그만 남기고 None (프레임 띠는 그대로 둔다)."""
    try:
        return render_label(text, width, height, font_size, color)
    except TextRenderFailure as e:
        logger.warning("간판 문구 생략: %s", e)
        return None
