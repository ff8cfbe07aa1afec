"""기본 템플릿 생성 모듈: 회색조 칸·손잡이·제어부 이미지를 Pillow로 그린다.

저장소에는 바이너리 에셋을 두지 않으므로 `make-assets` 명령으로 에셋
디렉토리를 채운다. 칸 템플릿은 색 입히기 전제이므로 회색조로만 그린다.
"""

import logging
from pathlib import Path

from PIL import Image, ImageDraw

from .assets import DEFAULT_FILENAMES

logger = logging.getLogger(__name__)

# 원본 칸 이미지 비율 258x236
CELL_SIZE = (258, 236)
HANDLE_SIZE = (24, 88)
CONTROL_PANEL_SIZE = (300, 416)


def _gray(v: int, alpha: int = 255) -> tuple[int, int, int, int]:
    return (v, v, v, alpha)


def draw_cell_template() -> Image.Image:
    """밝은 도어 패널: 위에서 아래로 약한 그라데이션, 좌상단 하이라이트, 우하단 음영."""
    w, h = CELL_SIZE
    img = Image.new("RGBA", (w, h), _gray(230))
    draw = ImageDraw.Draw(img)
    for y in range(h):
        v = int(244 - y * 22 / h)
        draw.line([(0, y), (w - 1, y)], fill=_gray(v))

    # 베벨
    draw.line([(2, 2), (w - 3, 2)], fill=_gray(255), width=2)
    draw.line([(2, 2), (2, h - 3)], fill=_gray(255), width=2)
    draw.line([(2, h - 3), (w - 3, h - 3)], fill=_gray(190), width=2)
    draw.line([(w - 3, 2), (w - 3, h - 3)], fill=_gray(190), width=2)

    # 환기 타공
    for i in range(5):
        y = 24 + i * 8
        draw.rounded_rectangle((w // 2 - 40, y, w // 2 + 40, y + 3), radius=1, fill=_gray(200))
    return img


def draw_handle_template() -> Image.Image:
    """세로형 금속 손잡이 (투명 배경)."""
    w, h = HANDLE_SIZE
    img = Image.new("RGBA", (w, h), (0, 0, 0, 0))
    draw = ImageDraw.Draw(img)
    draw.rounded_rectangle((0, 0, w - 1, h - 1), radius=w // 2, fill=_gray(90))
    draw.rounded_rectangle((3, 3, w - 4, h - 4), radius=w // 2 - 3, fill=_gray(150))
    draw.line([(w // 2 - 2, 10), (w // 2 - 2, h - 11)], fill=_gray(215), width=2)
    return img


def draw_control_panel_template() -> Image.Image:
    """제어부: 어두운 본체, 화면, 3x4 키패드, 카드 리더."""
    w, h = CONTROL_PANEL_SIZE
    img = Image.new("RGBA", (w, h), _gray(60))
    draw = ImageDraw.Draw(img)
    draw.rectangle((0, 0, w - 1, h - 1), outline=_gray(30), width=3)

    # 화면
    draw.rounded_rectangle((30, 28, w - 31, 148), radius=8, fill=_gray(25))
    draw.rounded_rectangle((40, 38, w - 41, 138), radius=6, fill=_gray(110))

    # 키패드
    key_w, key_h, gap = 56, 36, 14
    left = (w - (3 * key_w + 2 * gap)) // 2
    for row in range(4):
        for col in range(3):
            x = left + col * (key_w + gap)
            y = 172 + row * (key_h + gap)
            draw.rounded_rectangle((x, y, x + key_w, y + key_h), radius=5, fill=_gray(185))

    # 카드 리더
    draw.rounded_rectangle((w // 2 - 50, h - 34, w // 2 + 50, h - 20), radius=4, fill=_gray(20))
    return img


TEMPLATE_FACTORIES = {
    "cell": draw_cell_template,
    "handle": draw_handle_template,
    "control_panel": draw_control_panel_template,
}


def save_default_templates(directory: Path | str, overwrite: bool = False) -> dict[str, Path]:
    """기본 템플릿을 PNG로 저장하고 {에셋 이름: 경로}를 반환한다."""
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    written = {}
    for name, factory in TEMPLATE_FACTORIES.items():
        path = directory / DEFAULT_FILENAMES[name]
        if path.exists() and not overwrite:
            logger.info("에셋 유지: %s", path)
        else:
            factory().save(path, format="PNG")
            logger.info("에셋 생성: %s", path)
        written[name] = path
    return written
