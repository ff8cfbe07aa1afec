"""대체 그리드 모듈: 템플릿 에셋을 못 읽었을 때 쓰는 무채색 칸 그리드."""

from PIL import Image

from locker.options import LayoutConfig
from locker.tiers import TOTAL_HEIGHT, resolve_tier_heights

from .canvas import Canvas
from .layout import CELL_WIDTH, GRID_LINE

FALLBACK_BACKGROUND = (240, 240, 240, 255)
FALLBACK_CELL = (228, 228, 228, 255)
FALLBACK_OUTLINE = (150, 150, 150, 255)


def render_fallback_grid(config: LayoutConfig) -> Image.Image:
    """칸마다 단색 사각형과 외곽선만 그린다. 에셋·프레임·색상은 쓰지 않는다."""
    plan = resolve_tier_heights(
        config.tiers, config.tier_height_mode, config.custom_ratios, TOTAL_HEIGHT,
    )
    canvas = Canvas(config.columns * CELL_WIDTH + GRID_LINE, TOTAL_HEIGHT + GRID_LINE, FALLBACK_BACKGROUND)
    for col in range(config.columns):
        x = col * CELL_WIDTH
        for y, height in plan.spans():
            canvas.fill_rect(x, y, CELL_WIDTH + GRID_LINE, height + GRID_LINE, FALLBACK_CELL)
            canvas.hline(y, x, x + CELL_WIDTH, FALLBACK_OUTLINE)
            canvas.hline(y + height, x, x + CELL_WIDTH, FALLBACK_OUTLINE)
            canvas.vline(x, y, y + height, FALLBACK_OUTLINE)
            canvas.vline(x + CELL_WIDTH, y, y + height, FALLBACK_OUTLINE)
    return canvas.to_rgb()
