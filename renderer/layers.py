"""레이어 합성 모듈: 프레임, 본체 색, 손잡이, 경계선, 간판, 제어부를 순서대로 그린다.

나중 레이어가 앞 레이어를 덮는다. 순서:
배경 → 프레임 → 본체 채우기 → 손잡이 → 경계선 → 간판 문구 → 제어부
"""

import logging

from PIL import Image

from locker.assets import AssetStore
from locker.control_panel import ControlPanelPlacement, plan_control_panel
from locker.options import LayoutConfig
from locker.tiers import TierHeightPlan, resolve_tier_heights

from .canvas import BLACK, WHITE, Canvas
from .fallback import render_fallback_grid
from .layout import LockerGeometry, compute_geometry
from .text import render_frame_label
from .tint import tinted_fill_color

logger = logging.getLogger(__name__)

FRAME_COLOR = BLACK
GRID_COLOR = BLACK

CONTROL_PANEL_WIDTH = 150  # 칸 하나와 같은 폭

HANDLE_WIDTH = 12
HANDLE_HEIGHT = 44
HANDLE_MARGIN = 12    # 칸 오른쪽 경계선에서 손잡이까지
HANDLE_PADDING = 4    # 칸 위아래 최소 여백
MIN_HANDLE_HEIGHT = 6


class LockerCompositor:
    """설정 하나를 받아 미리보기 이미지를 합성한다.

    캔버스는 compose 호출마다 새로 만들고 인스턴스에 보관하지 않는다.
    템플릿은 읽기만 하므로 여러 스레드가 같은 인스턴스를 써도 된다.
    """

    def __init__(
        self,
        assets: AssetStore,
        label_text: str = "물 품 보 관 함",
        label_color: tuple = (255, 255, 255),
        font_size: int = 60,
    ):
        self._assets = assets
        self._label_text = label_text
        self._label_color = tuple(label_color)
        self._font_size = font_size

    def compose(self, config: LayoutConfig) -> Image.Image:
        """설정을 그려 RGB 이미지를 반환한다.

        필요한 템플릿이 없으면 대체 그리드를 반환한다.
        """
        if not self._assets.available_for(config.handle, config.has_control_panel):
            logger.warning(
                "필요한 에셋 없음 (%s), 대체 그리드로 렌더링",
                ", ".join(self._assets.missing()) or "unknown",
            )
            return render_fallback_grid(config)

        geometry = compute_geometry(config)
        plan = resolve_tier_heights(
            config.tiers, config.tier_height_mode, config.custom_ratios, geometry.body_height,
        )
        placement = None
        if config.has_control_panel:
            placement = plan_control_panel(config.control_panel_tier_span, geometry.body_height)

        canvas = Canvas(geometry.canvas_width, geometry.canvas_height, WHITE)
        self._draw_frames(canvas, geometry)
        self._fill_body(canvas, geometry, config)
        if config.handle:
            self._draw_handles(canvas, geometry, plan, placement, config)
        self._draw_grid(canvas, geometry, plan, placement, config)
        if geometry.top_frame:
            self._draw_label(canvas, geometry)
        if placement is not None:
            self._draw_control_panel(canvas, geometry, placement, config)
        return canvas.to_rgb()

    # --- 레이어 ---

    def _draw_frames(self, canvas: Canvas, g: LockerGeometry) -> None:
        if g.top_frame:
            canvas.fill_rect(0, 0, g.canvas_width, g.top_frame, FRAME_COLOR)
        if g.side_frame:
            canvas.fill_rect(0, 0, g.side_frame, g.canvas_height, FRAME_COLOR)
            canvas.fill_rect(g.canvas_width - g.side_frame, 0, g.side_frame, g.canvas_height, FRAME_COLOR)

    def _fill_body(self, canvas: Canvas, g: LockerGeometry, config: LayoutConfig) -> None:
        # 칸 구분은 경계선이 담당하므로 본체 전체를 한 번에 채운다
        fill = tinted_fill_color(self._assets.cell, config.color.rgb) + (255,)
        canvas.fill_rect(*g.body_box(), fill)

    def _draw_handles(
        self,
        canvas: Canvas,
        g: LockerGeometry,
        plan: TierHeightPlan,
        placement: ControlPanelPlacement | None,
        config: LayoutConfig,
    ) -> None:
        resized: dict[int, Image.Image] = {}

        def place(col: int, y: int, height: int) -> None:
            handle_h = min(HANDLE_HEIGHT, height - 2 * HANDLE_PADDING)
            if handle_h < MIN_HANDLE_HEIGHT:
                return
            if handle_h not in resized:
                resized[handle_h] = self._assets.handle.resize(
                    (HANDLE_WIDTH, handle_h), Image.Resampling.LANCZOS,
                )
            x = g.column_x(col + 1) - HANDLE_MARGIN - HANDLE_WIDTH
            canvas.paste(resized[handle_h], (x, g.offset_y + y + (height - handle_h) // 2))

        cp_index = config.control_panel_column - 1
        for col in range(config.columns):
            if placement is not None and col == cp_index:
                for cell in placement.fillers:
                    place(col, cell.y, cell.height)
            else:
                for y, height in plan.spans():
                    place(col, y, height)

    def _draw_grid(
        self,
        canvas: Canvas,
        g: LockerGeometry,
        plan: TierHeightPlan,
        placement: ControlPanelPlacement | None,
        config: LayoutConfig,
    ) -> None:
        left = g.column_x(0)
        right = g.column_x(config.columns)

        # 일반 단 경계: 제어부 열 안쪽은 건너뛴다
        segments = [(left, right)]
        if placement is not None:
            cp_left = g.column_x(config.control_panel_column - 1)
            cp_right = cp_left + g.cell_width
            segments = [(left, cp_left), (cp_right, right)]
        for boundary in plan.boundaries:
            for x0, x1 in segments:
                canvas.hline(g.offset_y + boundary, x0, x1, GRID_COLOR)

        for col in range(config.columns + 1):
            canvas.vline(g.column_x(col), g.offset_y, g.offset_y + g.body_height, GRID_COLOR)

        if placement is not None:
            for boundary in placement.boundaries():
                canvas.hline(g.offset_y + boundary, cp_left + 1, cp_right - 1, GRID_COLOR)

    def _draw_label(self, canvas: Canvas, g: LockerGeometry) -> None:
        label = render_frame_label(
            self._label_text,
            g.canvas_width,
            g.top_frame,
            font_size=self._font_size,
            color=self._label_color,
        )
        if label is not None:
            canvas.paste(label, (0, 0))

    def _draw_control_panel(
        self,
        canvas: Canvas,
        g: LockerGeometry,
        placement: ControlPanelPlacement,
        config: LayoutConfig,
    ) -> None:
        x = g.column_x(config.control_panel_column - 1)
        top = g.offset_y + placement.asset_top
        panel = self._assets.control_panel.resize(
            (CONTROL_PANEL_WIDTH, placement.asset_height), Image.Resampling.LANCZOS,
        )
        canvas.paste(panel, (x, top))
        # 이미지가 덮은 왼쪽 경계선을 다시 긋는다
        canvas.vline(x, top, top + placement.asset_height - 1, GRID_COLOR)
