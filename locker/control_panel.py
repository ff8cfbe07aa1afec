"""제어부 배치 모듈: 고정 위치 제어부 이미지 위·아래의 채움 칸을 계산한다.

제어부는 그리드에 맞춰 늘어나지 않는다. 그리드가 제어부 주위로 맞춰진다.
"""

from __future__ import annotations

from dataclasses import dataclass

from .tiers import TOTAL_HEIGHT, split_span

# 제어부 이미지: 칸 폭과 같은 150px, 원본 비율 유지한 208px, 상단에서 100px
CONTROL_PANEL_TOP = 100
CONTROL_PANEL_HEIGHT = 208

# 이보다 낮은 여백은 칸으로 나누지 않고 제어부 영역으로 흡수한다
MIN_REGION_HEIGHT = 24


@dataclass(frozen=True)
class FillerCell:
    """제어부 열에 합성되는 채움 칸 (열 상단 기준 y)."""

    y: int
    height: int

    @property
    def bottom(self) -> int:
        return self.y + self.height


@dataclass(frozen=True)
class ControlPanelPlacement:
    asset_top: int
    asset_height: int
    filler_above: tuple[FillerCell, ...]
    filler_below: tuple[FillerCell, ...]
    total_height: int = TOTAL_HEIGHT

    @property
    def asset_bottom(self) -> int:
        return self.asset_top + self.asset_height

    @property
    def fillers(self) -> tuple[FillerCell, ...]:
        return self.filler_above + self.filler_below

    def boundaries(self) -> list[int]:
        """제어부 열 안에서 가로선을 그을 y 좌표 (중복 제거, 오름차순)."""
        rows = {0, self.total_height, self.asset_top, self.asset_bottom}
        for cell in self.fillers:
            rows.add(cell.y)
            rows.add(cell.bottom)
        return sorted(rows)


def _subdivide(start: int, length: int, count: int, min_region: int) -> tuple[FillerCell, ...]:
    if count <= 0 or length < min_region:
        return ()
    bounds = split_span(start, length, [1.0] * count)
    return tuple(FillerCell(a, b - a) for a, b in zip(bounds, bounds[1:]))


def plan_control_panel(
    tier_span: int,
    total_height: int = TOTAL_HEIGHT,
    asset_top: int = CONTROL_PANEL_TOP,
    asset_height: int = CONTROL_PANEL_HEIGHT,
    min_region_height: int = MIN_REGION_HEIGHT,
) -> ControlPanelPlacement:
    """제어부 위에는 항상 1칸, 아래에는 tier_span - 1 칸을 균등 분할한다.

    tier_span은 위쪽 1칸과 아래쪽 칸을 합친 개수다. 아래쪽 칸이 0이면 그 영역은
    배경으로 남는다. 개별 칸 높이에는 최소 높이 제한을 두지 않는다.
    """
    below_top = asset_top + asset_height
    if below_top > total_height:
        raise ValueError("control panel asset does not fit in the column")
    above = _subdivide(0, asset_top, 1, min_region_height)
    below = _subdivide(below_top, total_height - below_top, tier_span - 1, min_region_height)
    return ControlPanelPlacement(
        asset_top=asset_top,
        asset_height=asset_height,
        filler_above=above,
        filler_below=below,
        total_height=total_height,
    )
