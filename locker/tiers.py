"""단 높이 계산 모듈: 단 수와 비율 모드로 각 단의 픽셀 높이를 구한다."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from .options import TierHeightMode

# 표준 5단 기준 본체 높이 (137px x 5)
STANDARD_TIERS = 5
STANDARD_CELL_HEIGHT = 137
TOTAL_HEIGHT = STANDARD_TIERS * STANDARD_CELL_HEIGHT

LARGE_RATIO = 2.0


def round_half_up(value: float) -> int:
    """픽셀 경계 반올림 규칙 (0.5는 항상 올림)."""
    return math.floor(value + 0.5)


def split_span(start: int, length: int, weights: Sequence[float]) -> list[int]:
    """[start, start+length] 구간을 가중치 비율로 나눈 경계 좌표를 반환한다.

    경계마다 같은 반올림 규칙을 적용하고 마지막 경계는 정확히 start+length
    이므로 반올림 오차는 마지막 구간이 흡수한다.
    """
    total = float(sum(weights))
    bounds = [start]
    acc = 0.0
    for w in weights[:-1]:
        acc += w
        bounds.append(start + round_half_up(length * acc / total))
    bounds.append(start + length)
    return bounds


@dataclass(frozen=True)
class TierHeightPlan:
    """위에서 아래 순서의 단 높이 목록. 합계는 항상 total과 같다."""

    heights: tuple[int, ...]

    @property
    def total(self) -> int:
        return sum(self.heights)

    @property
    def boundaries(self) -> list[int]:
        """0부터 total까지 단 경계의 y 좌표 (len = 단 수 + 1)."""
        bounds = [0]
        for h in self.heights:
            bounds.append(bounds[-1] + h)
        return bounds

    def spans(self) -> list[tuple[int, int]]:
        """각 단의 (y, height)."""
        return list(zip(self.boundaries[:-1], self.heights))


def tier_ratios(
    tiers: int,
    mode: TierHeightMode,
    custom: Sequence[float] = (),
) -> list[float]:
    """모드에 따른 단별 상대 비율."""
    if mode is TierHeightMode.CUSTOM:
        if len(custom) != tiers:
            raise ValueError(f"expected {tiers} custom ratios, got {len(custom)}")
        return [float(r) for r in custom]

    ratios = [1.0] * tiers
    if mode in (TierHeightMode.TOP_LARGE, TierHeightMode.BOTH_LARGE):
        ratios[0] = LARGE_RATIO
    if mode in (TierHeightMode.BOTTOM_LARGE, TierHeightMode.BOTH_LARGE):
        ratios[-1] = LARGE_RATIO
    return ratios


def resolve_tier_heights(
    tiers: int,
    mode: TierHeightMode = TierHeightMode.UNIFORM,
    custom: Sequence[float] = (),
    total_height: int = TOTAL_HEIGHT,
) -> TierHeightPlan:
    """height[i] = H * ratio[i] / sum(ratios) 를 정수 픽셀로 확정한다.

    비율은 상대값이므로 단 수나 모드가 바뀌면 항상 전체를 다시 계산한다.
    """
    if tiers < 1:
        raise ValueError("tiers must be at least 1")
    ratios = tier_ratios(tiers, mode, custom)
    if any(r <= 0 for r in ratios):
        raise ValueError("tier ratios must be positive")
    bounds = split_span(0, total_height, ratios)
    heights = tuple(b - a for a, b in zip(bounds, bounds[1:]))
    return TierHeightPlan(heights)
