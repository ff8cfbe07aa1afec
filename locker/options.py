"""요청 옵션 정규화 모듈: 부분적인 요청 필드를 LayoutConfig로 확정한다.

문자열로 들어오는 frameType / tierHeightMode / color는 여기서 한 번만
열거형·값 객체로 해석되고, 이후 단계는 다시 파싱하지 않는다.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Annotated, Any, Mapping

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    ValidationError as PydanticValidationError,
    field_validator,
)

from .colors import DEFAULT_CUSTOM_COLOR, LockerColor, parse_hex, resolve_color
from .errors import FieldError, InvalidConfig

MIN_COLUMNS, MAX_COLUMNS = 1, 20
MIN_TIERS, MAX_TIERS = 1, 10
DEFAULT_TIER_SPAN = 4
MIN_RATIO, MAX_RATIO = 0.5, 10.0


class FrameType(str, Enum):
    """프레임 구성."""

    NONE = "none"
    FULL_SET = "fullSet"
    TOP_ONLY = "topOnly"
    SIDE_ONLY = "sideOnly"
    TOP_AND_SIDE = "topAndSide"

    @property
    def has_top(self) -> bool:
        return self in (FrameType.FULL_SET, FrameType.TOP_ONLY, FrameType.TOP_AND_SIDE)

    @property
    def has_sides(self) -> bool:
        return self in (FrameType.FULL_SET, FrameType.SIDE_ONLY, FrameType.TOP_AND_SIDE)


class TierHeightMode(str, Enum):
    """단 높이 비율 모드."""

    UNIFORM = "uniform"
    TOP_LARGE = "topLarge"
    BOTTOM_LARGE = "bottomLarge"
    BOTH_LARGE = "bothLarge"
    CUSTOM = "custom"


@dataclass(frozen=True)
class LayoutConfig:
    """정규화가 끝난 레이아웃 설정. 렌더 요청마다 새로 만든다."""

    columns: int
    tiers: int
    tier_height_mode: TierHeightMode = TierHeightMode.UNIFORM
    custom_ratios: tuple[float, ...] = ()
    control_panel_column: int = 0
    control_panel_tier_span: int = DEFAULT_TIER_SPAN
    frame_type: FrameType = FrameType.NONE
    color: LockerColor = LockerColor((128, 128, 128), "gray")
    handle: bool = False

    @property
    def has_control_panel(self) -> bool:
        return self.control_panel_column > 0


# 공개 필드명(camelCase)과 허용 별칭
_ALIASES: dict[str, tuple[str, ...]] = {
    "columns": ("columns",),
    "tiers": ("tiers",),
    "controlPanelColumn": ("controlPanelColumn", "control_panel_column"),
    "controlPanelTierSpan": (
        "controlPanelTierSpan", "control_panel_tier_span",
        "controlPanelTiers", "control_panel_tiers",
    ),
    "frameType": ("frameType", "frame_type"),
    "color": ("color", "lockerColor"),
    "customColor": ("customColor", "custom_color"),
    "handle": ("handle",),
    "tierHeightMode": ("tierHeightMode", "tier_height_mode"),
    "tierRatios": ("tierRatios", "tier_ratios", "ratios"),
}

_PUBLIC_NAME = {alias: public for public, aliases in _ALIASES.items() for alias in aliases}


def _alias(public: str) -> AliasChoices:
    return AliasChoices(*_ALIASES[public])


Ratio = Annotated[float, Field(ge=MIN_RATIO, le=MAX_RATIO)]


class LayoutRequest(BaseModel):
    """미리보기 요청 본문의 필드 단위 스키마."""

    model_config = ConfigDict(extra="ignore")

    columns: int = Field(ge=MIN_COLUMNS, le=MAX_COLUMNS, validation_alias=_alias("columns"))
    tiers: int = Field(ge=MIN_TIERS, le=MAX_TIERS, validation_alias=_alias("tiers"))
    control_panel_column: int = Field(
        default=0, ge=0, le=MAX_COLUMNS, validation_alias=_alias("controlPanelColumn"),
    )
    control_panel_tier_span: int = Field(
        default=DEFAULT_TIER_SPAN, ge=1, le=MAX_TIERS,
        validation_alias=_alias("controlPanelTierSpan"),
    )
    frame_type: FrameType = Field(default=FrameType.NONE, validation_alias=_alias("frameType"))
    color: str | None = Field(default=None, validation_alias=_alias("color"))
    custom_color: str = Field(default=DEFAULT_CUSTOM_COLOR, validation_alias=_alias("customColor"))
    handle: bool = Field(default=False, validation_alias=_alias("handle"))
    tier_height_mode: TierHeightMode | None = Field(
        default=None, validation_alias=_alias("tierHeightMode"),
    )
    tier_ratios: list[Ratio] | None = Field(default=None, validation_alias=_alias("tierRatios"))

    @field_validator("custom_color")
    @classmethod
    def _check_custom_color(cls, v: str) -> str:
        parse_hex(v)
        return v

    @field_validator("color")
    @classmethod
    def _check_color(cls, v: str | None) -> str | None:
        # custom은 customColor 쪽에서 검증한다
        if v is not None and v.strip().lower() != "custom":
            resolve_color(v)
        return v


def _format_loc(loc: tuple[str | int, ...]) -> str:
    """pydantic 오류 위치를 'tierRatios[2]' 형태의 경로로 바꾼다."""
    parts: list[str] = []
    for segment in loc:
        if isinstance(segment, int):
            if parts:
                parts[-1] = f"{parts[-1]}[{segment}]"
            else:
                parts.append(f"[{segment}]")
        else:
            parts.append(_PUBLIC_NAME.get(segment, segment) if not parts else segment)
    return ".".join(parts)


def _field_errors(error: PydanticValidationError) -> list[FieldError]:
    details = []
    for err in error.errors():
        message = err["msg"]
        # "Value error, ..." 접두어는 사용자에게 의미가 없다
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        value = err.get("input")
        if err["type"] == "missing":
            value = None
        details.append(FieldError(_format_loc(err["loc"]), message, value))
    return details


def _raw_value(data: Mapping[str, Any], public: str) -> Any:
    for alias in _ALIASES[public]:
        if alias in data:
            return data[alias]
    return None


def _cross_field_errors(data: Mapping[str, Any], failed: set[str]) -> list[FieldError]:
    """필드 간 제약. 개별 검증을 통과한 필드끼리만 비교한다."""
    if {"columns", "controlPanelColumn"} & failed:
        return []
    columns = _raw_value(data, "columns")
    column = _raw_value(data, "controlPanelColumn")
    try:
        columns, column = int(columns), int(column or 0)
    except (TypeError, ValueError):
        return []
    if column > columns:
        return [FieldError(
            "controlPanelColumn",
            f"control panel column must be between 1 and columns ({columns}) or 0 for none",
            column,
        )]
    return []


def clamp_tier_span(span: int, tiers: int) -> int:
    """제어부 칸 수를 [1, tiers-2] 범위로 맞춘다 (단 수가 적으면 1)."""
    return max(1, min(span, tiers - 2))


def reconcile_ratios(ratios: list[float] | tuple[float, ...] | None, tiers: int) -> tuple[float, ...]:
    """단 수에 맞춰 비율 목록을 보정한다. 기존 값은 유지, 새 단은 1로 채운다."""
    kept = [float(r) for r in (ratios or ())][:tiers]
    return tuple(kept + [1.0] * (tiers - len(kept)))


def normalize_config(raw: Mapping[str, Any] | None = None, **overrides: Any) -> LayoutConfig:
    """요청 필드를 검증하고 기본값을 채워 LayoutConfig를 만든다.

    None 값은 '지정 안 함'으로 취급한다.

    Raises:
        InvalidConfig: 위반된 모든 필드 목록과 함께
    """
    data = {k: v for k, v in {**(raw or {}), **overrides}.items() if v is not None}

    errors: list[FieldError] = []
    request: LayoutRequest | None = None
    try:
        request = LayoutRequest.model_validate(data)
    except PydanticValidationError as e:
        errors.extend(_field_errors(e))

    failed = {err.path.split("[")[0].split(".")[0] for err in errors}
    errors.extend(_cross_field_errors(data, failed))
    if errors:
        raise InvalidConfig(errors)

    mode = request.tier_height_mode
    if mode is None:
        mode = TierHeightMode.CUSTOM if request.tier_ratios else TierHeightMode.UNIFORM
    ratios = reconcile_ratios(request.tier_ratios, request.tiers) if mode is TierHeightMode.CUSTOM else ()

    return LayoutConfig(
        columns=request.columns,
        tiers=request.tiers,
        tier_height_mode=mode,
        custom_ratios=ratios,
        control_panel_column=request.control_panel_column,
        control_panel_tier_span=clamp_tier_span(request.control_panel_tier_span, request.tiers),
        frame_type=request.frame_type,
        color=resolve_color(request.color, request.custom_color),
        handle=request.handle,
    )
