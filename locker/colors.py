"""함 색상 팔레트 모듈: 이름 색상과 사용자 지정 HEX 색상을 RGB로 변환한다."""

from __future__ import annotations

import re
from dataclasses import dataclass

DEFAULT_COLOR = "gray"
DEFAULT_CUSTOM_COLOR = "#808080"

# 상담에서 주로 쓰이는 도장 색상
NAMED_COLORS: dict[str, tuple[int, int, int]] = {
    "white": (245, 245, 242),
    "ivory": (236, 230, 210),
    "beige": (214, 196, 164),
    "lightGray": (200, 202, 204),
    "gray": (128, 128, 128),
    "silver": (176, 180, 186),
    "charcoal": (70, 72, 76),
    "black": (40, 40, 40),
    "navy": (38, 56, 98),
    "blue": (52, 104, 176),
    "skyBlue": (120, 176, 220),
    "green": (64, 128, 84),
    "mint": (150, 208, 186),
    "yellow": (236, 196, 64),
    "orange": (228, 120, 48),
    "red": (188, 52, 48),
    "pink": (232, 156, 172),
    "wood": (164, 120, 80),
}

# 이름 비교는 대소문자·구분자를 무시한다 ("light-gray" == "lightGray")
_NAME_INDEX = {re.sub(r"[\s_-]", "", k).lower(): k for k in NAMED_COLORS}

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


@dataclass(frozen=True)
class LockerColor:
    """정규화된 함 색상. name이 None이면 사용자 지정 HEX 색상."""

    rgb: tuple[int, int, int]
    name: str | None = None

    @property
    def hex(self) -> str:
        return "#{:02x}{:02x}{:02x}".format(*self.rgb)

    @property
    def is_custom(self) -> bool:
        return self.name is None


def lookup_named(name: str) -> str | None:
    """팔레트 이름을 정식 키로 바꾼다. 없으면 None."""
    return _NAME_INDEX.get(re.sub(r"[\s_-]", "", name).lower())


def parse_hex(value: str) -> tuple[int, int, int]:
    """'#rrggbb' 또는 '#rgb' 문자열을 RGB 튜플로 변환한다.

    Raises:
        ValueError: 형식이 올바르지 않을 때
    """
    match = _HEX_RE.match(value.strip())
    if not match:
        raise ValueError(f"not a hex color: {value!r}")
    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return tuple(int(digits[i:i + 2], 16) for i in (0, 2, 4))


def resolve_color(color: str | None, custom_color: str | None = None) -> LockerColor:
    """요청의 color/customColor 쌍을 LockerColor로 해석한다.

    - None → 기본 이름 색상
    - "custom" → customColor (기본 #808080)
    - 팔레트 이름 → 해당 RGB
    - HEX 문자열 → 사용자 지정 색상

    Raises:
        ValueError: 알 수 없는 이름이거나 HEX 형식 오류
    """
    if color is None or color == "":
        return LockerColor(NAMED_COLORS[DEFAULT_COLOR], DEFAULT_COLOR)
    if color.strip().lower() == "custom":
        return LockerColor(parse_hex(custom_color or DEFAULT_CUSTOM_COLOR))
    key = lookup_named(color)
    if key is not None:
        return LockerColor(NAMED_COLORS[key], key)
    if _HEX_RE.match(color.strip()):
        return LockerColor(parse_hex(color))
    raise ValueError(
        f"unknown color {color!r}; use one of {', '.join(NAMED_COLORS)}, "
        "a hex value or 'custom'"
    )
