"""색상 입히기 모듈: 회색조 템플릿을 목표 색으로 다시 칠한다.

단순 오버레이가 아니라 휘도 비례 재채색이므로 원본의 음영과 하이라이트가
어떤 색에서도 유지된다.
"""

from PIL import Image, ImageStat


def _channel_table(target: int) -> list[int]:
    """휘도 0..255 → target * L / 255 (반올림) 조회표."""
    return [(target * lum + 127) // 255 for lum in range(256)]


def tint(template: Image.Image, color: tuple[int, int, int]) -> Image.Image:
    """템플릿을 휘도 기준으로 color에 맞춰 칠한 새 RGBA 이미지를 반환한다.

    템플릿은 여러 렌더에서 재사용되므로 절대 제자리에서 수정하지 않는다.
    이미 칠한 결과를 다시 칠하는 것은 지원하지 않는다.
    """
    rgba = template.convert("RGBA")
    luminance = rgba.convert("L")
    r, g, b = (luminance.point(_channel_table(c)) for c in color)
    return Image.merge("RGBA", (r, g, b, rgba.getchannel("A")))


def tinted_fill_color(template: Image.Image, color: tuple[int, int, int]) -> tuple[int, int, int]:
    """칠한 템플릿의 평균 색. 본체 단색 채우기에 사용한다."""
    tinted = tint(template, color).convert("RGB")
    mean = ImageStat.Stat(tinted).mean
    return tuple(int(v + 0.5) for v in mean)
