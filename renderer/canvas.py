"""Pillow 캔버스 관리 모듈."""

from io import BytesIO

from PIL import Image, ImageDraw

from locker.errors import EncodingFailure

WHITE = (255, 255, 255, 255)
BLACK = (0, 0, 0, 255)


class Canvas:
    """렌더 호출 하나가 소유하는 RGBA 캔버스.

    렌더마다 새로 만들고 다른 호출과 공유하지 않는다.
    """

    def __init__(self, width: int, height: int, color: tuple = WHITE):
        if width <= 0 or height <= 0:
            raise ValueError(f"invalid canvas size {width}x{height}")
        self._image = Image.new("RGBA", (width, height), color)
        self._draw = ImageDraw.Draw(self._image)

    @property
    def image(self) -> Image.Image:
        return self._image

    @property
    def size(self) -> tuple[int, int]:
        return self._image.size

    def fill_rect(self, x: int, y: int, width: int, height: int, color: tuple) -> None:
        """(x, y)부터 width x height 영역을 단색으로 채운다."""
        if width <= 0 or height <= 0:
            return
        self._draw.rectangle((x, y, x + width - 1, y + height - 1), fill=color)

    def hline(self, y: int, x0: int, x1: int, color: tuple = BLACK) -> None:
        """x0..x1 (양끝 포함) 1픽셀 가로선."""
        if x1 < x0:
            return
        self._draw.line((x0, y, x1, y), fill=color, width=1)

    def vline(self, x: int, y0: int, y1: int, color: tuple = BLACK) -> None:
        """y0..y1 (양끝 포함) 1픽셀 세로선."""
        if y1 < y0:
            return
        self._draw.line((x, y0, x, y1), fill=color, width=1)

    def paste(self, layer: Image.Image, position: tuple = (0, 0)) -> None:
        """레이어를 캔버스 위에 합성한다 (알파 블렌딩)."""
        if layer.mode != "RGBA":
            layer = layer.convert("RGBA")
        self._image.alpha_composite(layer, dest=position)

    def to_rgb(self) -> Image.Image:
        """RGB 모드로 변환하여 반환한다."""
        return self._image.convert("RGB")

    def encode(self, fmt: str = "PNG") -> bytes:
        """캔버스를 이미지 바이트로 직렬화한다.

        Raises:
            EncodingFailure: 직렬화 실패 시
        """
        return encode_image(self.to_rgb(), fmt)


def encode_image(image: Image.Image, fmt: str = "PNG") -> bytes:
    buf = BytesIO()
    try:
        image.save(buf, format=fmt)
    except (OSError, ValueError, KeyError) as e:
        raise EncodingFailure(f"could not encode preview as {fmt}: {e}") from e
    return buf.getvalue()
