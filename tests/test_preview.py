import base64
from io import BytesIO

import pytest
from PIL import Image

import preview
from locker.errors import EncodingFailure, InvalidConfig, RenderFailed
from locker.options import normalize_config
from renderer.canvas import encode_image

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


def _open(data: bytes) -> Image.Image:
    return Image.open(BytesIO(data))


def test_render_returns_png(engine):
    data = preview.render_locker_grid(5, 6)
    assert data.startswith(PNG_SIGNATURE)
    assert _open(data).size == (751, 686)


def test_render_accepts_request_style_options(engine):
    data = preview.render_locker_grid(
        5, 8, controlPanelColumn=2, controlPanelTierSpan=4, frameType="fullSet", handle=True,
    )
    assert _open(data).size == (791, 786)


def test_base64_is_pure_encoding(engine):
    raw = preview.render_locker_grid(3, 4, color="navy")
    encoded = preview.render_locker_grid_base64(3, 4, color="navy")
    assert base64.b64decode(encoded) == raw


def test_preview_payload(engine):
    body = preview.preview_payload({"columns": 2, "tiers": 3, "frameType": "topOnly"})
    assert body["mimeType"] == "image/png"
    assert _open(base64.b64decode(body["image"])).size == (301, 786)


def test_invalid_config_raised_before_rendering(engine):
    with pytest.raises(InvalidConfig) as exc_info:
        preview.render_locker_grid(0, 12, frameType="bogus")
    assert set(exc_info.value.fields) == {"columns", "tiers", "frameType"}


def test_missing_asset_directory_degrades_to_fallback(tmp_path):
    compositor = preview.init_engine(asset_dir=tmp_path / "nowhere")
    data = preview.render_config(normalize_config({"columns": 4, "tiers": 5, "frameType": "fullSet"}), compositor)
    assert _open(data).size == (601, 686)


def test_composition_error_surfaces_as_render_failed():
    class Broken:
        def compose(self, config):
            raise OSError("image file is truncated")

    with pytest.raises(RenderFailed):
        preview.render_config(normalize_config({"columns": 1, "tiers": 1}), Broken())


def test_encoding_failure_propagates():
    with pytest.raises(EncodingFailure):
        encode_image(Image.new("RGB", (2, 2)), "NOT-A-FORMAT")
    assert issubclass(EncodingFailure, RenderFailed)
