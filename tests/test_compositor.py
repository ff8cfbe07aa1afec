import pytest

from locker.assets import AssetStore
from locker.options import normalize_config
from renderer.fallback import FALLBACK_CELL
from renderer.layers import LockerCompositor
from renderer.tint import tinted_fill_color

BLACK = (0, 0, 0)


def _config(**raw):
    return normalize_config(raw)


def _fill(assets, config):
    return tinted_fill_color(assets.cell, config.color.rgb)


def test_plain_grid_size(compositor):
    image = compositor.compose(_config(columns=5, tiers=6))
    assert image.size == (751, 686)
    assert image.mode == "RGB"


def test_body_flood_filled_and_lines_drawn(compositor, assets):
    config = _config(columns=3, tiers=5)
    image = compositor.compose(config)
    fill = _fill(assets, config)
    assert image.getpixel((75, 60)) == fill
    assert image.getpixel((75, 137)) == BLACK      # 단 경계
    assert image.getpixel((150, 60)) == BLACK      # 열 경계
    assert image.getpixel((450, 685)) == BLACK     # 마지막 경계선


def test_full_set_frame_bands(compositor, assets):
    config = _config(columns=5, tiers=6, frameType="fullSet")
    image = compositor.compose(config)
    width, height = image.size
    assert (width, height) == (791, 786)
    assert image.getpixel((2, 2)) == BLACK
    assert image.getpixel((5, 400)) == BLACK
    assert image.getpixel((width - 5, 400)) == BLACK
    # 본체 칸은 프레임 띠 바깥에서 시작한다
    assert image.getpixel((20 + 75, 100 + 50)) == _fill(assets, config)
    assert image.getpixel((19, 150)) == BLACK
    assert image.getpixel((width - 20, 150)) == BLACK


def test_control_panel_column_uses_its_own_boundaries(compositor, assets):
    config = _config(columns=5, tiers=8, controlPanelColumn=2, controlPanelTierSpan=4)
    image = compositor.compose(config)
    fill = _fill(assets, config)

    # 일반 열: 8단 경계 (86, 171, 257, 343, 428, 514, 599)
    assert image.getpixel((75, 86)) == BLACK
    assert image.getpixel((75, 428)) == BLACK
    assert image.getpixel((75, 434)) == fill

    # 제어부 열: 위 1칸, 아래 3칸 (308, 434, 559)
    assert image.getpixel((225, 86)) == fill
    assert image.getpixel((225, 428)) == fill
    for row in (308, 434, 559):
        assert image.getpixel((225, row)) == BLACK

    black_rows = [
        y for y in range(686)
        if (y < 100 or y >= 308) and image.getpixel((225, y)) == BLACK
    ]
    assert black_rows == [0, 308, 434, 559, 685]


def test_control_panel_asset_drawn_last(compositor):
    config = _config(columns=3, tiers=6, controlPanelColumn=2)
    image = compositor.compose(config)
    r, g, b = image.getpixel((225, 110))
    assert abs(r - 60) <= 2 and abs(g - 60) <= 2 and abs(b - 60) <= 2
    # 제어부 이미지 위로 다시 그은 왼쪽 경계선
    assert image.getpixel((150, 200)) == BLACK


def test_control_panel_with_frames_is_offset(compositor):
    config = _config(columns=3, tiers=6, controlPanelColumn=1, frameType="topAndSide")
    image = compositor.compose(config)
    assert image.getpixel((20, 100 + 200)) == BLACK
    r, _, _ = image.getpixel((20 + 75, 100 + 110))
    assert abs(r - 60) <= 2


def test_handles_centered_in_cells(compositor, assets):
    config = _config(columns=1, tiers=5, handle=True)
    fill = _fill(assets, config)
    with_handle = compositor.compose(config)
    without = compositor.compose(_config(columns=1, tiers=5))
    # 137px 칸, 44px 손잡이 → y 46..89, x 126..137
    assert with_handle.getpixel((131, 68)) != fill
    assert without.getpixel((131, 68)) == fill
    assert with_handle.getpixel((131, 20)) == fill


def test_handles_follow_filler_cells_in_control_panel_column(compositor, assets):
    config = _config(columns=2, tiers=8, controlPanelColumn=2, handle=True)
    image = compositor.compose(config)
    fill = _fill(assets, config)
    # 위쪽 채움 칸 0..100 → 손잡이 y 28..71, x 276..287
    assert image.getpixel((281, 50)) != fill
    # y=68은 위쪽 채움 칸 손잡이 안, 일반 8단 첫 칸 손잡이(y 21..64) 밖
    assert image.getpixel((281, 68)) != fill
    assert image.getpixel((131, 68)) == fill


def test_color_changes_body(compositor):
    red = compositor.compose(_config(columns=1, tiers=1, color="red"))
    blue = compositor.compose(_config(columns=1, tiers=1, color="blue"))
    assert red.getpixel((75, 300)) != blue.getpixel((75, 300))


def test_render_is_deterministic_and_templates_untouched(compositor, assets):
    before = assets.cell.tobytes(), assets.handle.tobytes(), assets.control_panel.tobytes()
    config = _config(columns=4, tiers=7, controlPanelColumn=3, handle=True, frameType="fullSet")
    first = compositor.compose(config)
    second = compositor.compose(config)
    assert first.tobytes() == second.tobytes()
    assert (assets.cell.tobytes(), assets.handle.tobytes(), assets.control_panel.tobytes()) == before


def test_label_failure_keeps_frame_band(compositor, monkeypatch):
    import renderer.text

    def broken(size):
        raise OSError("cannot open resource")

    monkeypatch.setattr(renderer.text, "_get_font", broken)
    image = compositor.compose(_config(columns=3, tiers=4, frameType="topOnly"))
    assert image.size == (451, 786)
    assert image.getpixel((225, 50)) == BLACK


def test_missing_cell_template_falls_back(asset_dir, tmp_path):
    store = AssetStore.load({
        "cell": tmp_path / "missing.png",
        "handle": asset_dir / "handle.png",
        "control_panel": asset_dir / "control-panel.png",
    })
    assert not store.complete
    assert store.missing() == ["cell"]
    image = LockerCompositor(store).compose(_config(columns=5, tiers=6, frameType="fullSet"))
    assert image.size == (751, 686)
    assert image.getpixel((75, 50)) == FALLBACK_CELL[:3]


def test_missing_optional_asset_only_matters_when_used(asset_dir, tmp_path):
    store = AssetStore.load({
        "cell": asset_dir / "locker-cell.png",
        "handle": tmp_path / "missing.png",
        "control_panel": asset_dir / "control-panel.png",
    })
    compositor = LockerCompositor(store)
    plain = compositor.compose(_config(columns=2, tiers=3))
    assert plain.getpixel((75, 50)) != FALLBACK_CELL[:3]
    fallback = compositor.compose(_config(columns=2, tiers=3, handle=True))
    assert fallback.getpixel((75, 50)) == FALLBACK_CELL[:3]


def test_unreadable_template_is_a_load_failure(tmp_path):
    bad = tmp_path / "locker-cell.png"
    bad.write_bytes(b"not a png")
    store = AssetStore.load({"cell": bad, "handle": bad, "control_panel": bad})
    assert store.cell is None
    assert len(store.failures) == 3


@pytest.mark.parametrize("span", [1, 2, 6])
def test_any_span_renders(compositor, span):
    image = compositor.compose(_config(columns=2, tiers=8, controlPanelColumn=1, controlPanelTierSpan=span))
    assert image.size == (301, 686)
