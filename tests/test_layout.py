from locker.options import FrameType, normalize_config
from renderer.layout import (
    CELL_WIDTH,
    SIDE_FRAME_THICKNESS,
    TOP_FRAME_THICKNESS,
    compute_geometry,
    frame_thickness,
)


def _geometry(columns=5, tiers=6, frame="none"):
    return compute_geometry(normalize_config({"columns": columns, "tiers": tiers, "frameType": frame}))


def test_plain_canvas_size():
    g = _geometry()
    assert (g.canvas_width, g.canvas_height) == (5 * CELL_WIDTH + 1, 685 + 1)
    assert (g.offset_x, g.offset_y) == (0, 0)


def test_full_set_adds_both_sides_and_top():
    g = _geometry(frame="fullSet")
    assert g.canvas_width == 5 * CELL_WIDTH + 1 + 2 * SIDE_FRAME_THICKNESS
    assert g.canvas_height == 685 + 1 + TOP_FRAME_THICKNESS
    assert (g.offset_x, g.offset_y) == (SIDE_FRAME_THICKNESS, TOP_FRAME_THICKNESS)


def test_frame_thickness_per_type():
    assert frame_thickness(FrameType.NONE) == (0, 0)
    assert frame_thickness(FrameType.TOP_ONLY) == (TOP_FRAME_THICKNESS, 0)
    assert frame_thickness(FrameType.SIDE_ONLY) == (0, SIDE_FRAME_THICKNESS)
    assert frame_thickness(FrameType.TOP_AND_SIDE) == (TOP_FRAME_THICKNESS, SIDE_FRAME_THICKNESS)


def test_width_monotonic_in_columns_and_side_frames():
    widths = [_geometry(columns=c).canvas_width for c in range(1, 21)]
    assert widths == sorted(widths) and len(set(widths)) == 20
    assert _geometry(frame="sideOnly").canvas_width > _geometry().canvas_width


def test_height_depends_on_top_frame_only():
    base = _geometry().canvas_height
    assert _geometry(tiers=1).canvas_height == _geometry(tiers=10).canvas_height == base
    assert _geometry(columns=20).canvas_height == base
    assert _geometry(frame="sideOnly").canvas_height == base
    assert _geometry(frame="topOnly").canvas_height > base


def test_body_box_stays_clear_of_frames():
    g = _geometry(frame="fullSet")
    x, y, w, h = g.body_box()
    assert x >= g.side_frame
    assert x + w <= g.canvas_width - g.side_frame
    assert y >= g.top_frame
    assert y + h == g.canvas_height
    assert g.column_x(5) == x + w - 1
