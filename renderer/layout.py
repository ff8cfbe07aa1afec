"""화면 레이아웃 모듈: 캔버스 크기와 각 열·프레임의 위치를 계산한다."""

from dataclasses import dataclass

from locker.options import FrameType, LayoutConfig
from locker.tiers import TOTAL_HEIGHT

CELL_WIDTH = 150
TOP_FRAME_THICKNESS = 100
SIDE_FRAME_THICKNESS = 20

# 마지막 경계선(x = 열 수 x 칸 폭, y = H)을 그리기 위한 1픽셀
GRID_LINE = 1


@dataclass(frozen=True)
class LockerGeometry:
    """렌더 한 번에 쓰이는 픽셀 기하. 프레임 두께만큼 본체 원점이 이동한다."""

    columns: int
    cell_width: int
    body_height: int
    top_frame: int
    side_frame: int

    @property
    def locker_width(self) -> int:
        return self.columns * self.cell_width

    @property
    def offset_x(self) -> int:
        return self.side_frame

    @property
    def offset_y(self) -> int:
        return self.top_frame

    @property
    def canvas_width(self) -> int:
        return self.locker_width + GRID_LINE + 2 * self.side_frame

    @property
    def canvas_height(self) -> int:
        return self.body_height + GRID_LINE + self.top_frame

    def column_x(self, column: int) -> int:
        """0부터 시작하는 열 번호의 캔버스 x 좌표 (column == 열 수이면 오른쪽 끝)."""
        return self.offset_x + column * self.cell_width

    def body_box(self) -> tuple[int, int, int, int]:
        """경계선을 포함한 본체 영역 (x, y, width, height)."""
        return (
            self.offset_x,
            self.offset_y,
            self.locker_width + GRID_LINE,
            self.body_height + GRID_LINE,
        )


def frame_thickness(frame_type: FrameType) -> tuple[int, int]:
    """(상부, 측면) 프레임 두께. 해당 면이 없으면 0."""
    top = TOP_FRAME_THICKNESS if frame_type.has_top else 0
    side = SIDE_FRAME_THICKNESS if frame_type.has_sides else 0
    return top, side


def compute_geometry(config: LayoutConfig) -> LockerGeometry:
    top, side = frame_thickness(config.frame_type)
    return LockerGeometry(
        columns=config.columns,
        cell_width=CELL_WIDTH,
        body_height=TOTAL_HEIGHT,
        top_frame=top,
        side_frame=side,
    )
