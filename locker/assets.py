"""템플릿 에셋 모듈: 칸·손잡이·제어부 원본 이미지를 프로세스 시작 시 한 번 로드한다.

로드된 템플릿은 읽기 전용이다. 색 입히기와 리사이즈는 항상 새 버퍼를 만든다.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from PIL import Image

from .errors import AssetLoadFailure

logger = logging.getLogger(__name__)

ASSET_NAMES = ("cell", "handle", "control_panel")

DEFAULT_FILENAMES = {
    "cell": "locker-cell.png",
    "handle": "handle.png",
    "control_panel": "control-panel.png",
}


def load_template(name: str, path: Path) -> Image.Image:
    """이미지를 읽어 파일과 분리된 RGBA 이미지로 반환한다.

    Raises:
        AssetLoadFailure: 파일이 없거나 이미지가 아닐 때
    """
    try:
        with Image.open(path) as img:
            img.load()
            return img.convert("RGBA")
    except (OSError, ValueError) as e:
        raise AssetLoadFailure(name, path, str(e)) from e


@dataclass(frozen=True)
class AssetStore:
    """불변 템플릿 묶음. 로드에 실패한 항목은 None이고 failures에 기록된다."""

    cell: Image.Image | None = None
    handle: Image.Image | None = None
    control_panel: Image.Image | None = None
    failures: tuple[AssetLoadFailure, ...] = ()

    @classmethod
    def load(cls, paths: dict[str, Path]) -> "AssetStore":
        """각 템플릿을 로드한다. 실패는 예외 대신 기록으로 남긴다."""
        loaded: dict[str, Image.Image | None] = {}
        failures = []
        for name in ASSET_NAMES:
            try:
                loaded[name] = load_template(name, Path(paths[name]))
                logger.info("에셋 로드: %s (%dx%d)", name, *loaded[name].size)
            except AssetLoadFailure as e:
                logger.warning("에셋 로드 실패: %s", e)
                loaded[name] = None
                failures.append(e)
        return cls(failures=tuple(failures), **loaded)

    @classmethod
    def from_directory(cls, directory: Path | str) -> "AssetStore":
        directory = Path(directory)
        return cls.load({name: directory / fn for name, fn in DEFAULT_FILENAMES.items()})

    @property
    def complete(self) -> bool:
        return not self.failures

    def missing(self) -> list[str]:
        return [f.name for f in self.failures]

    def available_for(self, needs_handle: bool, needs_control_panel: bool) -> bool:
        """요청에 필요한 템플릿이 모두 로드되었는지 확인한다."""
        if self.cell is None:
            return False
        if needs_handle and self.handle is None:
            return False
        if needs_control_panel and self.control_panel is None:
            return False
        return True
