"""미리보기 엔진 예외 모듈."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


class LockerPreviewError(Exception):
    """미리보기 엔진의 모든 예외의 기반 클래스."""


@dataclass(frozen=True)
class FieldError:
    """필드 단위 검증 오류.

    Attributes:
        path: 요청 필드 경로 (예: "columns", "tierRatios[2]")
        message: 사람이 읽을 수 있는 오류 설명
        value: 문제가 된 입력값
    """

    path: str
    message: str
    value: Any = None

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.path}: {self.message} (got: {self.value!r})"
        return f"{self.path}: {self.message}"


class InvalidConfig(LockerPreviewError, ValueError):
    """설정 검증 실패. 첫 번째 오류만이 아니라 모든 위반 필드를 담는다."""

    def __init__(self, errors: list[FieldError]):
        self.errors = list(errors)
        super().__init__(self._format())

    def _format(self) -> str:
        lines = ["Layout configuration is invalid:"]
        lines.extend(f"  - {err}" for err in self.errors)
        return "\n".join(lines)

    @property
    def fields(self) -> list[str]:
        return [err.path for err in self.errors]

    def to_dict(self) -> dict:
        """HTTP 계층에 넘길 구조화된 오류 본문."""
        return {
            "error": "invalid_config",
            "details": [
                {"path": e.path, "message": e.message, "value": e.value}
                for e in self.errors
            ],
        }


class AssetLoadFailure(LockerPreviewError):
    """템플릿 이미지를 읽지 못했다. 렌더러는 대체 그리드로 복구한다."""

    def __init__(self, name: str, path, reason: str):
        self.name = name
        self.path = path
        self.reason = reason
        super().__init__(f"{name} asset could not be loaded from {path}: {reason}")


class TextRenderFailure(LockerPreviewError):
    """프레임 문구의 글꼴/글리프 측정 실패. 문구 레이어만 생략된다."""


class RenderFailed(LockerPreviewError):
    """렌더링 실패 (호출자에게 노출되는 일반 오류)."""


class EncodingFailure(RenderFailed):
    """최종 버퍼를 출력 포맷으로 직렬화하지 못했다."""
