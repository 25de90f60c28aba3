from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field

from prdraft.core.config import BackendConfig, GenerationOptions
from prdraft.core.exceptions import BackendError, UnknownFailure

__all__ = [
    "BackendConfig",
    "GenerationOptions",
    "GenerationRequest",
    "BackendResponse",
    "SuccessOutcome",
    "BackendErrorOutcome",
    "UnknownFailureOutcome",
    "GenerationOutcome",
]


class GenerationRequest(BaseModel):
    """PR 설명 생성 요청"""

    source_branch: str | None = None
    target_branch: str | None = None
    rationale: str | None = None
    template: str | None = None


class BackendResponse(BaseModel):
    """모델 백엔드 호출 결과

    text, error, status 중 의미 있는 값은 하나만 채워진다.
    """

    text: str | None = None
    error: dict[str, Any] | str | None = None
    status: str | None = None


class SuccessOutcome(BaseModel):
    """생성 성공"""

    kind: Literal["success"] = "success"
    text: str

    @property
    def ok(self) -> bool:
        return True


class BackendErrorOutcome(BaseModel):
    """백엔드가 구조화된 오류를 반환"""

    kind: Literal["backend_error"] = "backend_error"
    message: str

    @property
    def ok(self) -> bool:
        return False

    def to_exception(self) -> BackendError:
        return BackendError(self.message)


class UnknownFailureOutcome(BaseModel):
    """응답도 구조화된 오류도 없는 실패"""

    kind: Literal["unknown_failure"] = "unknown_failure"
    status: str | None = None

    @property
    def ok(self) -> bool:
        return False

    def to_exception(self) -> UnknownFailure:
        return UnknownFailure(self.status)


GenerationOutcome = Annotated[
    SuccessOutcome | BackendErrorOutcome | UnknownFailureOutcome,
    Field(discriminator="kind"),
]
