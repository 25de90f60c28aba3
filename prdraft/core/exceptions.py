from enum import Enum

from fastapi import Request
from fastapi.responses import JSONResponse

from prdraft.core.config import settings


class ErrorCode(str, Enum):
    """에러 코드 열거형"""

    MISSING_BRANCH = "MISSING_BRANCH"
    NO_DIFF = "NO_DIFF"
    GIT_ERROR = "GIT_ERROR"
    BACKEND_CONFIG_ERROR = "BACKEND_CONFIG_ERROR"
    BACKEND_ERROR = "BACKEND_ERROR"
    UNKNOWN_FAILURE = "UNKNOWN_FAILURE"
    BUFFER_NOT_FOUND = "BUFFER_NOT_FOUND"
    RATIONALE_SESSION_NOT_FOUND = "RATIONALE_SESSION_NOT_FOUND"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class CustomException(Exception):
    def __init__(
        self,
        status_code: int,
        error_code: ErrorCode | str,
        message: str,
        detail: str | None = None,
    ):
        self.status_code = status_code
        self.error_code = error_code
        self.message = message
        self.detail = detail
        super().__init__(message)


class MissingBranchError(CustomException):
    def __init__(self, source: str | None, target: str | None):
        self.source = source
        self.target = target
        missing = [
            name for name, value in (("source", source), ("target", target)) if not value
        ]
        super().__init__(
            status_code=400,
            error_code=ErrorCode.MISSING_BRANCH,
            message="소스 브랜치와 타겟 브랜치가 모두 필요합니다",
            detail=f"누락: {', '.join(missing)}",
        )


class NoDiffError(CustomException):
    def __init__(self, source: str, target: str):
        self.source = source
        self.target = target
        super().__init__(
            status_code=422,
            error_code=ErrorCode.NO_DIFF,
            message=f"{target}...{source} 사이에 변경 사항이 없습니다",
        )


class GitError(CustomException):
    def __init__(self, detail: str | None = None):
        super().__init__(
            status_code=502,
            error_code=ErrorCode.GIT_ERROR,
            message="git diff 실행에 실패했습니다",
            detail=detail,
        )


class BackendConfigError(CustomException):
    def __init__(self, detail: str | None = None):
        super().__init__(
            status_code=500,
            error_code=ErrorCode.BACKEND_CONFIG_ERROR,
            message="모델 백엔드를 결정할 수 없습니다",
            detail=detail,
        )


class BackendError(CustomException):
    def __init__(self, message: str):
        self.backend_message = message
        super().__init__(
            status_code=502,
            error_code=ErrorCode.BACKEND_ERROR,
            message="모델 백엔드가 오류를 반환했습니다",
            detail=message,
        )


class UnknownFailure(CustomException):
    def __init__(self, status: str | None = None):
        self.status = status
        super().__init__(
            status_code=502,
            error_code=ErrorCode.UNKNOWN_FAILURE,
            message="모델 백엔드가 응답 없이 종료되었습니다",
            detail=f"status={status or 'unknown'}",
        )


class BufferNotFoundError(CustomException):
    def __init__(self, buffer_id: str):
        super().__init__(
            status_code=404,
            error_code=ErrorCode.BUFFER_NOT_FOUND,
            message=f"버퍼를 찾을 수 없습니다: {buffer_id}",
        )


class RationaleSessionNotFoundError(CustomException):
    def __init__(self):
        super().__init__(
            status_code=404,
            error_code=ErrorCode.RATIONALE_SESSION_NOT_FOUND,
            message="진행 중인 변경 이유 입력 세션이 없습니다",
        )


def register_exception_handlers(app):
    @app.exception_handler(CustomException)
    async def custom_exception_handler(request: Request, exc: CustomException):
        content = {
            "error_code": exc.error_code,
            "message": exc.message,
        }
        if exc.detail and not settings.is_production:
            content["detail"] = exc.detail

        return JSONResponse(
            status_code=exc.status_code,
            content=content,
        )
