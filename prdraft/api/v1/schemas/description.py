"""PR 설명 API 스키마."""

from pydantic import BaseModel, ConfigDict, Field


class BufferWriteRequest(BaseModel):
    """버퍼 내용 저장 요청."""

    content: str = ""


class BufferResponse(BaseModel):
    """버퍼 조회 응답."""

    buffer_id: str = Field(alias="bufferId")
    content: str

    model_config = ConfigDict(populate_by_name=True)


class GenerateRequest(BaseModel):
    """PR 설명 생성 요청.

    브랜치 누락은 스키마 검증이 아니라 생성 단계에서 MISSING_BRANCH로 응답한다.
    """

    source_branch: str | None = Field(default=None, alias="sourceBranch")
    target_branch: str | None = Field(default=None, alias="targetBranch")
    rationale: str | None = None

    model_config = ConfigDict(populate_by_name=True)


class RationaleOpenRequest(BaseModel):
    """변경 이유 세션 시작 요청."""

    buffer_id: str = Field(alias="bufferId", min_length=1)
    source_branch: str | None = Field(default=None, alias="sourceBranch")
    target_branch: str | None = Field(default=None, alias="targetBranch")

    model_config = ConfigDict(populate_by_name=True)


class RationaleEditRequest(BaseModel):
    """변경 이유 입력 요청."""

    content: str = ""


class RationaleSubmitRequest(BaseModel):
    """변경 이유 제출 요청, content가 없으면 마지막 입력 사용."""

    content: str | None = None


class RationaleSessionResponse(BaseModel):
    """변경 이유 세션 응답."""

    buffer_id: str = Field(alias="bufferId")
    source_branch: str = Field(alias="sourceBranch")
    target_branch: str = Field(alias="targetBranch")
    text: str

    model_config = ConfigDict(populate_by_name=True)
