"""
PR 설명 생성 Dispatcher

diff 조회와 프롬프트 조립은 호출 시점에 동기로 수행하고,
모델 백엔드 호출만 asyncio Task로 비동기 실행한다.
Task는 GenerationOutcome 하나로 완료되며 완료 시 on_success 또는
report_error 중 정확히 하나가 호출된다.
"""

import asyncio
import uuid
from collections.abc import Callable

from prdraft.core.context import set_generation_id
from prdraft.core.exceptions import MissingBranchError
from prdraft.core.logging import get_logger
from prdraft.domain.description.assembler import assemble_prompt
from prdraft.domain.description.diff import DiffProvider, diff_range
from prdraft.domain.description.prompts import get_system_instruction
from prdraft.domain.description.schemas import (
    BackendConfig,
    BackendErrorOutcome,
    BackendResponse,
    GenerationOptions,
    GenerationOutcome,
    GenerationRequest,
    SuccessOutcome,
    UnknownFailureOutcome,
)
from prdraft.infra.llm.base import BaseLLMClient
from prdraft.infra.llm.client import extract_error_message
from prdraft.infra.llm.factory import get_backend

logger = get_logger(__name__)

SuccessContinuation = Callable[[str], None]
ErrorReporter = Callable[[BackendErrorOutcome | UnknownFailureOutcome], None]
BackendFactory = Callable[[BackendConfig], BaseLLMClient]


def log_failure(outcome: BackendErrorOutcome | UnknownFailureOutcome) -> None:
    """기본 오류 보고 - 에러 로그로 남김"""
    if isinstance(outcome, BackendErrorOutcome):
        logger.error("PR 설명 생성 실패: 백엔드 오류 message=%s", outcome.message)
    else:
        logger.error("PR 설명 생성 실패: 알 수 없는 오류 status=%s", outcome.status or "unknown")


def require_branches(source: str | None, target: str | None) -> None:
    """소스/타겟 브랜치 존재 확인

    Raises:
        MissingBranchError: 둘 중 하나라도 비어 있는 경우
    """
    if not source or not target:
        raise MissingBranchError(source, target)


def normalize_response(response: BackendResponse) -> GenerationOutcome:
    """백엔드 응답을 세 가지 결과 중 하나로 정규화"""
    if response.text:
        return SuccessOutcome(text=response.text)
    if response.error is not None:
        return BackendErrorOutcome(message=extract_error_message(response.error))
    return UnknownFailureOutcome(status=response.status)


class Dispatcher:
    """diff → 프롬프트 → 백엔드 호출 → 결과 전달 파이프라인"""

    def __init__(
        self,
        diff_provider: DiffProvider,
        options: GenerationOptions | None = None,
        backend_factory: BackendFactory = get_backend,
        report_error: ErrorReporter = log_failure,
    ):
        self._diff_provider = diff_provider
        self._options = options or GenerationOptions()
        self._backend_factory = backend_factory
        self._report_error = report_error

    @property
    def options(self) -> GenerationOptions:
        return self._options

    def generate(
        self,
        source: str | None,
        target: str | None,
        on_success: SuccessContinuation,
        rationale: str | None = None,
        template: str | None = None,
        options: GenerationOptions | None = None,
    ) -> "asyncio.Task[GenerationOutcome]":
        """PR 설명 생성 시작

        Args:
            source: 소스 브랜치
            target: 타겟 브랜치
            on_success: 생성된 텍스트를 받을 continuation
            rationale: 변경 이유, 선택
            template: PR 템플릿, 선택
            options: 호출별 생성 옵션, 없으면 Dispatcher 기본 옵션

        Returns:
            GenerationOutcome으로 완료되는 Task

        Raises:
            MissingBranchError: 브랜치 누락, 비동기 작업 시작 전
            NoDiffError: diff 없음, 비동기 작업 시작 전
            BackendConfigError: 백엔드 결정 실패, 비동기 작업 시작 전
            ValueError: 지원하지 않는 프롬프트 스타일
        """
        require_branches(source, target)
        options = options or self._options

        diff = self._diff_provider.get_diff(source, target)
        prompt = assemble_prompt(diff, rationale, template)
        system_instruction = get_system_instruction(options.style)
        backend = self._backend_factory(options.backend)

        generation_id = uuid.uuid4().hex[:8]
        logger.info(
            "PR 설명 생성 요청",
            generation_id=generation_id,
            range=diff_range(source, target),
            model=backend.get_model_name(),
            style=options.style,
            has_rationale=bool(rationale),
            has_template=bool(template),
            prompt_length=len(prompt),
        )

        return asyncio.ensure_future(
            self._run(backend, prompt, system_instruction, on_success, generation_id)
        )

    def submit(
        self,
        request: GenerationRequest,
        on_success: SuccessContinuation,
        options: GenerationOptions | None = None,
    ) -> "asyncio.Task[GenerationOutcome]":
        """GenerationRequest로 generate 호출"""
        return self.generate(
            request.source_branch,
            request.target_branch,
            on_success,
            rationale=request.rationale,
            template=request.template,
            options=options,
        )

    async def _run(
        self,
        backend: BaseLLMClient,
        prompt: str,
        system_instruction: str,
        on_success: SuccessContinuation,
        generation_id: str,
    ) -> GenerationOutcome:
        set_generation_id(generation_id)

        try:
            response = await backend.complete(prompt, system_instruction, context=())
        except Exception as e:
            logger.error("백엔드 호출 중 예외 error=%s", repr(e))
            response = BackendResponse(status=type(e).__name__)

        outcome = normalize_response(response)

        if isinstance(outcome, SuccessOutcome):
            logger.info("PR 설명 생성 완료 length=%d", len(outcome.text))
            on_success(outcome.text)
        else:
            self._report_error(outcome)

        return outcome
