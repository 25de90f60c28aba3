"""
변경 이유 입력 세션

변경 이유를 먼저 입력받은 뒤 PR 설명을 생성하는 2단계 흐름.
세션은 고정된 슬롯 하나만 사용하며, 새 세션을 열면 진행 중이던 세션은 취소된다.
"""

import asyncio

from prdraft.core.exceptions import BufferNotFoundError, RationaleSessionNotFoundError
from prdraft.core.logging import get_logger
from prdraft.domain.description.buffers import DraftBuffer, buffer_writer
from prdraft.domain.description.dispatcher import Dispatcher, require_branches
from prdraft.domain.description.schemas import GenerationOutcome, GenerationRequest
from prdraft.domain.description.template import extract_template, strip_header

logger = get_logger(__name__)

RATIONALE_HEADER = (
    "# Why were these changes made? Write the reason below this header.\n"
    "# Submit to generate the PR description, cancel to abort. This header is read-only.\n"
)


class RationaleSession:
    """변경 이유 입력 중인 세션 상태"""

    def __init__(self, buffer: DraftBuffer, source: str, target: str):
        self.buffer = buffer
        self.source = source
        self.target = target
        self._body = ""

    @property
    def text(self) -> str:
        """보호된 헤더를 포함한 전체 입력 영역"""
        return RATIONALE_HEADER + self._body

    def edit(self, content: str) -> None:
        """편집 가능한 영역 갱신, 헤더는 변경할 수 없음

        맨 앞의 "# " 줄은 수정 여부와 관계없이 헤더로 보고 버린다.
        """
        self._body = strip_header(content)

    @property
    def rationale(self) -> str | None:
        """헤더 이후 내용을 trim한 변경 이유, 비어 있으면 None"""
        return self._body.strip() or None


class RationaleSessionManager:
    """고정 슬롯 하나로 변경 이유 세션 관리"""

    def __init__(self, dispatcher: Dispatcher):
        self._dispatcher = dispatcher
        self._session: RationaleSession | None = None

    @property
    def current(self) -> RationaleSession:
        if self._session is None:
            raise RationaleSessionNotFoundError()
        return self._session

    def open(self, buffer: DraftBuffer, source: str | None, target: str | None) -> RationaleSession:
        """세션 시작, 진행 중인 세션이 있으면 취소 후 교체"""
        require_branches(source, target)

        if self._session is not None:
            logger.warning(
                "진행 중인 세션 교체 buffer_id=%s range=%s...%s",
                self._session.buffer.buffer_id,
                self._session.target,
                self._session.source,
            )

        self._session = RationaleSession(buffer, source, target)
        logger.info("변경 이유 세션 시작 buffer_id=%s", buffer.buffer_id)
        return self._session

    def submit(self, content: str | None = None) -> "asyncio.Task[GenerationOutcome]":
        """입력된 변경 이유로 생성 시작, 세션은 결과와 무관하게 폐기

        템플릿은 세션 시작 시점이 아니라 제출 시점의 버퍼 내용에서 추출한다.

        Raises:
            RationaleSessionNotFoundError: 진행 중인 세션 없음
            BufferNotFoundError: 세션 시작 후 버퍼가 닫힘, 생성 요청 전
        """
        session = self.current
        if content is not None:
            session.edit(content)
        self._session = None

        if not session.buffer.is_live:
            logger.warning("닫힌 버퍼로 세션 제출 buffer_id=%s", session.buffer.buffer_id)
            raise BufferNotFoundError(session.buffer.buffer_id)

        options = self._dispatcher.options
        template = extract_template(session.buffer.snapshot(), options.include_template)

        logger.info("변경 이유 세션 제출 buffer_id=%s", session.buffer.buffer_id)
        request = GenerationRequest(
            source_branch=session.source,
            target_branch=session.target,
            rationale=session.rationale,
            template=template,
        )
        return self._dispatcher.submit(request, buffer_writer(session.buffer))

    def cancel(self) -> None:
        """세션 폐기, 원래 버퍼는 변경하지 않음"""
        session = self.current
        self._session = None
        logger.info("변경 이유 세션 취소 buffer_id=%s", session.buffer.buffer_id)
