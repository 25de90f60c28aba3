from abc import ABC, abstractmethod
from collections.abc import Sequence

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import BaseMessage, HumanMessage, SystemMessage

from prdraft.core.context import get_generation_id
from prdraft.core.logging import get_logger
from prdraft.domain.description.schemas import BackendResponse
from prdraft.infra.llm.client import (
    build_run_config,
    response_from_exception,
    response_from_message,
)

logger = get_logger(__name__)


class BaseLLMClient(ABC):
    """LLM 클라이언트 추상 클래스"""

    @abstractmethod
    def get_chat_model(self) -> BaseChatModel:
        """LangChain 호환 채팅 모델 반환"""
        pass

    @abstractmethod
    def get_model_name(self) -> str:
        """사용 중인 모델 이름 반환"""
        pass

    async def complete(
        self,
        prompt: str,
        system_instruction: str,
        context: Sequence[BaseMessage] = (),
    ) -> BackendResponse:
        """단일 요청 호출, 결과를 BackendResponse로 정규화

        Args:
            prompt: 조립된 프롬프트
            system_instruction: 프롬프트 스타일별 시스템 지시문
            context: 이전 대화, PR 설명 생성은 항상 빈 컨텍스트로 호출

        Returns:
            text, error, status 중 하나가 채워진 응답
        """
        messages = [
            SystemMessage(content=system_instruction),
            *context,
            HumanMessage(content=prompt),
        ]
        config = build_run_config(self.get_model_name(), session_id=get_generation_id())

        try:
            message = await self.get_chat_model().ainvoke(messages, config=config)
        except Exception as e:
            logger.warning(
                "LLM 호출 실패 model=%s error=%s", self.get_model_name(), type(e).__name__
            )
            return response_from_exception(e)

        return response_from_message(message)
