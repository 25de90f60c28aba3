from langchain_core.language_models import BaseChatModel
from langchain_openai import ChatOpenAI

from prdraft.core.config import settings
from prdraft.infra.llm.base import BaseLLMClient


class VLLMClient(BaseLLMClient):
    """vLLM 클라이언트 - OpenAI 호환 엔드포인트"""

    def __init__(self, model: str | None = None):
        if not settings.vllm_api_url:
            raise ValueError("VLLM_API_URL이 설정되지 않았습니다")

        self._model_name = model or settings.vllm_model
        if not self._model_name:
            raise ValueError("vLLM 모델이 설정되지 않았습니다")

        self._model = ChatOpenAI(
            model=self._model_name,
            api_key=settings.vllm_api_key or "EMPTY",
            base_url=settings.vllm_api_url,
            timeout=settings.vllm_timeout,
            temperature=0.2,
        )

    def get_chat_model(self) -> BaseChatModel:
        """LangChain ChatOpenAI 모델 반환"""
        return self._model

    def get_model_name(self) -> str:
        """사용 중인 모델 이름 반환"""
        return self._model_name
