from collections.abc import Callable

from prdraft.core.exceptions import BackendConfigError
from prdraft.core.logging import get_logger
from prdraft.domain.description.schemas import BackendConfig
from prdraft.infra.llm.base import BaseLLMClient
from prdraft.infra.llm.gemini_client import GeminiClient
from prdraft.infra.llm.openai_client import OpenAIClient
from prdraft.infra.llm.vllm_client import VLLMClient

logger = get_logger(__name__)

BACKENDS: dict[str, Callable[[str | None], BaseLLMClient]] = {
    "openai": OpenAIClient,
    "vllm": VLLMClient,
    "gemini": GeminiClient,
}

_clients: dict[tuple[str, str | None], BaseLLMClient] = {}


def get_backend(config: BackendConfig) -> BaseLLMClient:
    """백엔드 설정에 맞는 LLM 클라이언트 반환, (backend, model) 단위로 캐시

    Raises:
        BackendConfigError: 백엔드 미설정, 미지원 백엔드, 클라이언트 생성 실패
    """
    if not config.backend:
        raise BackendConfigError("LLM_PROVIDER 또는 PR_LLM_PROVIDER가 설정되지 않았습니다")

    key = (config.backend, config.model)
    if key in _clients:
        return _clients[key]

    backend_cls = BACKENDS.get(config.backend)
    if backend_cls is None:
        raise BackendConfigError(f"지원하지 않는 LLM 프로바이더: {config.backend}")

    try:
        client = backend_cls(config.model)
    except ValueError as e:
        raise BackendConfigError(str(e)) from e

    _clients[key] = client
    logger.info(
        "LLM 클라이언트 초기화 backend=%s model=%s", config.backend, client.get_model_name()
    )
    return client


def reset_clients() -> None:
    """클라이언트 캐시 초기화 - 테스트용"""
    _clients.clear()
