from prdraft.infra.llm.base import BaseLLMClient
from prdraft.infra.llm.client import (
    extract_error_message,
    get_langfuse_handler,
    response_from_exception,
    response_from_message,
)
from prdraft.infra.llm.factory import get_backend, reset_clients
from prdraft.infra.llm.gemini_client import GeminiClient
from prdraft.infra.llm.openai_client import OpenAIClient
from prdraft.infra.llm.vllm_client import VLLMClient

__all__ = [
    "BaseLLMClient",
    "OpenAIClient",
    "VLLMClient",
    "GeminiClient",
    "get_backend",
    "reset_clients",
    "get_langfuse_handler",
    "extract_error_message",
    "response_from_exception",
    "response_from_message",
]
