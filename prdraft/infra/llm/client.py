import os
from typing import Any

from langchain_core.messages import BaseMessage
from langfuse.langchain import CallbackHandler

from prdraft.core.config import settings
from prdraft.core.logging import get_logger
from prdraft.domain.description.schemas import BackendResponse

logger = get_logger(__name__)

if settings.langfuse_public_key:
    os.environ["LANGFUSE_PUBLIC_KEY"] = settings.langfuse_public_key
if settings.langfuse_secret_key:
    os.environ["LANGFUSE_SECRET_KEY"] = settings.langfuse_secret_key
if settings.langfuse_base_url:
    os.environ["LANGFUSE_HOST"] = settings.langfuse_base_url


def get_langfuse_handler() -> CallbackHandler | None:
    """Langfuse 콜백 핸들러 반환"""
    if not settings.langfuse_public_key or not settings.langfuse_secret_key:
        return None

    return CallbackHandler()


def build_run_config(model_name: str, session_id: str | None = None) -> dict:
    """LangChain 호출 설정 생성"""
    langfuse_handler = get_langfuse_handler()
    return {
        "callbacks": [langfuse_handler] if langfuse_handler else [],
        "metadata": {
            "langfuse_session_id": session_id,
            "langfuse_tags": ["pr-description", model_name],
        },
    }


def _content_to_text(content: str | list) -> str:
    """메시지 content를 문자열로 변환, content part 리스트도 처리"""
    if isinstance(content, str):
        return content

    parts = []
    for part in content:
        if isinstance(part, str):
            parts.append(part)
        elif isinstance(part, dict) and part.get("type") == "text":
            parts.append(part.get("text", ""))
    return "".join(parts)


def response_from_message(message: BaseMessage) -> BackendResponse:
    """LangChain 응답 메시지를 BackendResponse로 변환"""
    text = _content_to_text(message.content)
    metadata = getattr(message, "response_metadata", None) or {}
    status = metadata.get("finish_reason")

    if text.strip():
        return BackendResponse(text=text, status=status)
    return BackendResponse(status=status or "empty_response")


def response_from_exception(exc: Exception) -> BackendResponse:
    """프로바이더 예외를 BackendResponse로 변환

    본문이나 message가 있는 API 오류는 구조화된 오류로,
    타임아웃/연결 오류처럼 정보가 없는 예외는 status로만 전달한다.
    """
    body: Any = getattr(exc, "body", None)
    status_code = getattr(exc, "status_code", None) or getattr(exc, "code", None)

    if isinstance(body, dict | str) and body:
        return BackendResponse(error=body, status=_status(exc, status_code))

    message = getattr(exc, "message", None)
    if isinstance(message, str) and message and status_code is not None:
        return BackendResponse(error={"message": message}, status=_status(exc, status_code))

    return BackendResponse(status=_status(exc, status_code))


def _status(exc: Exception, status_code: Any) -> str:
    if status_code is not None:
        return f"{type(exc).__name__} ({status_code})"
    return type(exc).__name__


def extract_error_message(error: dict[str, Any] | str) -> str:
    """구조화된 오류에서 메시지 추출, message 필드가 없으면 원본을 문자열로 반환"""
    if isinstance(error, dict):
        message = error.get("message")
        if isinstance(message, str) and message:
            return message

        nested = error.get("error")
        if isinstance(nested, dict) and isinstance(nested.get("message"), str):
            return nested["message"]
        if isinstance(nested, str) and nested:
            return nested

    return str(error)
