"""
요청 및 생성 컨텍스트 관리 모듈

contextvars를 사용하여 비동기 환경에서도 안전하게 request_id와 generation_id를 관리
"""

import uuid
from contextvars import ContextVar

request_id_var: ContextVar[str | None] = ContextVar("request_id", default=None)
generation_id_var: ContextVar[str | None] = ContextVar("generation_id", default=None)


def get_request_id() -> str | None:
    """현재 컨텍스트의 request_id 반환"""
    return request_id_var.get()


def set_request_id(request_id: str | None = None) -> str:
    """
    request_id 설정

    인자가 없으면 8자리 UUID 자동 생성
    """
    if request_id is None:
        request_id = uuid.uuid4().hex[:8]
    request_id_var.set(request_id)
    return request_id


def get_generation_id() -> str | None:
    """현재 컨텍스트의 generation_id 반환"""
    return generation_id_var.get()


def set_generation_id(generation_id: str | None = None) -> str:
    """generation_id 설정, 인자가 없으면 자동 생성"""
    if generation_id is None:
        generation_id = uuid.uuid4().hex[:8]
    generation_id_var.set(generation_id)
    return generation_id


def clear_context() -> None:
    """모든 컨텍스트 변수 초기화"""
    request_id_var.set(None)
    generation_id_var.set(None)
