"""
structlog 기반 로깅 설정

프로덕션은 JSON, 그 외 환경은 콘솔로 출력한다.
모든 로그에 request_id와 generation_id를 붙이고, diff나 프롬프트처럼
긴 문자열 필드는 잘라서 남긴다.
"""

import logging
import re
import sys

import structlog

from prdraft.core.config import settings
from prdraft.core.context import get_generation_id, get_request_id

MAX_FIELD_LENGTH = 2000

UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")
QUIET_LOGGERS = ("httpcore", "httpx", "langfuse", "langchain", "openai", "google_genai", "anyio")

# Langfuse 키(sk-lf-)가 OpenAI 키 패턴보다 먼저 처리되어야 함
SECRET_PATTERNS = [
    (re.compile(r"\b(pk-lf-|sk-lf-)[A-Za-z0-9-]+"), r"\1***"),
    (re.compile(r"\b(sk-)[A-Za-z0-9_-]{8,}"), r"\1***"),
    (re.compile(r"\b(AIza)[A-Za-z0-9_-]{20,}"), r"\1***"),
    (re.compile(r"(Bearer\s+)\S+", re.IGNORECASE), r"\1***"),
    (re.compile(r"(api[_-]?key[=:]\s*)[^&\s]+", re.IGNORECASE), r"\1***"),
    (re.compile(r"(https?://)[^:/\s]+:[^@\s]+@"), r"\1***@"),
]


def mask_secrets(value: str) -> str:
    """API 키, 토큰, URL 인증 정보 마스킹"""
    for pattern, replacement in SECRET_PATTERNS:
        value = pattern.sub(replacement, value)
    return value


def inject_context(logger: logging.Logger, method_name: str, event_dict: dict) -> dict:
    """컨텍스트의 request_id, generation_id 주입, 직접 넘긴 값이 우선"""
    for key, value in (("request_id", get_request_id()), ("generation_id", get_generation_id())):
        if value:
            event_dict.setdefault(key, value)
    return event_dict


def mask_secrets_processor(logger: logging.Logger, method_name: str, event_dict: dict) -> dict:
    if not settings.is_production:
        return event_dict

    for key, value in event_dict.items():
        if isinstance(value, str):
            event_dict[key] = mask_secrets(value)
    return event_dict


def truncate_long_fields(logger: logging.Logger, method_name: str, event_dict: dict) -> dict:
    """event를 제외한 문자열 필드를 MAX_FIELD_LENGTH로 자름"""
    for key, value in event_dict.items():
        if key == "event" or not isinstance(value, str) or len(value) <= MAX_FIELD_LENGTH:
            continue
        omitted = len(value) - MAX_FIELD_LENGTH
        event_dict[key] = f"{value[:MAX_FIELD_LENGTH]}...(+{omitted} chars)"
    return event_dict


def _renderer(production: bool):
    if production:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=True)


def setup_logging(level: str | None = None) -> None:
    """structlog와 표준 logging 핸들러 설정"""
    log_level = getattr(logging, (level or settings.log_level).upper(), logging.INFO)

    processors: list = [
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        inject_context,
        mask_secrets_processor,
        truncate_long_fields,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]
    if settings.is_production:
        processors.append(structlog.processors.format_exc_info)

    structlog.configure(
        processors=[*processors, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=processors,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(settings.is_production),
            ],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level)

    # uvicorn 로그도 루트 핸들러 하나로 출력
    for name in UVICORN_LOGGERS:
        logging.getLogger(name).handlers.clear()
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)
