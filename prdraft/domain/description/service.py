from prdraft.core.config import settings
from prdraft.core.logging import get_logger
from prdraft.domain.description.buffers import BufferRegistry
from prdraft.domain.description.diff import DiffProvider
from prdraft.domain.description.dispatcher import Dispatcher
from prdraft.domain.description.rationale import RationaleSessionManager
from prdraft.infra.git.client import GitClient

logger = get_logger(__name__)

_dispatcher: Dispatcher | None = None
_buffer_registry: BufferRegistry | None = None
_rationale_manager: RationaleSessionManager | None = None


def get_dispatcher() -> Dispatcher:
    """설정 기반 Dispatcher 반환"""
    global _dispatcher

    if _dispatcher is not None:
        return _dispatcher

    options = settings.generation_options()
    _dispatcher = Dispatcher(DiffProvider(GitClient()), options=options)
    logger.info(
        "Dispatcher 초기화 backend=%s model=%s style=%s repo=%s",
        options.backend.backend,
        options.backend.model,
        options.style,
        settings.git_repo_path,
    )
    return _dispatcher


def get_buffer_registry() -> BufferRegistry:
    global _buffer_registry

    if _buffer_registry is None:
        _buffer_registry = BufferRegistry()
    return _buffer_registry


def get_rationale_manager() -> RationaleSessionManager:
    global _rationale_manager

    if _rationale_manager is None:
        _rationale_manager = RationaleSessionManager(get_dispatcher())
    return _rationale_manager


def reset_services() -> None:
    """싱글톤 초기화 - 테스트용"""
    global _dispatcher, _buffer_registry, _rationale_manager
    _dispatcher = None
    _buffer_registry = None
    _rationale_manager = None
