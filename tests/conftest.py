"""테스트 공통 fixture"""

from unittest.mock import MagicMock, patch

import pytest
from httpx import ASGITransport, AsyncClient

from prdraft.domain.description.diff import DiffProvider
from prdraft.domain.description.dispatcher import Dispatcher
from prdraft.domain.description.schemas import (
    BackendConfig,
    BackendResponse,
    GenerationOptions,
)
from prdraft.domain.description.service import reset_services
from prdraft.infra.llm.base import BaseLLMClient
from prdraft.main import app

SAMPLE_DIFF = "diff --git a/f b/f\n+line\n"


class StubBackend(BaseLLMClient):
    """모델 백엔드 stub - 호출 기록 후 고정 응답 반환"""

    def __init__(
        self,
        response: BackendResponse | None = None,
        echo: bool = False,
        error: Exception | None = None,
    ):
        if response is None:
            response = BackendResponse(text="generated description")
        self.response = response
        self.echo = echo
        self.error = error
        self.calls: list[tuple] = []

    def get_chat_model(self):
        raise NotImplementedError

    def get_model_name(self) -> str:
        return "stub-model"

    async def complete(self, prompt, system_instruction, context=()):
        self.calls.append((prompt, system_instruction, tuple(context)))
        if self.error is not None:
            raise self.error
        if self.echo:
            return BackendResponse(text=prompt)
        return self.response


@pytest.fixture
def sample_diff() -> str:
    """테스트용 diff"""
    return SAMPLE_DIFF


@pytest.fixture
def vcs_diff() -> MagicMock:
    """VersionControlDiff mock, 기본으로 SAMPLE_DIFF 반환"""
    return MagicMock(return_value=SAMPLE_DIFF)


@pytest.fixture
def stub_backend() -> StubBackend:
    """고정 텍스트를 반환하는 백엔드"""
    return StubBackend()


@pytest.fixture
def error_reporter() -> MagicMock:
    """오류 보고 채널 mock"""
    return MagicMock()


@pytest.fixture
def generation_options() -> GenerationOptions:
    """테스트용 생성 옵션"""
    return GenerationOptions(
        style="default",
        include_template=True,
        backend=BackendConfig(backend="stub", model="stub-model"),
    )


@pytest.fixture
def make_dispatcher(vcs_diff, error_reporter, generation_options):
    """백엔드를 지정해 Dispatcher 생성하는 helper"""

    def _create(backend: BaseLLMClient) -> tuple[Dispatcher, MagicMock]:
        factory = MagicMock(return_value=backend)
        dispatcher = Dispatcher(
            DiffProvider(vcs_diff),
            options=generation_options,
            backend_factory=factory,
            report_error=error_reporter,
        )
        return dispatcher, factory

    return _create


@pytest.fixture
def dispatcher(make_dispatcher, stub_backend) -> Dispatcher:
    """stub 백엔드를 사용하는 Dispatcher"""
    dispatcher, _ = make_dispatcher(stub_backend)
    return dispatcher


@pytest.fixture
def service_dispatcher(dispatcher):
    """API 계층이 사용할 Dispatcher 교체"""
    reset_services()
    with patch("prdraft.domain.description.service._dispatcher", dispatcher):
        yield dispatcher
    reset_services()


@pytest.fixture
def async_client():
    """비동기 HTTP 클라이언트"""
    transport = ASGITransport(app=app)
    return AsyncClient(transport=transport, base_url="http://test")
