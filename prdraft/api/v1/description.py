import asyncio

from fastapi import APIRouter

from prdraft.api.v1.schemas import BufferResponse, BufferWriteRequest, GenerateRequest
from prdraft.core.exceptions import BufferNotFoundError
from prdraft.core.logging import get_logger
from prdraft.domain.description.buffers import DraftBuffer, buffer_writer
from prdraft.domain.description.schemas import GenerationOutcome, GenerationRequest
from prdraft.domain.description.service import get_buffer_registry, get_dispatcher
from prdraft.domain.description.template import extract_template

router = APIRouter(prefix="/descriptions", tags=["descriptions"])
logger = get_logger(__name__)


def _to_response(buffer: DraftBuffer) -> BufferResponse:
    return BufferResponse(buffer_id=buffer.buffer_id, content=buffer.snapshot())


async def wait_for_delivery(
    task: "asyncio.Task[GenerationOutcome]", buffer: DraftBuffer
) -> BufferResponse:
    """생성 결과를 기다린 뒤 버퍼 상태 반환, 실패 결과는 예외로 변환"""
    outcome = await task
    if not outcome.ok:
        raise outcome.to_exception()
    if not buffer.is_live:
        raise BufferNotFoundError(buffer.buffer_id)
    return _to_response(buffer)


@router.put("/buffers/{buffer_id}", response_model=BufferResponse)
async def write_buffer(buffer_id: str, request: BufferWriteRequest) -> BufferResponse:
    buffer = get_buffer_registry().open(buffer_id, request.content)
    return _to_response(buffer)


@router.get("/buffers/{buffer_id}", response_model=BufferResponse)
async def read_buffer(buffer_id: str) -> BufferResponse:
    return _to_response(get_buffer_registry().get(buffer_id))


@router.delete("/buffers/{buffer_id}", status_code=204)
async def close_buffer(buffer_id: str) -> None:
    get_buffer_registry().close(buffer_id)


@router.post("/buffers/{buffer_id}/generate", response_model=BufferResponse)
async def generate_description(buffer_id: str, request: GenerateRequest) -> BufferResponse:
    buffer = get_buffer_registry().get(buffer_id)
    dispatcher = get_dispatcher()
    template = extract_template(buffer.snapshot(), dispatcher.options.include_template)

    generation_request = GenerationRequest(
        source_branch=request.source_branch,
        target_branch=request.target_branch,
        rationale=request.rationale,
        template=template,
    )
    # git diff는 이벤트 루프에서 동기 실행되므로 최대 git_timeout 동안 다른 요청도 대기한다
    task = dispatcher.submit(generation_request, buffer_writer(buffer))
    return await wait_for_delivery(task, buffer)
