from fastapi import APIRouter

from prdraft.api.v1.description import wait_for_delivery
from prdraft.api.v1.schemas import (
    BufferResponse,
    RationaleEditRequest,
    RationaleOpenRequest,
    RationaleSessionResponse,
    RationaleSubmitRequest,
)
from prdraft.domain.description.rationale import RationaleSession
from prdraft.domain.description.service import get_buffer_registry, get_rationale_manager

router = APIRouter(prefix="/rationale", tags=["rationale"])


def _to_response(session: RationaleSession) -> RationaleSessionResponse:
    return RationaleSessionResponse(
        buffer_id=session.buffer.buffer_id,
        source_branch=session.source,
        target_branch=session.target,
        text=session.text,
    )


@router.post("/open", response_model=RationaleSessionResponse)
async def open_session(request: RationaleOpenRequest) -> RationaleSessionResponse:
    buffer = get_buffer_registry().get(request.buffer_id)
    session = get_rationale_manager().open(buffer, request.source_branch, request.target_branch)
    return _to_response(session)


@router.get("", response_model=RationaleSessionResponse)
async def read_session() -> RationaleSessionResponse:
    return _to_response(get_rationale_manager().current)


@router.put("", response_model=RationaleSessionResponse)
async def edit_session(request: RationaleEditRequest) -> RationaleSessionResponse:
    session = get_rationale_manager().current
    session.edit(request.content)
    return _to_response(session)


@router.post("/submit", response_model=BufferResponse)
async def submit_session(request: RationaleSubmitRequest) -> BufferResponse:
    manager = get_rationale_manager()
    buffer = manager.current.buffer
    task = manager.submit(request.content)
    return await wait_for_delivery(task, buffer)


@router.delete("", status_code=204)
async def cancel_session() -> None:
    get_rationale_manager().cancel()
