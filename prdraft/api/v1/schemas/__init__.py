from prdraft.api.v1.schemas.description import (
    BufferResponse,
    BufferWriteRequest,
    GenerateRequest,
    RationaleEditRequest,
    RationaleOpenRequest,
    RationaleSessionResponse,
    RationaleSubmitRequest,
)

__all__ = [
    "BufferResponse",
    "BufferWriteRequest",
    "GenerateRequest",
    "RationaleEditRequest",
    "RationaleOpenRequest",
    "RationaleSessionResponse",
    "RationaleSubmitRequest",
]
