from fastapi import APIRouter

from prdraft.api.v1.description import router as description_router
from prdraft.api.v1.rationale import router as rationale_router

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(description_router)
api_router.include_router(rationale_router)
