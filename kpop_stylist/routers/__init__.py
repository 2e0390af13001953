"""Router package exposing all API routers."""

from fastapi import APIRouter

from .consult.router import router as consult_router

router = APIRouter()
router.include_router(consult_router)

__all__ = ["router", "consult_router"]
