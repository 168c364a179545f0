"""HTTP and WebSocket routes."""

from fastapi import APIRouter

from .realtime import realtime_router
from .router import router

api_router = APIRouter(prefix="/api")
api_router.include_router(router)

__all__ = [
    "api_router",
    "realtime_router",
]
