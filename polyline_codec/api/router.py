from __future__ import annotations

from fastapi import APIRouter

from polyline_codec.api.health import router as health_router
from polyline_codec.api.polyline import router as polyline_router


api_router = APIRouter()
api_router.include_router(health_router)
api_router.include_router(polyline_router)
