from __future__ import annotations

from fastapi import APIRouter
from fastapi import Depends
from fastapi.responses import JSONResponse

from polyline_codec.core.settings import Settings
from polyline_codec.core.settings import get_settings
from polyline_codec.utils.polyline import scale_factor


router = APIRouter(tags=["health"])


@router.get("/healthz")
async def healthz() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/readyz")
async def readyz(settings: Settings = Depends(get_settings)) -> JSONResponse:
    # Readiness: the configured default precision must be accepted by the codec.
    try:
        scale_factor(settings.default_precision)
    except ValueError:
        return JSONResponse(status_code=503, content={"status": "not_ready"})

    if settings.max_path_points <= 0 or settings.max_encoded_length <= 0:
        return JSONResponse(status_code=503, content={"status": "not_ready"})

    return JSONResponse(status_code=200, content={"status": "ready"})
