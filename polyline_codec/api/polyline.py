from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from polyline_codec.core.errors import (
    APIError,
    InvalidCoordinateError,
    InvalidEncodingError,
)
from polyline_codec.core.settings import Settings, get_settings
from polyline_codec.utils.polyline import MAX_PRECISION, decode, encode


router = APIRouter(prefix="/v1/polyline", tags=["polyline"])


logger = logging.getLogger(__name__)

# Longest slice of a rejected encoded path echoed back in error details.
_ECHO_CHARS = 64


class PointItem(BaseModel):
    # No range constraints here: the codec owns coordinate validation so the
    # error carries the offending pair. NaN/inf cannot be echoed back as JSON.
    latitude: float = Field(allow_inf_nan=False)
    longitude: float = Field(allow_inf_nan=False)


class EncodeRequest(BaseModel):
    points: list[PointItem] = Field(default_factory=list)
    precision: int | None = Field(default=None, ge=0, le=MAX_PRECISION)


class EncodeResponse(BaseModel):
    encoded: str
    precision: int
    point_count: int


class DecodeRequest(BaseModel):
    encoded: str
    precision: int | None = Field(default=None, ge=0, le=MAX_PRECISION)


class DecodeResponse(BaseModel):
    points: list[PointItem]
    precision: int
    point_count: int


def _resolve_precision(requested: int | None, settings: Settings) -> int:
    if requested is not None:
        return requested
    return settings.default_precision


@router.post("/encode", response_model=EncodeResponse)
def encode_path(
    body: EncodeRequest,
    settings: Settings = Depends(get_settings),
) -> EncodeResponse:
    if len(body.points) > settings.max_path_points:
        raise APIError(
            code="POLYLINE_PATH_TOO_LARGE",
            message=f"Path exceeds {settings.max_path_points} points",
            status_code=413,
            details={"point_count": len(body.points)},
        )

    precision = _resolve_precision(body.precision, settings)
    try:
        encoded = encode(body.points, precision)
    except InvalidCoordinateError as e:
        logger.info("Rejected encode request: %s", e)
        raise APIError(
            code="POLYLINE_INVALID_COORDINATE",
            message="Coordinate out of range",
            status_code=400,
            details={"latitude": e.latitude, "longitude": e.longitude},
        )

    return EncodeResponse(
        encoded=encoded,
        precision=precision,
        point_count=len(body.points),
    )


@router.post("/decode", response_model=DecodeResponse)
def decode_path(
    body: DecodeRequest,
    settings: Settings = Depends(get_settings),
) -> DecodeResponse:
    if len(body.encoded) > settings.max_encoded_length:
        raise APIError(
            code="POLYLINE_PATH_TOO_LARGE",
            message=f"Encoded path exceeds {settings.max_encoded_length} chars",
            status_code=413,
            details={"length": len(body.encoded)},
        )

    precision = _resolve_precision(body.precision, settings)
    try:
        path = decode(body.encoded, precision)
    except InvalidEncodingError as e:
        logger.info("Rejected decode request (length=%d)", len(body.encoded))
        raise APIError(
            code="POLYLINE_INVALID_ENCODING",
            message="Malformed encoded path",
            status_code=400,
            details={
                "encoded": e.encoded_path[:_ECHO_CHARS],
                "length": len(e.encoded_path),
                "truncated": len(e.encoded_path) > _ECHO_CHARS,
            },
        )

    return DecodeResponse(
        points=[PointItem(latitude=p.latitude, longitude=p.longitude) for p in path],
        precision=precision,
        point_count=len(path),
    )
