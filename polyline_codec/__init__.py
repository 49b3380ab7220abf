"""Encode and decode paths using the Encoded Polyline Algorithm Format."""

from __future__ import annotations

from polyline_codec.core.errors import (
    InvalidCoordinateError,
    InvalidEncodingError,
    PolylineError,
)
from polyline_codec.models.point import LatLng, Point
from polyline_codec.utils.polyline import MAX_PRECISION, decode, encode

__all__ = [
    "InvalidCoordinateError",
    "InvalidEncodingError",
    "LatLng",
    "MAX_PRECISION",
    "Point",
    "PolylineError",
    "decode",
    "encode",
]

__version__ = "0.1.0"
