"""Coordinate types shared by the codec and the HTTP surface."""

from __future__ import annotations

from polyline_codec.models.point import LatLng, Point, PointLike, as_lat_lng

__all__ = [
    "LatLng",
    "Point",
    "PointLike",
    "as_lat_lng",
]
