from __future__ import annotations

from typing import (
    Any,
    Mapping,
    NamedTuple,
    Protocol,
    Sequence,
    Union,
    runtime_checkable,
)


@runtime_checkable
class Point(Protocol):
    """Anything exposing WGS84 ``latitude`` and ``longitude`` in degrees.

    ORM rows, pydantic models and dataclasses with these two attributes can
    be handed to the encoder directly.
    """

    @property
    def latitude(self) -> float: ...

    @property
    def longitude(self) -> float: ...


class LatLng(NamedTuple):
    """Immutable (latitude, longitude) pair produced by the decoder."""

    latitude: float
    longitude: float

    def __eq__(self, other: object) -> bool:
        if isinstance(other, tuple):
            return tuple.__eq__(self, other)
        if isinstance(other, Point):
            return (
                self.latitude == other.latitude
                and self.longitude == other.longitude
            )
        return NotImplemented

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = tuple.__hash__


# Plain (lat, lng) pairs are accepted too. GeoJSON order ([lng, lat]) is not.
PointLike = Union[Point, Sequence[float]]


def as_lat_lng(point: Any) -> LatLng:
    if isinstance(point, LatLng):
        return point
    if isinstance(point, Point):
        try:
            return LatLng(float(point.latitude), float(point.longitude))
        except (TypeError, ValueError) as e:
            raise TypeError(
                f"Point latitude/longitude must be numbers, got {point!r}"
            ) from e
    # Mappings unpack into their keys, strings into their characters.
    if isinstance(point, (str, bytes, Mapping)):
        raise TypeError(f"Unsupported point type: {type(point).__name__}")

    try:
        latitude, longitude = point
        return LatLng(float(latitude), float(longitude))
    except (TypeError, ValueError) as e:
        raise TypeError(
            f"Point must expose latitude/longitude or be a (lat, lng) pair, "
            f"got {point!r}"
        ) from e
