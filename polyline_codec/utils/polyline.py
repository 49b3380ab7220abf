from __future__ import annotations

"""Encoded Polyline Algorithm Format.

ref: https://developers.google.com/maps/documentation/utilities/polylinealgorithm

Each coordinate is scaled to a fixed-point integer (``10**precision``),
delta-encoded against the previous point, zig-zag mapped to an unsigned
value and written as 5-bit groups (least significant first) offset into the
printable range ``[63, 126]``. Latitude is emitted before longitude.

Python integers never overflow, so the only bound we need is on precision:
past ``MAX_PRECISION`` the fixed-point values outgrow the 53-bit float
mantissa and decoded points no longer re-encode to the same string.
"""

import logging
import math
from typing import Callable, Iterable

from polyline_codec.core.errors import InvalidCoordinateError, InvalidEncodingError
from polyline_codec.models.point import LatLng, PointLike, as_lat_lng


logger = logging.getLogger(__name__)

DEFAULT_PRECISION = 5
MAX_PRECISION = 13

_OFFSET = 63
_CONTINUATION = 0x20
_GROUP_MASK = 0x1F
_GROUP_BITS = 5
_MAX_CHUNK = 0x3F


def scale_factor(precision: int) -> int:
    """Return ``10**precision`` after checking precision is usable."""

    if isinstance(precision, bool) or not isinstance(precision, int):
        raise ValueError(f"precision must be an int, got {precision!r}")
    if not 0 <= precision <= MAX_PRECISION:
        raise ValueError(f"precision must be between 0 and {MAX_PRECISION}")
    return 10**precision


def validate(point: LatLng) -> None:
    # Written as a positive range check so NaN is rejected as well.
    if not (
        -90.0 <= point.latitude <= 90.0 and -180.0 <= point.longitude <= 180.0
    ):
        raise InvalidCoordinateError(
            latitude=point.latitude, longitude=point.longitude
        )


def round_half_away(value: float) -> int:
    magnitude = abs(value)
    whole = math.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1
    return -whole if value < 0 else whole


def zigzag_encode(value: int) -> int:
    return ~(value << 1) if value < 0 else value << 1


def zigzag_decode(value: int) -> int:
    return ~(value >> 1) if value & 1 else value >> 1


def encode_unsigned(value: int) -> str:
    """Serialize a non-negative int as polyline characters."""

    if value < 0:
        raise ValueError("value must be >= 0")

    chunks: list[str] = []
    while value >= _CONTINUATION:
        chunks.append(chr((_CONTINUATION | (value & _GROUP_MASK)) + _OFFSET))
        value >>= _GROUP_BITS
    chunks.append(chr(value + _OFFSET))
    return "".join(chunks)


def decode_unsigned(encoded: str, index: int) -> tuple[int, int]:
    """Read one variable-length value starting at ``index``.

    Returns ``(value, next_index)``. Running off the end of the string or
    meeting a character outside the alphabet raises InvalidEncodingError.
    """

    result = 0
    shift = 0
    length = len(encoded)
    while True:
        if index >= length:
            raise InvalidEncodingError(encoded_path=encoded)
        b = ord(encoded[index]) - _OFFSET
        if not 0 <= b <= _MAX_CHUNK:
            raise InvalidEncodingError(encoded_path=encoded)
        index += 1
        result |= (b & _GROUP_MASK) << shift
        shift += _GROUP_BITS
        if b < _CONTINUATION:
            return result, index


def encode_line(
    path: Iterable[PointLike],
    transform: Callable[[LatLng], tuple[int, int]],
) -> str:
    """Encode ``path`` using ``transform`` to produce fixed-point pairs.

    Every point is validated before it is transformed; the first invalid
    point aborts the whole encode.
    """

    chunks: list[str] = []
    prev_lat = 0
    prev_lng = 0
    count = 0

    for item in path:
        point = as_lat_lng(item)
        validate(point)
        lat, lng = transform(point)

        chunks.append(encode_unsigned(zigzag_encode(lat - prev_lat)))
        chunks.append(encode_unsigned(zigzag_encode(lng - prev_lng)))

        prev_lat = lat
        prev_lng = lng
        count += 1

    encoded = "".join(chunks)
    logger.debug("Encoded %d points into %d chars", count, len(encoded))
    return encoded


def encode(path: Iterable[PointLike], precision: int = DEFAULT_PRECISION) -> str:
    """Encode a sequence of points into a polyline string.

    >>> encode([(38.5, -120.2), (40.7, -120.95), (43.252, -126.453)])
    '_p~iF~ps|U_ulLnnqC_mqNvxq`@'
    """

    factor = scale_factor(precision)

    def to_fixed_point(point: LatLng) -> tuple[int, int]:
        return (
            round_half_away(point.latitude * factor),
            round_half_away(point.longitude * factor),
        )

    return encode_line(path, to_fixed_point)


def decode(encoded_path: str, precision: int = DEFAULT_PRECISION) -> list[LatLng]:
    """Decode a polyline string into a list of LatLng.

    Reconstructed coordinates are not range-checked; precision must match
    the one used to encode.

    >>> decode("mAnFC@CH", 0)
    [LatLng(latitude=39.0, longitude=-120.0), LatLng(latitude=41.0, longitude=-121.0), LatLng(latitude=43.0, longitude=-126.0)]
    """

    factor = scale_factor(precision)
    path: list[LatLng] = []
    index = 0
    lat = 0
    lng = 0
    length = len(encoded_path)

    while index < length:
        value, index = decode_unsigned(encoded_path, index)
        lat += zigzag_decode(value)
        value, index = decode_unsigned(encoded_path, index)
        lng += zigzag_decode(value)

        # int / int is correctly rounded, so exact decimals come back exact.
        path.append(LatLng(lat / factor, lng / factor))

    logger.debug("Decoded %d chars into %d points", length, len(path))
    return path
