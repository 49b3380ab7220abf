from __future__ import annotations

import dataclasses
from typing import Any


class PolylineError(ValueError):
    """Base class for errors raised by the polyline codec."""


# Identity hashing; args mirror the fields so instances pickle.
@dataclasses.dataclass(slots=True, eq=False)
class InvalidCoordinateError(PolylineError):
    """A coordinate handed to the encoder is outside lat/lng range."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        self.args = (self.latitude, self.longitude)

    def __str__(self) -> str:
        return f"invalid lat lng: ({self.latitude}, {self.longitude})"


@dataclasses.dataclass(slots=True, eq=False)
class InvalidEncodingError(PolylineError):
    """An encoded path ends mid-chunk or contains a non-alphabet character."""

    encoded_path: str

    def __post_init__(self) -> None:
        self.args = (self.encoded_path,)

    def __str__(self) -> str:
        return f"invalid encoding: {self.encoded_path}"


@dataclasses.dataclass(slots=True)
class APIError(Exception):
    """Business error that must map to the standard error envelope."""

    code: str
    message: str
    status_code: int = 400
    details: Any | None = None


def make_error_payload(
    *, code: str, message: str, trace_id: str | None, details: Any | None
) -> dict[str, Any]:
    return {
        "code": code,
        "message": message,
        "details": details,
        "trace_id": trace_id,
    }
