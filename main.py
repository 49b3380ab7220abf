from __future__ import annotations

from polyline_codec.main import app


__all__ = ["app"]
