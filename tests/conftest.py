from __future__ import annotations

from pathlib import Path
from typing import Iterator
import sys

import pytest
from fastapi.testclient import TestClient


# Ensure `import polyline_codec.*` works when pytest chooses an import mode
# that doesn't automatically add the project root to sys.path.
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))


@pytest.fixture()
def client(monkeypatch: pytest.MonkeyPatch) -> Iterator[TestClient]:
    # Small limits so size checks are cheap to exercise.
    monkeypatch.setenv("POLYLINE_DEFAULT_PRECISION", "5")
    monkeypatch.setenv("POLYLINE_MAX_PATH_POINTS", "50")
    monkeypatch.setenv("POLYLINE_MAX_ENCODED_LENGTH", "500")
    monkeypatch.setenv("POLYLINE_CORS_ALLOW_ORIGIN", "http://localhost:3000")

    from polyline_codec.core.settings import get_settings

    get_settings.cache_clear()

    from polyline_codec.main import create_app

    app = create_app()
    yield TestClient(app)

    get_settings.cache_clear()
