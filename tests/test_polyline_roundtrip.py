from __future__ import annotations

import random

import pytest

from polyline_codec import InvalidCoordinateError, MAX_PRECISION, decode, encode


def _random_path(rng: random.Random, *, size: int) -> list[tuple[float, float]]:
    return [(rng.uniform(-90.0, 90.0), rng.uniform(-180.0, 180.0)) for _ in range(size)]


def _random_walk(rng: random.Random, *, size: int) -> list[tuple[float, float]]:
    # Consecutive points close together, like a recorded GPS track.
    lat, lng = rng.uniform(-60.0, 60.0), rng.uniform(-150.0, 150.0)
    path = []
    for _ in range(size):
        lat += rng.uniform(-0.001, 0.001)
        lng += rng.uniform(-0.001, 0.001)
        path.append((lat, lng))
    return path


@pytest.mark.parametrize("seed", range(10))
@pytest.mark.parametrize("precision", range(0, MAX_PRECISION + 1))
def test_roundtrip_reencodes_to_same_string(seed: int, precision: int) -> None:
    rng = random.Random(seed)
    path = _random_path(rng, size=rng.randint(1, 40))

    encoded = encode(path, precision)
    decoded = decode(encoded, precision)

    assert len(decoded) == len(path)
    assert encode(decoded, precision) == encoded


@pytest.mark.parametrize("seed", range(5))
def test_roundtrip_random_walk_is_within_precision(seed: int) -> None:
    rng = random.Random(seed)
    path = _random_walk(rng, size=200)

    decoded = decode(encode(path, 5), 5)

    for (lat, lng), point in zip(path, decoded):
        assert point.latitude == pytest.approx(lat, abs=0.5e-5 + 1e-12)
        assert point.longitude == pytest.approx(lng, abs=0.5e-5 + 1e-12)


def test_random_walk_is_more_compact_than_scattered_points() -> None:
    rng = random.Random(7)
    walk = encode(_random_walk(rng, size=100), 5)
    scattered = encode(_random_path(rng, size=100), 5)

    assert len(walk) < len(scattered)


@pytest.mark.parametrize("seed", range(20))
def test_encode_rejects_iff_some_coordinate_out_of_range(seed: int) -> None:
    rng = random.Random(seed)
    path = [
        (rng.uniform(-120.0, 120.0), rng.uniform(-200.0, 200.0))
        for _ in range(rng.randint(0, 5))
    ]
    should_error = any(abs(lat) > 90.0 or abs(lng) > 180.0 for lat, lng in path)

    if should_error:
        with pytest.raises(InvalidCoordinateError):
            encode(path, 5)
    else:
        encoded = encode(path, 5)
        assert encode(decode(encoded, 5), 5) == encoded


def test_encoded_characters_stay_in_alphabet() -> None:
    rng = random.Random(1234)
    encoded = encode(_random_path(rng, size=500), 6)

    assert all(63 <= ord(c) <= 126 for c in encoded)
