from __future__ import annotations

import pickle

from polyline_codec import InvalidCoordinateError, InvalidEncodingError, PolylineError


def test_codec_errors_are_hashable() -> None:
    errors = {
        InvalidCoordinateError(latitude=91.0, longitude=0.0),
        InvalidEncodingError(encoded_path="_"),
    }
    assert len(errors) == 2


def test_codec_errors_carry_args() -> None:
    assert InvalidCoordinateError(91.0, 10.0).args == (91.0, 10.0)
    assert InvalidEncodingError("_p~iF").args == ("_p~iF",)


def test_invalid_coordinate_error_pickles() -> None:
    err = pickle.loads(pickle.dumps(InvalidCoordinateError(91.0, 10.0)))

    assert isinstance(err, InvalidCoordinateError)
    assert isinstance(err, PolylineError)
    assert (err.latitude, err.longitude) == (91.0, 10.0)
    assert str(err) == "invalid lat lng: (91.0, 10.0)"


def test_invalid_encoding_error_pickles() -> None:
    err = pickle.loads(pickle.dumps(InvalidEncodingError("_p~iF")))

    assert isinstance(err, InvalidEncodingError)
    assert err.encoded_path == "_p~iF"
    assert str(err) == "invalid encoding: _p~iF"
