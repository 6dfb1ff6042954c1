"""
Tests for MorphOptions validation and metadata conversion.
"""

import numpy as np
import pytest

from rebarmorph import Constants, InvalidArgumentError, MorphOptions, RebarMorphError


def test_defaults():
    options = MorphOptions(precision=8, number_of_bars=4)
    assert options.degree == Constants.DEFAULT_DEGREE
    assert options.tolerance == Constants.TOLERANCE
    assert options.sample_count == 8


def test_precision_one_samples_two_points():
    assert MorphOptions(precision=1, number_of_bars=1).sample_count == 2


@pytest.mark.parametrize(
    "kwargs",
    [
        {"precision": 0, "number_of_bars": 1},
        {"precision": 1, "number_of_bars": 0},
        {"precision": "4", "number_of_bars": 1},
        {"precision": 4, "number_of_bars": 1, "degree": 4},
        {"precision": 4, "number_of_bars": 1, "degree": 3.0},
        {"precision": 4, "number_of_bars": 1, "tolerance": 0.0},
        {"precision": 4, "number_of_bars": 1, "tolerance": float("nan")},
    ],
)
def test_rejects_invalid_values(kwargs):
    with pytest.raises(InvalidArgumentError) as excinfo:
        MorphOptions(**kwargs)
    assert isinstance(excinfo.value, ValueError)
    assert isinstance(excinfo.value, RebarMorphError)


def test_error_carries_context():
    with pytest.raises(InvalidArgumentError) as excinfo:
        MorphOptions(precision=-3, number_of_bars=2)
    assert excinfo.value.context == {"precision": -3}
    assert "-3" in str(excinfo.value)


def test_metadata_round_trip():
    options = MorphOptions(precision=12, number_of_bars=5, degree=5)
    assert MorphOptions.from_metadata(options.to_metadata()) == options


def test_from_metadata_fills_defaults():
    options = MorphOptions.from_metadata({"precision": 3, "number_of_bars": 2})
    assert options.degree == Constants.DEFAULT_DEGREE


def test_from_metadata_requires_counts():
    with pytest.raises(InvalidArgumentError, match="number_of_bars"):
        MorphOptions.from_metadata({"precision": 3})


def test_numpy_values_become_builtins():
    options = MorphOptions(
        precision=np.int64(6), number_of_bars=np.int32(3), degree=np.int16(5), tolerance=np.float32(1e-6)
    )
    assert type(options.precision) is int
    assert type(options.number_of_bars) is int
    assert type(options.degree) is int
    assert type(options.tolerance) is float
    assert options.to_metadata()["precision"] == 6


@pytest.mark.parametrize("kwargs", [{"precision": True, "number_of_bars": 2}, {"precision": 3, "number_of_bars": 2, "tolerance": True}])
def test_rejects_bools(kwargs):
    with pytest.raises(InvalidArgumentError):
        MorphOptions(**kwargs)


def test_from_metadata_ignores_unknown_keys():
    options = MorphOptions.from_metadata({"precision": 3, "number_of_bars": 2, "layer": "rebar"})
    assert options == MorphOptions(precision=3, number_of_bars=2)


def test_from_metadata_lists_every_missing_count():
    with pytest.raises(InvalidArgumentError) as excinfo:
        MorphOptions.from_metadata(None)
    assert excinfo.value.context == {"missing": ["precision", "number_of_bars"]}
