"""
Tests for storing and restoring morph results as JSON.
"""

import json
import math

import numpy as np
import pytest

from rebarmorph import ArcCurve, LineCurve, MorphMetadata, RebarMorphError, morph_curves


@pytest.fixture
def result():
    arc = ArcCurve((0.0, 0.0, 0.0), 4.0, 0.0, math.pi)
    line = LineCurve((-6.0, 0.0, 0.0), (6.0, 0.0, 0.0))
    return morph_curves(line, arc, precision=6, number_of_bars=3)


def test_payload_layout(result):
    payload = MorphMetadata.to_payload(result)
    assert payload["key"] == "rebar_morph_result"
    assert payload["version"] == "1.0"
    assert payload["options"]["precision"] == 6
    assert payload["weights"] == [0.0, 0.5, 1.0]
    assert len(payload["bars"]) == 3
    assert len(payload["bars"][0]) == 6


def test_json_restores_result(result):
    restored = MorphMetadata.from_json(MorphMetadata.to_json(result))
    assert restored.options == result.options
    assert restored.weights == result.weights
    for original, copy in zip(result, restored):
        np.testing.assert_allclose(copy.points, original.points)
        np.testing.assert_allclose(copy.evaluate(0.3), original.evaluate(0.3))


def test_rejects_malformed_json():
    with pytest.raises(RebarMorphError):
        MorphMetadata.from_json("{not json")


def test_rejects_foreign_key(result):
    payload = MorphMetadata.to_payload(result)
    payload["key"] = "detail_camera_metadata"
    with pytest.raises(RebarMorphError, match="unexpected key"):
        MorphMetadata.from_json(json.dumps(payload))


def test_rejects_unknown_version(result):
    payload = MorphMetadata.to_payload(result)
    payload["version"] = "9.9"
    with pytest.raises(RebarMorphError, match="unsupported version"):
        MorphMetadata.from_json(json.dumps(payload))


def test_rejects_bar_count_mismatch(result):
    payload = MorphMetadata.to_payload(result)
    payload["bars"] = payload["bars"][:2]
    with pytest.raises(RebarMorphError, match="bar count mismatch"):
        MorphMetadata.from_json(json.dumps(payload))


def test_rejects_missing_options(result):
    payload = MorphMetadata.to_payload(result)
    del payload["options"]
    with pytest.raises(RebarMorphError):
        MorphMetadata.from_json(json.dumps(payload))


@pytest.mark.parametrize("bars", [[None, 5, 7], [[[0, 0, 0]], [[0, 0, 0], [1, 0, 0]], "bar"]])
def test_rejects_malformed_bar_points(result, bars):
    payload = MorphMetadata.to_payload(result)
    payload["bars"] = bars
    with pytest.raises(RebarMorphError, match="bar 0"):
        MorphMetadata.from_json(json.dumps(payload))


def test_numpy_counts_serialise():
    line = LineCurve((0.0, 0.0, 0.0), (4.0, 0.0, 0.0))
    other = LineCurve((0.0, 2.0, 0.0), (4.0, 2.0, 0.0))
    restored = MorphMetadata.from_json(MorphMetadata.to_json(morph_curves(line, other, np.int64(3), np.int64(2))))
    assert restored.options.precision == 3
    assert len(restored) == 2
