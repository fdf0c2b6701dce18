from collections import namedtuple
from types import SimpleNamespace

import pytest

from multilateration.core.marshal import MarshalError, decode_measurement, decode_measurements, encode_position, result_to_dict
from multilateration.core.estimator import EstimationResult
from multilateration.core.position import Position

ForeignPosition = namedtuple("ForeignPosition", ["x", "y", "z", "xy_variance", "z_variance"])


def _record(distance=5.0, **pos):
    fields = {"x": 1.0, "y": 2.0, "z": 3.0, "xy_variance": 4.0, "z_variance": 6.0}
    fields.update(pos)
    return SimpleNamespace(distance=distance, position=SimpleNamespace(**fields))


def test_decode_attribute_record():
    m = decode_measurement(_record())
    assert m.distance == 5.0
    assert m.position == Position(1.0, 2.0, 3.0, 4.0, 6.0)


def test_decode_mapping_record():
    rec = {"distance": "2.5", "position": {"x": 0, "y": 0, "z": 1, "xy_variance": 1, "z_variance": 2}}
    m = decode_measurement(rec)
    assert m.distance == 2.5
    assert m.position.z == 1.0
    assert isinstance(m.position.x, float)


def test_missing_field_names_measurement_index():
    recs = [_record(), {"distance": 1.0, "position": {"x": 0, "y": 0}}]
    with pytest.raises(MarshalError) as exc:
        decode_measurements(recs)
    assert "measurement 1" in str(exc.value)
    assert "'z'" in str(exc.value)


def test_non_numeric_field():
    with pytest.raises(MarshalError):
        decode_measurement(_record(distance="far"))
    with pytest.raises(ValueError):
        decode_measurement(_record(x=None))


def test_encode_uses_five_argument_constructor():
    p = Position(1.0, 2.0, 3.0, 4.0, 5.0)
    out = encode_position(p, ForeignPosition)
    assert out == ForeignPosition(1.0, 2.0, 3.0, 4.0, 5.0)
    assert encode_position(p) == p


def test_result_to_dict():
    res = EstimationResult(position=Position(1.0, 2.0, 3.0, 4.0, 5.0), iterations=7, converged=True)
    d = result_to_dict(res)
    assert d == {"x": 1.0, "y": 2.0, "z": 3.0, "xy_variance": 4.0, "z_variance": 5.0, "iterations": 7, "converged": True}
