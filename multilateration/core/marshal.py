"""Conversion between caller records and the estimator's value types.

A caller record is anything exposing ``distance`` and a nested ``position``
with ``x``, ``y``, ``z``, ``xy_variance`` and ``z_variance``, either as
attributes (pydantic models, dataclasses) or as mapping keys (parsed JSON).
"""
from typing import Any, Iterable, List, Mapping

from .position import Measurement, Position

POSITION_FIELDS = ("x", "y", "z", "xy_variance", "z_variance")


class MarshalError(ValueError):
    pass


def _field(record: Any, name: str) -> Any:
    if isinstance(record, Mapping):
        if name not in record:
            raise MarshalError(f"missing field '{name}'")
        return record[name]
    try:
        return getattr(record, name)
    except AttributeError:
        raise MarshalError(f"missing field '{name}'") from None


def _float_field(record: Any, name: str) -> float:
    value = _field(record, name)
    try:
        return float(value)
    except (TypeError, ValueError):
        raise MarshalError(f"field '{name}' is not a number: {value!r}") from None


def decode_position(record: Any) -> Position:
    return Position(*(_float_field(record, f) for f in POSITION_FIELDS))


def decode_measurement(record: Any) -> Measurement:
    distance = _float_field(record, "distance")
    position = decode_position(_field(record, "position"))
    return Measurement(position=position, distance=distance)


def decode_measurements(records: Iterable[Any]) -> List[Measurement]:
    out = []
    for i, r in enumerate(records):
        try:
            out.append(decode_measurement(r))
        except MarshalError as e:
            raise MarshalError(f"measurement {i}: {e}") from None
    return out


def encode_position(position: Position, result_type=Position):
    """Build ``result_type(x, y, z, xy_variance, z_variance)``."""
    return result_type(position.x, position.y, position.z, position.xy_variance, position.z_variance)


def position_to_dict(position: Position) -> dict:
    return {f: getattr(position, f) for f in POSITION_FIELDS}


def result_to_dict(result) -> dict:
    """Position fields plus the iteration count and convergence flag of an EstimationResult."""
    out = position_to_dict(result.position)
    out['iterations'] = result.iterations
    out['converged'] = result.converged
    return out
