# /multilateration route
import logging
from typing import List

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from multilateration.core.estimator import multilaterate
from multilateration.core.marshal import MarshalError, decode_measurements, result_to_dict

logger = logging.getLogger("mlat.api")

router = APIRouter()


class PositionIn(BaseModel):
    x: float
    y: float
    z: float
    xy_variance: float
    z_variance: float


class MeasurementIn(BaseModel):
    distance: float
    position: PositionIn


class MultilaterationRequest(BaseModel):
    measurements: List[MeasurementIn]


@router.post('/multilateration')
def post_multilateration(req: MultilaterationRequest):
    if not req.measurements:
        raise HTTPException(status_code=422, detail={"code": "NO_MEASUREMENTS", "message": "at least one measurement is required"})
    try:
        measurements = decode_measurements(req.measurements)
    except MarshalError as e:
        logger.warning("rejected measurements: %s", e)
        raise HTTPException(status_code=422, detail={"code": "BAD_MEASUREMENT", "message": str(e)})

    result = multilaterate(measurements)
    return result_to_dict(result)
