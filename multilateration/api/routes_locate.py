# /locate route
from typing import List, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from multilateration import config
from multilateration.core.locator import DEFAULT_PATH_LOSS_EXPONENT, AccessPointObservation, locate

# physical range of indoor path loss exponents
MIN_PATH_LOSS_EXPONENT = 1.0
MAX_PATH_LOSS_EXPONENT = 10.0

router = APIRouter()


class ObservationIn(BaseModel):
    latitude: float
    longitude: float
    altitude: Optional[float] = None
    xy_variance: float
    z_variance: Optional[float] = None
    rssi: float
    path_loss_exponent: float = Field(DEFAULT_PATH_LOSS_EXPONENT, ge=MIN_PATH_LOSS_EXPONENT, le=MAX_PATH_LOSS_EXPONENT)


class LocateRequest(BaseModel):
    observations: List[ObservationIn]
    confidence_level: float = config.CONFIDENCE_LEVEL


@router.post('/locate')
def post_locate(req: LocateRequest):
    if not req.observations:
        raise HTTPException(status_code=422, detail={"code": "NO_OBSERVATIONS", "message": "at least one observation is required"})
    if not 0.0 < req.confidence_level < 1.0:
        raise HTTPException(status_code=422, detail={"code": "BAD_CONFIDENCE_LEVEL", "message": "confidence_level must be between 0 and 1 (exclusive)"})

    observations = [
        AccessPointObservation(
            latitude=o.latitude,
            longitude=o.longitude,
            rssi=o.rssi,
            xy_variance=o.xy_variance,
            altitude=o.altitude,
            z_variance=o.z_variance,
            path_loss_exponent=o.path_loss_exponent,
        )
        for o in req.observations
    ]
    try:
        res = locate(observations, req.confidence_level)
    except OverflowError:
        # rssi too far from the 1 m reference for the path loss model
        raise HTTPException(status_code=422, detail={"code": "BAD_OBSERVATION", "message": "rssi out of range for the path loss model"})
    return {
        'latitude': res.location.latitude,
        'longitude': res.location.longitude,
        'altitude': res.location.altitude,
        'xy_accuracy_radius': res.xy_accuracy_radius,
        'z_accuracy_radius': res.z_accuracy_radius,
        'iterations': res.iterations,
        'converged': res.converged,
    }
