# /health route
import time

from fastapi import APIRouter, Request

router = APIRouter()


@router.get('/health')
def health(request: Request):
    # mqtt_ok is None when the bridge is disabled
    mqtt_mgr = getattr(request.app.state, 'mqtt_manager', None)
    mqtt_ok = mqtt_mgr.connected if mqtt_mgr else None
    return {
        'ts_ms': int(time.time() * 1000),
        'mqtt_ok': mqtt_ok,
    }
