import threading
import logging

from fastapi import FastAPI

from multilateration import config
from multilateration.api import router as api_router
from multilateration.mqtt.mqtt_manager import MQTTManager

logging.basicConfig(level=config.LOG_LEVEL)
logger = logging.getLogger("mlat.app")

app = FastAPI(title="Multilateration API")

app.include_router(api_router)


@app.on_event("startup")
def startup_event():
    if not config.MQTT_ENABLED:
        logger.info("Starting app: MQTT bridge disabled")
        return
    logger.info("Starting app: starting MQTT bridge on %s:%d", config.MQTT_HOST, config.MQTT_PORT)
    mqtt_mgr = MQTTManager()
    thread = threading.Thread(target=mqtt_mgr.run, daemon=True, name="mqtt-manager")
    thread.start()
    app.state.mqtt_manager = mqtt_mgr


@app.on_event("shutdown")
def shutdown_event():
    logger.info("Shutting down app")
    mqtt_mgr = getattr(app.state, "mqtt_manager", None)
    if mqtt_mgr:
        mqtt_mgr.stop()
