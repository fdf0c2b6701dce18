import threading
import logging
from typing import Optional, Tuple

import paho.mqtt.client as mqtt

from multilateration import config
from multilateration.core.estimator import EstimatorConfig, multilaterate
from multilateration.core.marshal import MarshalError, decode_measurements
from multilateration.mqtt import topics, payloads

logger = logging.getLogger("mlat.mqtt")

RECONNECT_DELAY_S = 5


class MQTTManager:
    """Answers multilateration requests published on ``mlat/<client_id>/request``."""

    def __init__(self, host: str = None, port: int = None, estimator_config: Optional[EstimatorConfig] = None):
        self.host = host
        self.port = port
        self.estimator_config = estimator_config
        self.connected = False
        self._stop = threading.Event()
        self.client: Optional[mqtt.Client] = None

    def handle_message(self, topic: str, payload_bytes: bytes) -> Optional[Tuple[str, str]]:
        """Solve one request; returns (result_topic, payload) or None to drop it."""
        client_id = topics.client_id_from_topic(topic)
        if client_id is None:
            logger.warning("ignoring message on unexpected topic %s", topic)
            return None
        reply_topic = topics.result_topic(client_id)

        payload = payloads.parse_json_payload(payload_bytes)
        if not isinstance(payload, dict):
            logger.warning("dropping undecodable request from %s", client_id)
            return None

        records = payload.get('measurements') or []
        if not isinstance(records, list) or not records:
            return reply_topic, payloads.error_payload('NO_MEASUREMENTS', 'at least one measurement is required')
        try:
            measurements = decode_measurements(records)
        except MarshalError as e:
            return reply_topic, payloads.error_payload('BAD_MEASUREMENT', str(e))

        result = multilaterate(measurements, self.estimator_config)
        return reply_topic, payloads.result_payload(result)

    def run(self):
        host = self.host or config.MQTT_HOST
        port = self.port or config.MQTT_PORT
        client = mqtt.Client(mqtt.CallbackAPIVersion.VERSION2)

        def on_connect(c, userdata, flags, reason_code, properties):
            logger.info("MQTT connected: rc=%s", reason_code)
            self.connected = True
            c.subscribe(topics.REQUEST_TOPIC)

        def on_disconnect(c, userdata, flags, reason_code, properties):
            logger.info("MQTT disconnected: rc=%s", reason_code)
            self.connected = False

        def on_message(c, userdata, msg):
            try:
                reply = self.handle_message(msg.topic, msg.payload)
            except Exception:
                logger.exception("Error handling MQTT message on %s", msg.topic)
                return
            if reply:
                c.publish(reply[0], reply[1])

        client.on_connect = on_connect
        client.on_disconnect = on_disconnect
        client.on_message = on_message

        self.client = client

        while not self._stop.is_set():
            try:
                client.connect(host, port, keepalive=60)
                client.loop_start()
                # run until stopped
                while not self._stop.wait(1):
                    pass
                client.loop_stop()
                client.disconnect()
            except Exception:
                logger.exception("MQTT connection failed, retrying in %ds", RECONNECT_DELAY_S)
                self._stop.wait(RECONNECT_DELAY_S)

    def stop(self):
        self._stop.set()
        try:
            if self.client:
                self.client.disconnect()
        except Exception:
            logger.exception("MQTT disconnect failed")
        self.connected = False
