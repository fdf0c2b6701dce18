import os

# Logging
LOG_LEVEL = os.environ.get("MLAT_LOG_LEVEL", "INFO").upper()

# Estimator defaults (can be overridden per call with EstimatorConfig)
MAX_ITERATIONS = int(os.environ.get("MLAT_MAX_ITERATIONS", "10000"))
TOLERANCE = float(os.environ.get("MLAT_TOLERANCE", "1e-6"))
MIN_LIKELIHOOD = float(os.environ.get("MLAT_MIN_LIKELIHOOD", "1e-6"))
DISTANCE_SIGMA = float(os.environ.get("MLAT_DISTANCE_SIGMA", "10.0"))
POSITION_LEARNING_RATE = float(os.environ.get("MLAT_POSITION_LEARNING_RATE", "1.0"))
VARIANCE_LEARNING_RATE = float(os.environ.get("MLAT_VARIANCE_LEARNING_RATE", "1.0"))

# Confidence level used for accuracy radii when a request does not supply one
CONFIDENCE_LEVEL = float(os.environ.get("MLAT_CONFIDENCE_LEVEL", "0.68"))

# MQTT bridge
MQTT_ENABLED = os.environ.get("MLAT_MQTT_ENABLED", "0").lower() in ("1", "true", "yes")
MQTT_HOST = os.environ.get("MLAT_MQTT_HOST", "localhost")
MQTT_PORT = int(os.environ.get("MLAT_MQTT_PORT", "1883"))
