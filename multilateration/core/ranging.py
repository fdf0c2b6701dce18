import math

RSSI_AT_ONE_METER = -40.0
# assumed RSSI variance in dBm squared
RSSI_VARIANCE = 4.0


def rssi_to_distance(rssi: float, path_loss_exponent: float, rssi_at_one_meter: float = RSSI_AT_ONE_METER) -> float:
    """Distance in meters from the log-distance path loss model."""
    return 10.0 ** ((rssi_at_one_meter - rssi) / (10.0 * path_loss_exponent))


def rssi_variance_to_distance_variance(rssi: float, path_loss_exponent: float, rssi_variance: float = RSSI_VARIANCE, rssi_at_one_meter: float = RSSI_AT_ONE_METER) -> float:
    # first-order propagation of the RSSI variance through the path loss model
    d = rssi_to_distance(rssi, path_loss_exponent, rssi_at_one_meter)
    factor = (math.log(10.0) / (10.0 * path_loss_exponent)) * d
    return factor * factor * rssi_variance
