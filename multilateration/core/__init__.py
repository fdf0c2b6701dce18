"""Core estimation modules package"""
from .position import Position, Measurement
from .initializer import initial_guess
from .estimator import EstimatorConfig, EstimationResult, estimate_position, multilaterate
from .marshal import MarshalError, decode_measurement, decode_measurements, encode_position
from .locator import AccessPointObservation, LocateResult, locate
