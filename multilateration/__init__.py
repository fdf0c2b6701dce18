"""Robust multilateration: position and variance from noisy range measurements."""

__version__ = "0.1.0"
