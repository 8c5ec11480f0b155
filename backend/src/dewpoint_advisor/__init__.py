"""Dew Point Advisor - ventilation advice from indoor/outdoor dew points and live station data."""

__version__ = "0.1.0"
