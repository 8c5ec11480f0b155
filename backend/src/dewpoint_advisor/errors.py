"""Exceptions raised by the upstream fetch layer."""

from __future__ import annotations


class UpstreamError(Exception):
    """An upstream provider could not be reached or returned an unusable response."""

    def __init__(self, message: str, status_code: int | None = None, detail: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail


class EnvirError(UpstreamError):
    """Estonian Environment Agency API failure."""


class OpenWeatherError(UpstreamError):
    """OpenWeather API failure."""
