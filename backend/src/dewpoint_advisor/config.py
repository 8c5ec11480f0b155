import os

# Estonian Environment Agency public API
ENVIR_BASE_URL = "https://publicapi.envir.ee/v1"
BEACH_URL = f"{ENVIR_BASE_URL}/combinedWeatherData/coastalSeaStationsWeatherToday"
HUMIDITY_URL = f"{ENVIR_BASE_URL}/misc/observationAirHumidityMap"

# OpenWeather
OPENWEATHER_BASE_URL = "https://api.openweathermap.org/data/2.5"
OPENWEATHER_API_KEY_ENV = "OPENWEATHER_API_KEY"

# HTTP
HTTP_TIMEOUT_SECONDS = 30
USER_AGENT = "Mozilla/5.0"

# Haversine
EARTH_RADIUS_KM = 6371.0

# Magnus approximation constants
MAGNUS_A = 17.625
MAGNUS_B = 243.04

# Ventilation policy: dew point difference (°C) below which ventilation makes little difference
DEADBAND_C = 2.0

# Forecast horizons surfaced to the frontend (hours ahead)
FORECAST_HORIZONS_HOURS = (6, 12)

# Hours to walk back when the current humidity map is not yet published
HUMIDITY_LOOKBACK_HOURS = 4

# Dew point chart
GRID_TEMPERATURES_C = tuple(range(13, 28, 2))
GRID_HUMIDITIES_PCT = tuple(range(50, 99, 8))

# Input validation for dew point requests
MIN_TEMP_C = -45.0
MAX_TEMP_C = 60.0

# Frontend defaults
DEFAULT_CITY = "Viimsi"
DEFAULT_INDOOR_TEMP_C = 22.0
DEFAULT_INDOOR_RH_PCT = 50.0
DEFAULT_OUTDOOR_TEMP_C = 15.0
DEFAULT_OUTDOOR_RH_PCT = 60.0

CORS_ORIGINS = ["http://localhost:3000", "http://127.0.0.1:3000"]


def openweather_api_key() -> str | None:
    """Read the OpenWeather key at call time so tests can patch the environment."""
    return os.environ.get(OPENWEATHER_API_KEY_ENV) or None
