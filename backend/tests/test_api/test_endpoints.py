"""API endpoint tests using TestClient with patched upstream fetchers."""

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from dewpoint_advisor.api.app import create_app
from dewpoint_advisor.errors import EnvirError, OpenWeatherError
from dewpoint_advisor.ingest.envir import HumiditySnapshot
from dewpoint_advisor.ingest.openweather import WeatherBundle
from dewpoint_advisor.models import ForecastSample, GeoPoint, StationReading


@pytest.fixture
def client():
    return TestClient(create_app(), raise_server_exceptions=True)


@pytest.fixture
def beach_stations() -> list[StationReading]:
    return [
        StationReading(
            "beach", "Pärnu rand", GeoPoint(58.38, 24.50), 18.0,
            measured_at="2024-07-15 12:00",
            extras={"ta1ha": "20,1", "ws1hx": "3", "wd10ma": "180"},
        ),
        StationReading(
            "beach", "Pirita rand", GeoPoint(59.47, 24.83), 15.3,
            measured_at="2024-07-15 12:00",
            extras={"ta1ha": "17,1", "ws1hx": "4,2", "wd10ma": None},
        ),
    ]


class TestHealthEndpoint:
    def test_health(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}


class TestBeachEndpoint:
    @patch("dewpoint_advisor.api.routers.beach.fetch_beach_stations")
    def test_nearest_and_all(self, mock_fetch, client, beach_stations):
        mock_fetch.return_value = beach_stations

        resp = client.get("/beach", params={"lat": 59.5, "lon": 24.83})

        assert resp.status_code == 200
        data = resp.json()
        assert data["nearest"]["name"] == "Pirita rand"
        assert data["nearest"]["temp"] == 15.3
        assert data["nearest"]["distance_km"] < 5
        assert len(data["all"]) == 2
        assert data["all"][0]["wind_compass"] == "S"
        assert data["all"][1]["wind_compass"] is None

    @patch("dewpoint_advisor.api.routers.beach.fetch_beach_stations")
    def test_all_without_location(self, mock_fetch, client, beach_stations):
        mock_fetch.return_value = beach_stations

        resp = client.get("/beach")

        assert resp.status_code == 200
        assert resp.json()["nearest"] is None
        assert len(resp.json()["all"]) == 2

    @patch("dewpoint_advisor.api.routers.beach.fetch_beach_stations")
    def test_no_stations(self, mock_fetch, client):
        mock_fetch.return_value = []

        resp = client.get("/beach")

        assert resp.status_code == 404
        assert resp.json()["detail"] == "No beach data available"

    @patch("dewpoint_advisor.api.routers.beach.fetch_beach_stations")
    def test_upstream_failure(self, mock_fetch, client):
        mock_fetch.side_effect = EnvirError("API returned 503", status_code=503)

        resp = client.get("/beach", params={"lat": 59.5, "lon": 24.83})

        assert resp.status_code == 404


class TestHumidityEndpoint:
    @patch("dewpoint_advisor.api.routers.humidity.fetch_latest_humidity")
    def test_nearest(self, mock_fetch, client):
        mock_fetch.return_value = HumiditySnapshot(
            stations=[
                StationReading("humidity", "Tallinn-Harku", GeoPoint(59.398, 24.603), 78.0, "2024-07-15 11:00"),
                StationReading("humidity", "Tartu-Tõravere", GeoPoint(58.264, 26.466), 65.0, "2024-07-15 11:00"),
            ],
            date_str="2024-07-15",
            hour_str="11",
        )

        resp = client.get("/humidity", params={"lat": 59.5, "lon": 24.83})

        assert resp.status_code == 200
        data = resp.json()
        assert data["nearest"]["name"] == "Tallinn-Harku"
        assert data["nearest"]["humidity"] == 78.0
        assert data["nearest"]["timestamp"] == "2024-07-15 11:00"
        assert data["stations_count"] == 2
        assert data["hour_str"] == "11"

    def test_requires_location(self, client):
        resp = client.get("/humidity")
        assert resp.status_code == 422

    def test_rejects_invalid_latitude(self, client):
        resp = client.get("/humidity", params={"lat": 123, "lon": 24.83})
        assert resp.status_code == 422

    @patch("dewpoint_advisor.api.routers.humidity.fetch_latest_humidity")
    def test_no_recent_data(self, mock_fetch, client):
        mock_fetch.return_value = None

        resp = client.get("/humidity", params={"lat": 59.5, "lon": 24.83})

        assert resp.status_code == 404
        assert resp.json()["detail"] == "No recent humidity data available"


class TestWeatherEndpoint:
    def test_missing_api_key(self, client, monkeypatch):
        monkeypatch.delenv("OPENWEATHER_API_KEY", raising=False)
        resp = client.get("/weather", params={"city": "Viimsi"})
        assert resp.status_code == 500
        assert resp.json()["detail"] == "Missing OPENWEATHER_API_KEY"

    def test_requires_locator(self, client, monkeypatch):
        monkeypatch.setenv("OPENWEATHER_API_KEY", "KEY")
        resp = client.get("/weather", params={"lat": 59.5})
        assert resp.status_code == 400

    @patch("dewpoint_advisor.api.routers.weather.fetch_weather_with_forecast")
    def test_weather_with_picks(self, mock_fetch, client, monkeypatch):
        monkeypatch.setenv("OPENWEATHER_API_KEY", "KEY")
        mock_fetch.return_value = WeatherBundle(
            weather={"name": "Viimsi", "main": {"temp": 16.2, "humidity": 72}},
            picked={
                6: ForecastSample(1721080800, 15.0, 75.0, "2024-07-15 22:00:00"),
                12: None,
            },
        )

        resp = client.get("/weather", params={"city": "Viimsi"})

        assert resp.status_code == 200
        data = resp.json()
        assert data["weather"]["name"] == "Viimsi"
        assert data["picked"]["six_hour"]["temp"] == 15.0
        assert data["picked"]["six_hour"]["dew_point_c"] == pytest.approx(10.6, abs=0.1)
        assert data["picked"]["twelve_hour"] is None
        mock_fetch.assert_called_once_with("KEY", city="Viimsi", lat=None, lon=None)

    @patch("dewpoint_advisor.api.routers.weather.fetch_weather_with_forecast")
    def test_upstream_status_passed_through(self, mock_fetch, client, monkeypatch):
        monkeypatch.setenv("OPENWEATHER_API_KEY", "KEY")
        mock_fetch.side_effect = OpenWeatherError("weather fetch failed", status_code=404, detail="city not found")

        resp = client.get("/weather", params={"city": "Atlantis"})

        assert resp.status_code == 404
        assert resp.json()["detail"] == {"error": "Weather fetch failed", "detail": "city not found"}


class TestDewPointEndpoint:
    def test_ventilate(self, client):
        resp = client.get("/dewpoint", params={
            "indoor_temp": 22, "indoor_rh": 60,
            "outdoor_temp": 10, "outdoor_rh": 60,
        })
        assert resp.status_code == 200
        data = resp.json()
        assert data["recommendation"] == "ventilate"
        assert data["message"].startswith("Outdoor dew point is lower")
        assert data["diff"] == pytest.approx(data["indoor_dew_point_c"] - data["outdoor_dew_point_c"], abs=0.02)

    def test_hold(self, client):
        resp = client.get("/dewpoint", params={
            "indoor_temp": 20, "indoor_rh": 40,
            "outdoor_temp": 28, "outdoor_rh": 80,
        })
        assert resp.json()["recommendation"] == "hold"

    def test_defaults(self, client):
        resp = client.get("/dewpoint")
        assert resp.status_code == 200
        # 22 °C / 50 % indoors vs 15 °C / 60 % outdoors
        assert resp.json()["recommendation"] == "ventilate"

    def test_zero_humidity_rejected(self, client):
        resp = client.get("/dewpoint", params={"indoor_rh": 0})
        assert resp.status_code == 422

    def test_temperature_out_of_range(self, client):
        resp = client.get("/dewpoint", params={"outdoor_temp": 75})
        assert resp.status_code == 422

    def test_grid(self, client):
        resp = client.get("/dewpoint/grid")
        assert resp.status_code == 200
        data = resp.json()
        assert len(data["temperatures"]) == 8
        assert len(data["humidities"]) == 7
        assert len(data["grid"]) == 7
        assert all(len(row) == 8 for row in data["grid"])
