from datetime import datetime, timezone

import httpx
import pytest

from air_quality_proxy.config.config import Config
from air_quality_proxy.handlers.air_quality_handler import AirQualityHandler

FIXED_NOW = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def settings():
    """Settings with an API key, isolated from any local .env file."""
    return Config(_env_file=None, openweather_api_key="test-weather-key")


@pytest.fixture
def settings_without_key():
    """Settings with no API key configured."""
    return Config(_env_file=None, openweather_api_key=None)


@pytest.fixture
def sample_air_pollution_body():
    """Minimal successful air pollution API body."""
    return {"list": [{"main": {"aqi": 3}, "components": {"co": 200.5}}]}


@pytest.fixture
def full_air_pollution_body():
    """Air pollution API body as returned by OpenWeatherMap."""
    return {
        "coord": {"lon": 2.3522, "lat": 48.8566},
        "list": [
            {
                "main": {"aqi": 2},
                "components": {
                    "co": 230.31,
                    "no": 0,
                    "no2": 12.85,
                    "o3": 61.51,
                    "so2": 1.62,
                    "pm2_5": 5.79,
                    "pm10": 8.14,
                    "nh3": 0.5,
                },
                "dt": 1704110400,
            }
        ],
    }


@pytest.fixture
def upstream_requests():
    """Requests seen by the stubbed upstream."""
    return []


@pytest.fixture
def make_transport(upstream_requests):
    """Factory for an httpx.MockTransport standing in for OpenWeatherMap."""

    def factory(status_code=200, json_body=None, content=b"", error=None):
        def handler(request: httpx.Request) -> httpx.Response:
            upstream_requests.append(request)
            if error is not None:
                raise error
            if json_body is not None:
                return httpx.Response(status_code, json=json_body)
            return httpx.Response(status_code, content=content)

        return httpx.MockTransport(handler)

    return factory


@pytest.fixture
def make_handler(settings, make_transport):
    """Factory for an AirQualityHandler wired to a stubbed upstream and a fixed clock."""

    def factory(handler_settings=None, clock=lambda: FIXED_NOW, **transport_kwargs):
        return AirQualityHandler(
            handler_settings or settings,
            transport=make_transport(**transport_kwargs),
            clock=clock,
        )

    return factory
