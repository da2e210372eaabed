from typing import Any, Dict, Optional

import httpx
import structlog
from pydantic import ValidationError

from air_quality_proxy.config.config import Config
from air_quality_proxy.exceptions.configuration import APIKeyNotSetError
from air_quality_proxy.exceptions.upstream import (
    UpstreamRequestError,
    UpstreamShapeError,
    UpstreamStatusError,
)
from air_quality_proxy.models.air_quality.air_quality import AirPollutionResponse

logger = structlog.get_logger(__name__)


class AirQualityService:
    """
    Service for fetching current air pollution data from OpenWeatherMap.

    Each call opens its own HTTP client with httpx defaults; there is no retry,
    rate limiting or caching.
    """

    def __init__(self, settings: Config, transport: Optional[httpx.AsyncBaseTransport] = None):
        """
        Initialize the air quality service.

        Args:
            settings: Application settings holding the API key and endpoint
            transport: Optional httpx transport, used to stub the upstream in tests
        """
        self.base_url = settings.openweather_air_pollution_url
        self.api_key = settings.openweather_api_key
        self.transport = transport

    async def _make_request(self, params: Dict[str, Any]) -> Any:
        """
        Make a single GET request to the air pollution endpoint.

        Args:
            params: Query parameters (the API key is added here)

        Returns:
            Parsed JSON body

        Raises:
            APIKeyNotSetError: If no API key is configured
            UpstreamStatusError: If OpenWeatherMap answers with a non-2xx status
            UpstreamRequestError: If the request could not be completed
            UpstreamShapeError: If the body is not valid JSON
        """
        if not self.api_key:
            raise APIKeyNotSetError("OPENWEATHER_API_KEY environment variable is not set")

        request_params = dict(params)
        request_params["appid"] = self.api_key

        try:
            async with httpx.AsyncClient(transport=self.transport) as client:
                response = await client.get(self.base_url, params=request_params)
        except httpx.RequestError as e:
            logger.error("Air pollution request failed", error=str(e))
            raise UpstreamRequestError(str(e)) from e

        if not response.is_success:
            logger.error(
                "OpenWeatherMap API error",
                status_code=response.status_code,
                reason=response.reason_phrase,
            )
            raise UpstreamStatusError(response.status_code, response.reason_phrase)

        try:
            return response.json()
        except ValueError as e:
            raise UpstreamShapeError(f"Invalid JSON received from OpenWeatherMap: {str(e)}") from e

    async def get_current_air_quality(self, lat: str, lon: str) -> AirPollutionResponse:
        """
        Get current air pollution data for a location.

        Args:
            lat: Latitude, forwarded as received
            lon: Longitude, forwarded as received

        Returns:
            AirPollutionResponse with at least one reading

        Raises:
            UpstreamShapeError: If the response lacks the expected fields
            UpstreamError: For other upstream failures
        """
        data = await self._make_request({"lat": lat, "lon": lon})

        try:
            return AirPollutionResponse.model_validate(data)
        except ValidationError as e:
            logger.error("Failed to parse air pollution data", lat=lat, lon=lon, error=str(e))
            raise UpstreamShapeError(f"Invalid air pollution data received: {str(e)}") from e
