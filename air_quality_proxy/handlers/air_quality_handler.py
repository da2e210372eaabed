from datetime import datetime, timezone
from typing import Callable, Optional

import httpx
import structlog

from air_quality_proxy.config.config import Config
from air_quality_proxy.exceptions.base import AirQualityProxyError
from air_quality_proxy.exceptions.configuration import APIKeyNotSetError
from air_quality_proxy.exceptions.request import MethodNotAllowedError, MissingParametersError
from air_quality_proxy.exceptions.upstream import UpstreamShapeError, UpstreamStatusError
from air_quality_proxy.models.air_quality.air_quality import AirQualityPayload, AirQualityQuery
from air_quality_proxy.models.proxy.proxy import ProxyRequest, ProxyResponse
from air_quality_proxy.services.air_quality_service import AirQualityService

logger = structlog.get_logger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class AirQualityHandler:
    """
    Handles one air quality request end to end.

    Validates the method and query, calls OpenWeatherMap through
    ``AirQualityService`` and reshapes the first reading into an
    ``AirQualityPayload``. Every outcome, including errors, is returned as a
    ``ProxyResponse`` carrying the CORS headers.
    """

    def __init__(
        self,
        settings: Config,
        service: Optional[AirQualityService] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.settings = settings
        self.service = service or AirQualityService(settings, transport=transport)
        self.clock = clock

    async def handle(self, request: ProxyRequest) -> ProxyResponse:
        """
        Produce the response for an inbound request.

        Args:
            request: Framework-neutral inbound request

        Returns:
            ProxyResponse with status code, CORS headers and JSON body
        """
        # CORS preflight
        if request.method == "OPTIONS":
            return ProxyResponse.build(200)

        try:
            if request.method != "GET":
                raise MethodNotAllowedError()

            query = self._parse_query(request)

            if not self.settings.openweather_api_key:
                logger.error("OPENWEATHER_API_KEY environment variable is not set")
                raise APIKeyNotSetError()

        except AirQualityProxyError as e:
            return ProxyResponse.build(e.status_code, e.to_body())

        try:
            payload = await self._fetch_payload(query)
        except UpstreamStatusError as e:
            return ProxyResponse.build(e.status_code, e.to_body())
        except UpstreamShapeError as e:
            logger.error("Unexpected air pollution response shape", error=str(e))
            return self._internal_error(e)
        except Exception as e:
            logger.error("Error in air quality handler", error=str(e), exc_info=True)
            return self._internal_error(e)

        return ProxyResponse.build(200, payload.model_dump())

    def _parse_query(self, request: ProxyRequest) -> AirQualityQuery:
        lat = request.param("lat")
        lon = request.param("lon")

        if not lat or not lon:
            raise MissingParametersError()

        return AirQualityQuery(lat=lat, lon=lon, city=request.param("city"))

    async def _fetch_payload(self, query: AirQualityQuery) -> AirQualityPayload:
        logger.info(
            "Fetching air quality data",
            city=query.city or "unknown city",
            lat=query.lat,
            lon=query.lon,
        )

        response = await self.service.get_current_air_quality(query.lat, query.lon)
        payload = AirQualityPayload.from_air_pollution_response(
            response, city=query.city, handled_at=self.clock()
        )

        logger.info(
            "Successfully fetched air quality data",
            city=query.city or "unknown city",
            aqi=payload.aqi,
        )
        return payload

    @staticmethod
    def _internal_error(error: Exception) -> ProxyResponse:
        return ProxyResponse.build(500, {"error": "Internal server error", "message": str(error)})
