import structlog
from fastapi import APIRouter, Depends, Request, Response

from air_quality_proxy.handlers.air_quality_handler import AirQualityHandler
from air_quality_proxy.models.proxy.proxy import ProxyRequest

logger = structlog.get_logger(__name__)

# Create router
router = APIRouter(prefix="/air-quality", tags=["Air Quality"])

# Every method reaches the handler so 405 responses keep the CORS headers and JSON body
HANDLED_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"]


def get_air_quality_handler(request: Request) -> AirQualityHandler:
    """Return the handler the application was built with."""
    return request.app.state.air_quality_handler


@router.api_route("", methods=HANDLED_METHODS, summary="Get Current Air Quality")
async def get_air_quality(
    request: Request,
    handler: AirQualityHandler = Depends(get_air_quality_handler),
):
    """
    Get current air quality for a location.

    Query parameters:
        lat: Latitude (required)
        lon: Longitude (required)
        city: City name echoed back in the payload (optional)

    Returns:
        JSON object with `aqi`, `components`, `timestamp` and `city`, or an
        `error` object. The response always carries permissive CORS headers.
    """
    proxy_request = ProxyRequest(
        method=request.method,
        query_params=dict(request.query_params),
    )
    proxy_response = await handler.handle(proxy_request)

    if proxy_response.status_code >= 400:
        logger.warning(
            "Air quality request rejected",
            method=request.method,
            status_code=proxy_response.status_code,
            error=(proxy_response.body or {}).get("error"),
        )

    return Response(
        content=proxy_response.render_body(),
        status_code=proxy_response.status_code,
        headers=proxy_response.headers,
    )
