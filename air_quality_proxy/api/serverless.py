"""Serverless entrypoint for Netlify Functions / API Gateway proxy events.

The event carries ``httpMethod`` and ``queryStringParameters`` (``null`` when
the query string is empty); the return value is the proxy response shape
``{"statusCode", "headers", "body"}`` with ``body`` as a string.
"""

import asyncio
from typing import Any, Callable, Dict, Mapping

import structlog

from air_quality_proxy.config.config import config
from air_quality_proxy.handlers.air_quality_handler import AirQualityHandler
from air_quality_proxy.models.proxy.proxy import ProxyRequest, ProxyResponse

logger = structlog.get_logger(__name__)

LambdaHandler = Callable[[Mapping[str, Any], Any], Dict[str, Any]]


def event_to_request(event: Mapping[str, Any]) -> ProxyRequest:
    return ProxyRequest(
        method=event.get("httpMethod") or "",
        query_params=event.get("queryStringParameters"),
    )


def response_to_result(response: ProxyResponse) -> Dict[str, Any]:
    return {
        "statusCode": response.status_code,
        "headers": dict(response.headers),
        "body": response.render_body(),
    }


def build_lambda_handler(air_quality_handler: AirQualityHandler) -> LambdaHandler:
    """
    Wrap an ``AirQualityHandler`` as a synchronous ``handler(event, context)`` function.

    Args:
        air_quality_handler: Handler to run once per invocation

    Returns:
        Function suitable as a Netlify / Lambda entrypoint
    """

    def lambda_handler(event: Mapping[str, Any], context: Any) -> Dict[str, Any]:
        request = event_to_request(event)
        logger.info("Serverless invocation", method=request.method)

        response = asyncio.run(air_quality_handler.handle(request))
        return response_to_result(response)

    return lambda_handler


handler = build_lambda_handler(AirQualityHandler(config))
