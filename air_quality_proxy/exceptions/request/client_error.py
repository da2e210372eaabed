from air_quality_proxy.exceptions.base import AirQualityProxyError


class ClientError(AirQualityProxyError):
    """Base exception for invalid inbound requests."""

    status_code = 400
