from air_quality_proxy.exceptions.base import AirQualityProxyError


class UpstreamError(AirQualityProxyError):
    """Base exception for failures talking to OpenWeatherMap."""

    status_code = 500
