from air_quality_proxy.exceptions.base import AirQualityProxyError


class ConfigurationError(AirQualityProxyError):
    """Base exception for server-side configuration problems."""

    status_code = 500
