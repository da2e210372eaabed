from air_quality_proxy.exceptions.base import AirQualityProxyError

__all__ = ["AirQualityProxyError"]
