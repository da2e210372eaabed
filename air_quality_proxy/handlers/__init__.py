from air_quality_proxy.handlers.air_quality_handler import AirQualityHandler

__all__ = ["AirQualityHandler"]
