from air_quality_proxy.models.air_quality.air_quality import (
    DEFAULT_CITY,
    AirPollutionEntry,
    AirPollutionMain,
    AirPollutionResponse,
    AirQualityPayload,
    AirQualityQuery,
    utc_isoformat,
)

__all__ = [
    "DEFAULT_CITY",
    "AirPollutionEntry",
    "AirPollutionMain",
    "AirPollutionResponse",
    "AirQualityPayload",
    "AirQualityQuery",
    "utc_isoformat",
]
