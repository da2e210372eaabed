from datetime import datetime, timezone
from typing import Dict, Optional, Union

from pydantic import BaseModel, Field, model_validator

DEFAULT_CITY = "Unknown"


class AirPollutionMain(BaseModel):
    """Main air quality reading."""

    aqi: int = Field(..., description="Air Quality Index (1 = Good ... 5 = Very Poor)")


class AirPollutionEntry(BaseModel):
    """A single air pollution reading."""

    main: AirPollutionMain = Field(..., description="Main air quality reading")
    components: Dict[str, Optional[Union[int, float]]] = Field(
        ..., description="Pollutant concentrations in μg/m³ keyed by pollutant name"
    )


class AirPollutionResponse(BaseModel):
    """
    OpenWeatherMap air pollution API response model.

    Only the first entry of ``list`` is decoded; any other readings and
    top-level fields are ignored.
    """

    current: AirPollutionEntry = Field(..., description="Current air pollution reading")

    @model_validator(mode="before")
    @classmethod
    def select_current_entry(cls, data):
        if not isinstance(data, dict):
            raise ValueError("response body must be a JSON object")

        entries = data.get("list")
        if not isinstance(entries, list) or not entries:
            raise ValueError("list must contain at least one reading")

        return {"current": entries[0]}


class AirQualityQuery(BaseModel):
    """
    Inbound air quality query.

    ``lat`` and ``lon`` are forwarded to OpenWeatherMap exactly as received.
    """

    lat: str = Field(..., description="Latitude, passed through as-is")
    lon: str = Field(..., description="Longitude, passed through as-is")
    city: Optional[str] = Field(None, description="City name used for display only")


def utc_isoformat(moment: datetime) -> str:
    """Format a datetime as an ISO-8601 UTC string with millisecond precision, e.g. 2024-01-01T12:00:00.000Z."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class AirQualityPayload(BaseModel):
    """Air quality payload returned to callers."""

    aqi: int = Field(..., description="Air Quality Index")
    components: Dict[str, Optional[Union[int, float]]] = Field(..., description="Pollutant concentrations")
    timestamp: str = Field(..., description="ISO-8601 time the request was handled")
    city: str = Field(default=DEFAULT_CITY, description="City name for display")

    @classmethod
    def from_air_pollution_response(
        cls,
        response: AirPollutionResponse,
        city: Optional[str],
        handled_at: datetime,
    ) -> "AirQualityPayload":
        """
        Create a payload from the current entry of an air pollution response.

        Args:
            response: Decoded OpenWeatherMap air pollution response
            city: City name from the query, if any
            handled_at: Time the request was handled

        Returns:
            AirQualityPayload: Reshaped payload
        """
        current = response.current

        return cls(
            aqi=current.main.aqi,
            components=current.components,
            timestamp=utc_isoformat(handled_at),
            city=city or DEFAULT_CITY,
        )
