from air_quality_proxy.exceptions.upstream.upstream_error import UpstreamError


class UpstreamShapeError(UpstreamError):
    """Exception for OpenWeatherMap bodies that are not JSON or lack expected fields."""

    pass
