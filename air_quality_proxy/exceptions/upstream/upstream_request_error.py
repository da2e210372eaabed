from air_quality_proxy.exceptions.upstream.upstream_error import UpstreamError


class UpstreamRequestError(UpstreamError):
    """Exception for transport failures (DNS, connection, timeout) reaching OpenWeatherMap."""

    pass
