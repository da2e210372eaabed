from air_quality_proxy.exceptions.upstream.upstream_error import UpstreamError


class UpstreamStatusError(UpstreamError):
    """Exception for non-success responses from OpenWeatherMap.

    The upstream status code is passed through to the caller.
    """

    def __init__(self, status_code: int, reason_phrase: str):
        self.reason_phrase = reason_phrase
        super().__init__(
            message=f"OpenWeatherMap API error: {status_code} {reason_phrase}",
            status_code=status_code,
            error=f"OpenWeatherMap API error: {reason_phrase}",
        )
