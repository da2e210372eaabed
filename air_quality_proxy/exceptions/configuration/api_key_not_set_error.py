from air_quality_proxy.exceptions.configuration.configuration_error import ConfigurationError


class APIKeyNotSetError(ConfigurationError):
    """Exception for a missing OpenWeatherMap API key."""

    error = "Server configuration error: API key not set"
