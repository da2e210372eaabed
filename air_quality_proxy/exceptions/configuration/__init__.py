from air_quality_proxy.exceptions.configuration.api_key_not_set_error import APIKeyNotSetError
from air_quality_proxy.exceptions.configuration.configuration_error import ConfigurationError

__all__ = ["APIKeyNotSetError", "ConfigurationError"]
