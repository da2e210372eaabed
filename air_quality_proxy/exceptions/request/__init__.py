from air_quality_proxy.exceptions.request.client_error import ClientError
from air_quality_proxy.exceptions.request.method_not_allowed_error import MethodNotAllowedError
from air_quality_proxy.exceptions.request.missing_parameters_error import MissingParametersError

__all__ = ["ClientError", "MethodNotAllowedError", "MissingParametersError"]
