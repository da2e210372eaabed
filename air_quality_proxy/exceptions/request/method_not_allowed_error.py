from air_quality_proxy.exceptions.request.client_error import ClientError


class MethodNotAllowedError(ClientError):
    """Exception for HTTP methods other than GET and OPTIONS."""

    status_code = 405
    error = "Method not allowed"
