from air_quality_proxy.exceptions.request.client_error import ClientError


class MissingParametersError(ClientError):
    """Exception for requests without both lat and lon."""

    status_code = 400
    error = "Missing required parameters: lat and lon"
