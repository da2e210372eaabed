class AirQualityProxyError(Exception):
    """
    Base exception for the air quality proxy.

    Attributes:
        status_code: HTTP status code the error maps to
        error: Client-facing error text placed in the response body
    """

    status_code = 500
    error = "Internal server error"

    def __init__(self, message=None, status_code=None, error=None):
        if status_code is not None:
            self.status_code = status_code
        if error is not None:
            self.error = error
        super().__init__(message or self.error)

    def to_body(self):
        """Build the JSON body returned to the caller."""
        return {"error": self.error}
