from air_quality_proxy.exceptions.upstream.upstream_error import UpstreamError
from air_quality_proxy.exceptions.upstream.upstream_request_error import UpstreamRequestError
from air_quality_proxy.exceptions.upstream.upstream_shape_error import UpstreamShapeError
from air_quality_proxy.exceptions.upstream.upstream_status_error import UpstreamStatusError

__all__ = [
    "UpstreamError",
    "UpstreamRequestError",
    "UpstreamShapeError",
    "UpstreamStatusError",
]
