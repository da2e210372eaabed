from air_quality_proxy.models.proxy.proxy import CORS_HEADERS, ProxyRequest, ProxyResponse

__all__ = ["CORS_HEADERS", "ProxyRequest", "ProxyResponse"]
