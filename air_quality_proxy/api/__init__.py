from air_quality_proxy.api.v1 import router as v1_router

__all__ = ["v1_router"]
