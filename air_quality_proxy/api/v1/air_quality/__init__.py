from air_quality_proxy.api.v1.air_quality.air_quality_routes import router as air_quality_router

__all__ = ["air_quality_router"]
