import sys
import time
from typing import Optional

import httpx
import structlog
import uvicorn
from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from air_quality_proxy import __version__
from air_quality_proxy.api import v1_router
from air_quality_proxy.api.health import health_router
from air_quality_proxy.config.config import Config, config
from air_quality_proxy.handlers.air_quality_handler import AirQualityHandler
from air_quality_proxy.utils.logging_config import setup_logging

# Configure logging
setup_logging()
logger = structlog.get_logger(__name__)


def create_app(
    settings: Optional[Config] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Settings to build the air quality handler with (defaults to the environment)
        transport: Optional httpx transport for the upstream client

    Returns:
        Configured FastAPI application instance
    """
    settings = settings or config

    app = FastAPI(
        title="Air Quality Proxy API",
        description="""
        ## Air Quality Proxy API

        Proxies current air pollution readings from OpenWeatherMap without
        exposing the API key to browsers.

        ### Endpoints:
        - **Air Quality**: `GET /api/v1/air-quality?lat=..&lon=..&city=..`
        - **Health**: `GET /health`
        """,
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    # Settings and handler are injected here rather than read per request
    app.state.settings = settings
    app.state.air_quality_handler = AirQualityHandler(settings, transport=transport)

    # Request logging middleware
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log all HTTP requests with timing information."""
        start_time = time.time()

        logger.info(
            "HTTP request started",
            method=request.method,
            path=request.url.path,
            client_ip=request.client.host if request.client else "unknown",
        )

        try:
            response = await call_next(request)
            process_time = time.time() - start_time

            logger.info(
                "HTTP request completed",
                method=request.method,
                path=request.url.path,
                status_code=response.status_code,
                process_time=process_time,
            )

            response.headers["X-Process-Time"] = str(process_time)
            return response

        except Exception as e:
            process_time = time.time() - start_time
            logger.error(
                "HTTP request failed",
                method=request.method,
                path=request.url.path,
                error=str(e),
                process_time=process_time,
            )
            raise

    # Global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Handle unexpected exceptions globally."""
        logger.error(
            "Unhandled exception",
            method=request.method,
            path=request.url.path,
            error=str(exc),
            exc_info=True,
        )

        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error", "message": str(exc)},
        )

    # HTTP exception handler
    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        """Handle HTTP exceptions with consistent formatting."""
        logger.warning(
            "HTTP exception",
            method=request.method,
            path=request.url.path,
            status_code=exc.status_code,
            detail=exc.detail,
        )

        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
        )

    # Include API routes
    app.include_router(health_router)
    app.include_router(v1_router)

    # Root endpoint (hide from swagger)
    @app.get("/", tags=["Root"], include_in_schema=False)
    async def root():
        """Root endpoint providing basic service information."""
        return {
            "message": "Air Quality Proxy API",
            "version": __version__,
            "status": "running",
            "timestamp": time.time(),
            "docs": "/docs",
        }

    return app


# Create the application instance
app = create_app()


def main():
    logger.info(
        f"Starting Air Quality Proxy server in {config.environment} environment",
        host=config.api_host,
        port=config.api_port,
        api_key_configured=config.api_key_configured,
    )

    try:
        uvicorn.run(
            app,
            host=config.api_host,
            port=config.api_port,
            log_level=config.log_level.lower(),
            access_log=True,
            server_header=False,
            date_header=False,
        )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested")
    except Exception as e:
        logger.error("Server failed to start", error=str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
