"""
Main FastAPI application for Customer Service.

Wires configuration, logging, the MongoDB client and the routers.
"""

from contextlib import asynccontextmanager
from typing import Optional

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from . import __version__
from .config import settings
from .database import MongoManager
from .logging_config import setup_logging
from .routers import customer_router, health_router

logger = structlog.get_logger(__name__)


def create_app(mongo_manager: Optional[MongoManager] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        mongo_manager: MongoDB manager to use; built from settings if omitted

    Returns:
        Configured FastAPI application
    """
    setup_logging(settings.LOG_LEVEL, json_logs=settings.JSON_LOGS)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager."""
        logger.info("Starting Customer Service", version=__version__)
        manager = mongo_manager or MongoManager.from_settings(settings)
        await manager.connect()
        app.state.mongo = manager
        logger.info("Customer Service started")

        yield

        logger.info("Shutting down Customer Service")
        await manager.disconnect()
        logger.info("Customer Service stopped")

    app = FastAPI(
        title="Customer Service",
        description="CRUD API for customer records stored in MongoDB",
        version=__version__,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", "Accept", "Origin"],
        expose_headers=["X-Request-ID"],
        max_age=600,
    )

    @app.middleware("http")
    async def add_request_id(request: Request, call_next):
        """Bind a request ID to the structlog context."""
        request_id = request.headers.get("X-Request-ID", f"req-{id(request)}")
        structlog.contextvars.bind_contextvars(request_id=request_id)
        try:
            response = await call_next(request)
        finally:
            structlog.contextvars.clear_contextvars()
        response.headers["X-Request-ID"] = request_id
        return response

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Handle all unhandled exceptions."""
        logger.error(
            "Unhandled exception",
            path=request.url.path,
            method=request.method,
            error=str(exc),
            exc_info=True,
        )
        return JSONResponse(
            status_code=500,
            content={
                "detail": "An unexpected error occurred",
                "error_code": "internal_server_error",
            },
        )

    app.include_router(customer_router.router)
    app.include_router(health_router.router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.app:app",
        host=settings.SERVICE_HOST,
        port=settings.SERVICE_PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )
