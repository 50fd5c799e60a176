# group_portal/main.py
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import structlog
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from group_portal import __version__
from group_portal.shared.config import AppEnv
from group_portal.shared.container import Container, container as default_container
from group_portal.shared.logging_config import configure_logging
from group_portal.shared.telemetry import setup_telemetry, instrument_fastapi
from group_portal.adapters.persistence.session import init_schema
from group_portal.adapters.api.routers import groups, health, memberships

logger = structlog.get_logger()

# Modules using the @inject decorator
WIRED_MODULES = [
    "group_portal.adapters.api.dependencies",
    "group_portal.adapters.api.routers.groups",
    "group_portal.adapters.api.routers.memberships",
    "group_portal.adapters.api.routers.health",
]

def create_app(container: Optional[Container] = None) -> FastAPI:
    """
    Factory function to create the FastAPI application.

    Args:
        container: DI container to serve from. Defaults to the process-wide one;
            tests pass their own with overridden providers.
    """
    container = container or default_container
    config = container.config()
    configure_logging(config)
    container.wire(modules=WIRED_MODULES)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """
        Application Lifecycle Manager.
        Handles startup (Telemetry, schema) and shutdown.
        """
        setup_telemetry(config)
        logger.info("app_startup", app=config.APP_NAME, env=config.APP_ENV.value)

        # Fail fast on a bad DATABASE_URL
        init_schema(container.db_engine())

        yield

        logger.info("app_shutdown")
        container.db_engine().dispose()

    app = FastAPI(
        title="Group Portal",
        version=__version__,
        description="Group pages and subscription management (Hexagonal)",
        docs_url="/docs" if config.APP_ENV != AppEnv.PRODUCTION else None,
        redoc_url=None,
        lifespan=lifespan,
    )
    app.state.container = container

    instrument_fastapi(app, config)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """
        Standardizes HTTP errors (404 / 403 / 409 ...).
        """
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "status": "error",
                "code": exc.status_code,
                "message": exc.detail,
            },
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """
        Catches unhandled exceptions (e.g. storage outages) so the client gets
        a uniform 500 instead of a stack trace.
        """
        logger.error("unhandled_exception", path=request.url.path, error=str(exc), exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "status": "error",
                "code": 500,
                "message": str(exc) if container.config().DEBUG else "Internal Server Error",
            },
        )

    app.include_router(health.router)
    app.include_router(groups.router)
    app.include_router(memberships.router)

    return app

# Entry point for local debugging (e.g. `python -m group_portal.main`)
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "group_portal.main:create_app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        factory=True,
    )
