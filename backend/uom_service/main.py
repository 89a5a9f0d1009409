"""
FastAPI application entry point.
Configures middleware, error translation, routers, and lifecycle events.
"""

import hmac
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Header, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from prometheus_fastapi_instrumentator import Instrumentator
from sqlalchemy import text

from uom_service.core.config import get_settings
from uom_service.core.error_handlers import configure_exception_handlers
from uom_service.core.logging import configure_logging, get_logger
from uom_service.core.messages import MessageCatalog
from uom_service.core.middleware import REQUEST_ID_HEADER, RequestContextMiddleware
from uom_service.db.session import close_db, get_db_session, init_db
from uom_service.modules.uom.router import router as uom_router
from uom_service.modules.uom_status.router import router as uom_status_router

# Configure logging before anything else
configure_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """Open the connection pool on startup and dispose of it on shutdown."""
    settings = get_settings()
    logger.info(
        "starting_application",
        environment=settings.environment,
        version=settings.version,
    )

    await init_db()
    logger.info("database_initialized")

    yield

    await close_db()
    logger.info("application_shutdown_complete")


def create_application() -> FastAPI:
    """
    Application factory function.

    Creates and configures the FastAPI application with middleware, the
    error translators, the entity routers and the operational endpoints.
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        openapi_url=f"{settings.api_v1_prefix}/openapi.json",
        docs_url=f"{settings.api_v1_prefix}/docs",
        redoc_url=f"{settings.api_v1_prefix}/redoc",
        lifespan=lifespan,
    )
    app.state.messages = MessageCatalog()
    configure_exception_handlers(app)

    # ==========================================================================
    # Middleware Configuration
    # ==========================================================================

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin", REQUEST_ID_HEADER],
        expose_headers=[REQUEST_ID_HEADER],
    )
    app.add_middleware(RequestContextMiddleware)
    app.add_middleware(GZipMiddleware, minimum_size=1000)

    # ==========================================================================
    # Router Registration
    # ==========================================================================

    @app.get("/health", tags=["Health"])
    async def health_check() -> dict[str, object]:
        checks: dict[str, str] = {}

        try:
            async for session in get_db_session():
                await session.execute(text("SELECT 1"))
            checks["db"] = "ok"
        except Exception:
            logger.warning("health_check_db_unavailable", exc_info=True)
            checks["db"] = "unavailable"

        overall = "healthy" if all(v == "ok" for v in checks.values()) else "degraded"
        return {"status": overall, "version": settings.version, "checks": checks}

    app.include_router(
        uom_status_router,
        prefix=f"{settings.api_v1_prefix}/uom-status",
        tags=["UOM Status"],
    )
    app.include_router(
        uom_router,
        prefix=f"{settings.api_v1_prefix}/uom",
        tags=["UOM"],
    )

    # Prometheus metrics endpoint
    instrumentator = Instrumentator().instrument(app)

    if settings.environment == "development" and not settings.metrics_auth_token:
        instrumentator.expose(app, endpoint="/metrics", include_in_schema=False)
    else:

        @app.get("/metrics", include_in_schema=False)
        async def metrics_endpoint(
            authorization: str | None = Header(default=None),
        ) -> Response:
            if not settings.metrics_auth_token:
                # No token configured outside development: hide the endpoint
                return Response(status_code=404)

            if not authorization or not authorization.startswith("Bearer "):
                return Response(status_code=401)

            provided = authorization.removeprefix("Bearer ")
            if not hmac.compare_digest(provided, settings.metrics_auth_token):
                return Response(status_code=401)

            return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    return app


# Application instance
app = create_application()
