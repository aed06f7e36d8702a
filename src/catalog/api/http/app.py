"""FastAPI application factory and setup."""

import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import RedirectResponse
from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse

from src.catalog.api.http.app_data import ApplicationDependencies
from src.catalog.api.http.routers.health import router as health_router
from src.catalog.api.http.routers.product import router as product_router
from src.catalog.api.utils.app_startup import configure_logging
from src.catalog.core.services import DbSessionService
from src.catalog.runtime.config.config_data import ConfigData
from src.catalog.runtime.context import get_config
from src.catalog.runtime.init_db import init_db

__all__ = ["app", "create_app"]


# --- Security middleware ---
class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault(
            "Referrer-Policy", "strict-origin-when-cross-origin"
        )
        # HSTS only in prod
        if get_config().app.environment == "production":
            response.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains",
            )
        return response


# --- Request logging middleware ---
async def log_requests(request: Request, call_next):
    # Correlation / tracing
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())

    xff = request.headers.get("x-forwarded-for")
    client_ip = (
        xff.split(",")[0].strip()
        if xff
        else request.client.host
        if request.client
        else "unknown"
    )

    base_ctx = {
        "request_id": request_id,
        "method": request.method,
        "path": request.url.path,
        "client_ip": client_ip,
        "user_agent": request.headers.get("user-agent", "unknown"),
    }

    start = time.perf_counter()

    # Everything that logs within this block inherits base_ctx
    with logger.contextualize(**base_ctx):
        try:
            logger.info("request.start")
            response = await call_next(request)

            duration_ms = (time.perf_counter() - start) * 1000
            logger.bind(
                status_code=response.status_code,
                duration_ms=round(duration_ms, 1),
            ).info("request.end")

            response.headers.setdefault("X-Request-ID", request_id)
            return response

        except Exception as exc:
            duration_ms = (time.perf_counter() - start) * 1000
            logger.bind(
                status_code=500,
                duration_ms=round(duration_ms, 1),
                error_type=type(exc).__name__,
            ).exception("request.error")
            return JSONResponse(
                status_code=500,
                content={"detail": "Internal Server Error", "request_id": request_id},
                headers={"X-Request-ID": request_id},
            )


# --- Lifecycle hooks ---
def startup(app: FastAPI, config: ConfigData) -> None:
    logger.info("Starting up {} in {} environment", config.app.name, config.app.environment)

    database_service = DbSessionService(config.database)
    seeded = init_db(database_service, seed=config.catalog.seed_on_startup)
    if seeded:
        logger.info("Seeded {} sample products", seeded)

    app.state.app_dependencies = ApplicationDependencies.build(database_service)


def shutdown(app: FastAPI) -> None:
    logger.info("Shutting down application")
    app_dependencies: ApplicationDependencies | None = getattr(
        app.state, "app_dependencies", None
    )
    if app_dependencies is not None:
        app_dependencies.database_service.dispose()


def create_app(dependencies: ApplicationDependencies | None = None) -> FastAPI:
    """Build the application.

    When ``dependencies`` is given (tests, embedding) they are used as is and
    no database bootstrap happens at startup.
    """
    # Captured here: the lifespan may run in another thread than the caller
    config = get_config()
    environment = config.app.environment

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if dependencies is None:
            configure_logging()
            startup(app, config)
        try:
            yield
        finally:
            if dependencies is None:
                shutdown(app)

    app = FastAPI(
        title=config.app.name,
        lifespan=lifespan,
        docs_url=None if environment == "production" else "/docs",
        redoc_url=None if environment == "production" else "/redoc",
    )
    if dependencies is not None:
        app.state.app_dependencies = dependencies

    app.add_middleware(SecurityHeadersMiddleware)
    app.middleware("http")(log_requests)

    # --- Router registration ---
    app.include_router(health_router)
    app.include_router(product_router)

    @app.get("/", include_in_schema=False)
    def root() -> RedirectResponse:
        return RedirectResponse(url="/products/")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        app,
        host=get_config().app.host,
        port=get_config().app.port,
        access_log=False,  # We handle access logging in middleware
    )
