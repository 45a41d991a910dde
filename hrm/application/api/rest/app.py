"""FastAPI application factory.

Run with ``uvicorn --factory hrm.application.api.rest.app:create_app`` or
``hrm server run``.
"""

import asyncio
import logging
from contextlib import asynccontextmanager

import logfire
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import OperationalError

from hrm.application.api.v1.errors import map_hrm_error
from hrm.application.api.v1.routes import auth, employees, health, me, roles
from hrm.application.di import create_container
from hrm.config import Config, configure_logging
from hrm.domain.shared.authorization.startup import validate_all_handlers
from hrm.domain.shared.error import HRMError, StorageUnavailableError
from hrm.infrastructure.persistence.migrate import run_migrations
from hrm.util.di.fastapi import setup_dishka

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"
V1_ROUTERS = (health.router, roles.router, me.router, auth.router, employees.router)


@asynccontextmanager
async def lifespan(app: FastAPI):
    container = app.state.dishka_container
    config = await container.get(Config)

    if config.database.auto_migrate:
        # Alembic is synchronous
        await asyncio.to_thread(run_migrations, config.database.url)

    try:
        yield
    finally:
        await container.close()


async def hrm_error_handler(request: Request, exc: HRMError) -> JSONResponse:
    http_exc = map_hrm_error(exc)
    if http_exc.status_code >= 500:
        logger.error("%s on %s %s: %s", exc.code, request.method, request.url.path, exc.message)
    return JSONResponse(
        status_code=http_exc.status_code,
        content=http_exc.detail,
        headers=http_exc.headers,
    )


async def database_error_handler(request: Request, exc: OperationalError) -> JSONResponse:
    logger.error("Database error on %s %s: %s", request.method, request.url.path, exc.orig)
    return await hrm_error_handler(request, StorageUnavailableError("Database unavailable"))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


def create_app(config: Config | None = None) -> FastAPI:
    """Build the API app. Without ``config``, settings are read from the environment."""
    config = config or Config()
    configure_logging(config.logging)

    # Refuse to start if any handler is missing an __auth__ gate
    validate_all_handlers()

    app = FastAPI(
        title=config.server.name,
        description=config.server.description,
        version=config.server.version,
        lifespan=lifespan,
    )
    logfire.instrument_fastapi(app)
    setup_dishka(create_container(config), app)

    for router in V1_ROUTERS:
        app.include_router(router, prefix=API_PREFIX)

    app.add_exception_handler(HRMError, hrm_error_handler)
    app.add_exception_handler(OperationalError, database_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    logger.info("HRM API ready: %s v%s", config.server.name, config.server.version)
    return app
