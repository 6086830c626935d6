"""FastAPI application entrypoint for the FAAS data service.

Serve with ``faas-service`` or ``uvicorn faas_service.main:app``.
"""

from __future__ import annotations

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from faas_service.config import Settings, get_settings
from faas_service.data.routes import router as data_router
from faas_service.lib.logger import configure_logging, get_logger
from faas_service.service import DataService
from faas_service.system.routes import router as system_router

logger = get_logger(__name__)


async def _unhandled_exception(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "request_failed",
        exc_info=exc,
        extra={"method": request.method, "path": request.url.path},
    )
    return JSONResponse({"detail": "Internal server error"}, status_code=500)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build an application with its own ``DataService``.

    Each call yields an independent store and request counter.
    """

    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="FAAS Service", version=settings.version)
    app.state.settings = settings
    app.state.data_service = DataService.from_settings(settings)

    app.include_router(system_router, tags=["system"])
    app.include_router(data_router, prefix="/api/data", tags=["data"])
    app.add_exception_handler(Exception, _unhandled_exception)
    return app


app = create_app()


def run() -> None:
    """Start the HTTP server on the configured address."""

    settings = get_settings()
    logger.info(
        "service_starting",
        extra={
            "instance_id": settings.instance_id,
            "address": f"http://{settings.listen_address}",
            "version": settings.version,
        },
    )
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
