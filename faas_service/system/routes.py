"""Identity, health, status, metrics and echo routes."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse, PlainTextResponse

from faas_service.data.routes import get_data_service
from faas_service.lib.json_body import read_json_body
from faas_service.service import IDENTITY, DataService

router = APIRouter()


@router.get("/", response_class=PlainTextResponse, summary="Service identity")
async def root() -> PlainTextResponse:
    return PlainTextResponse(IDENTITY)


@router.get("/health", summary="Health check")
async def health_check(service: DataService = Depends(get_data_service)) -> JSONResponse:
    """Return liveness response for uptime monitoring."""

    return JSONResponse(service.health().model_dump(mode="json"))


@router.get("/api/status", summary="Service status")
async def service_status(service: DataService = Depends(get_data_service)) -> JSONResponse:
    return JSONResponse(service.status().model_dump(mode="json"))


@router.get("/api/metrics", summary="Metrics endpoint")
async def metrics_endpoint(service: DataService = Depends(get_data_service)) -> JSONResponse:
    return JSONResponse(service.metrics().model_dump(mode="json"))


@router.post("/api/echo", summary="Echo the request body")
async def echo(
    payload: Any = Depends(read_json_body),
    service: DataService = Depends(get_data_service),
) -> JSONResponse:
    return JSONResponse(service.echo(payload).model_dump(mode="json"))
