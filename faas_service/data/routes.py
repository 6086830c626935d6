"""Routes for storing, listing, reading and deleting documents."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from fastapi.responses import JSONResponse, Response

from faas_service.data.schemas import DataCreated, DataItem
from faas_service.lib.json_body import read_json_body
from faas_service.service import DataService

router = APIRouter()


def get_data_service(request: Request) -> DataService:
    service: DataService | None = getattr(request.app.state, "data_service", None)
    if service is None:
        raise RuntimeError("Data service not configured on application state")
    return service


@router.get("", summary="List stored documents")
async def list_data(
    offset: int = Query(default=0, ge=0),
    limit: int | None = Query(default=None, ge=0),
    service: DataService = Depends(get_data_service),
) -> JSONResponse:
    listing = service.list_data(offset=offset, limit=limit)
    return JSONResponse(listing.model_dump(mode="json"))


@router.post("", status_code=status.HTTP_201_CREATED, summary="Store a document")
async def create_data(
    payload: Any = Depends(read_json_body),
    service: DataService = Depends(get_data_service),
) -> JSONResponse:
    """Store the request body under a freshly generated key."""

    key = service.put_data(payload)
    return JSONResponse(DataCreated(key=key).model_dump(), status_code=status.HTTP_201_CREATED)


@router.get("/{key}", summary="Fetch a document by key")
async def get_data(key: str, service: DataService = Depends(get_data_service)) -> JSONResponse:
    record = service.get_by_key(key)
    if record is None:
        raise HTTPException(status_code=404, detail="Data not found")
    # Same rendering as list entries
    item = DataItem.from_record(record).model_dump(mode="json")
    return JSONResponse(content=item["value"])


@router.delete("/{key}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a document by key")
async def delete_data(key: str, service: DataService = Depends(get_data_service)) -> Response:
    if not service.delete_by_key(key):
        raise HTTPException(status_code=404, detail="Data not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
