"""Strict JSON request body parsing for document endpoints."""

from __future__ import annotations

import json
import math
from typing import Any

from fastapi import HTTPException, Request, status


def _is_json_media_type(content_type: str | None) -> bool:
    if not content_type:
        return False
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type == "application/json" or (
        media_type.startswith("application/") and media_type.endswith("+json")
    )


def _reject_constant(token: str) -> Any:
    raise ValueError(f"Non-finite number {token} is not valid JSON")


def _finite_float(token: str) -> float:
    value = float(token)
    if not math.isfinite(value):
        raise ValueError(f"Number {token} is out of range")
    return value


def parse_json_document(raw: bytes) -> Any:
    """Decode ``raw`` as a UTF-8 JSON document with finite numbers only.

    Any JSON value is accepted, ``null`` included. Raises ``ValueError`` for
    anything else.
    """

    text = raw.decode("utf-8")
    return json.loads(text, parse_constant=_reject_constant, parse_float=_finite_float)


async def read_json_body(request: Request) -> Any:
    """Return the request body as a JSON document or reject the request."""

    if not _is_json_media_type(request.headers.get("content-type")):
        raise HTTPException(
            status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
            detail="Request body must be application/json",
        )
    raw = await request.body()
    try:
        return parse_json_document(raw)
    except ValueError as exc:
        # UnicodeDecodeError and JSONDecodeError are both ValueErrors
        raise HTTPException(
            status_code=422,
            detail=f"Malformed JSON body: {exc}",
        ) from exc
