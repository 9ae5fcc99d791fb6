"""Uniform response envelope.

Every endpoint answers with ``{"success", "data" | "error", "statusCode"}``;
validation failures add an ``errors`` list of ``{"field", "message"}``.
"""

from __future__ import annotations

from typing import Any, Sequence

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from starlette.status import HTTP_200_OK, HTTP_500_INTERNAL_SERVER_ERROR

from ats_api.schemas.generic import FieldError


def send_success(payload: Any, status_code: int = HTTP_200_OK) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "success": True,
            "data": jsonable_encoder(payload),
            "statusCode": status_code,
        },
    )


def send_error(
    message: str,
    status_code: int = HTTP_500_INTERNAL_SERVER_ERROR,
    errors: Sequence[FieldError | dict[str, str]] | None = None,
) -> JSONResponse:
    content: dict[str, Any] = {
        "success": False,
        "error": message,
        "statusCode": status_code,
    }
    if errors is not None:
        content["errors"] = jsonable_encoder(list(errors))
    return JSONResponse(status_code=status_code, content=content)
