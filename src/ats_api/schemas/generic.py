"""Envelope and pagination schemas shared by every endpoint."""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class FieldError(BaseModel):
    """One violated validation rule."""

    field: str
    message: str


class Paging(BaseModel):
    total: int
    page: int
    limit: int
    total_pages: int = Field(serialization_alias="totalPages")


class PageResult(BaseModel, Generic[T]):
    """Paginated list payload."""

    data: list[T]
    paging: Paging


class SuccessResponse(BaseModel, Generic[T]):
    """Envelope for successful responses."""

    success: bool = True
    data: T
    status_code: int = Field(serialization_alias="statusCode")

    model_config = ConfigDict(populate_by_name=True)


class ErrorResponse(BaseModel):
    """Envelope for failed responses."""

    success: bool = False
    error: str
    status_code: int = Field(serialization_alias="statusCode")
    errors: list[FieldError] | None = None

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "success": False,
                "error": "Job not found",
                "statusCode": 404,
            }
        },
    )
