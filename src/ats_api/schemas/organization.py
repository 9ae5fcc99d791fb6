from __future__ import annotations

from datetime import datetime
from typing import Annotated, Literal

from pydantic import AnyHttpUrl, BaseModel, ConfigDict, Field, PlainSerializer

from ats_api.schemas.common import IdStr, NotNull, StrictInput

OrganizationStatus = Literal["ACTIVE", "INACTIVE"]
WebsiteUrl = Annotated[AnyHttpUrl, PlainSerializer(str, return_type=str)]


class OrganizationCreate(StrictInput):
    name: str = Field(min_length=1)
    created_by_user_id: IdStr
    website: WebsiteUrl | None = None
    status: OrganizationStatus = "ACTIVE"
    phone: str | None = None


class OrganizationUpdate(StrictInput):
    name: Annotated[str | None, NotNull, Field(min_length=1)] = None
    created_by_user_id: Annotated[IdStr | None, NotNull] = None
    website: WebsiteUrl | None = None
    status: Annotated[OrganizationStatus | None, NotNull] = None
    phone: str | None = None


class OrganizationResponse(BaseModel):
    organization_id: str
    name: str
    created_by_user_id: str
    website: str | None
    status: str
    phone: str | None
    created_at: datetime
    last_updated_at: datetime

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "organization_id": "0190a6b2-3c4d-7e8f-9a0b-1c2d3e4f5a6b",
                "name": "Acme Staffing",
                "created_by_user_id": "0190a6b2-1111-7222-8333-444455556666",
                "website": "https://acme.example",
                "status": "ACTIVE",
                "phone": None,
                "created_at": "2025-01-01T00:00:00Z",
                "last_updated_at": "2025-01-01T00:00:00Z",
            }
        },
    )
