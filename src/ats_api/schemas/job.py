from __future__ import annotations

from datetime import datetime
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, PositiveInt

from ats_api.schemas.common import IdStr, NotNull, StrictInput

JobStatus = Literal["DRAFT", "OPEN", "CLOSED"]
JobType = Literal["TEMPORARY", "PERMANENT"]


class JobCreate(StrictInput):
    """Schema for creating a job. The job_id is always server-assigned."""

    organization_id: IdStr
    created_by_user_id: IdStr
    manager_id: IdStr | None = None
    job_title: str = Field(min_length=1)
    status: JobStatus = "DRAFT"
    job_type: JobType
    location: str = Field(min_length=1)
    days_active: PositiveInt | None = None
    days_inactive: PositiveInt | None = None
    approved: bool = False
    start_date: datetime | None = None
    end_date: datetime | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "organization_id": "0190a6b2-3c4d-7e8f-9a0b-1c2d3e4f5a6b",
                "created_by_user_id": "0190a6b2-1111-7222-8333-444455556666",
                "job_title": "Registered Nurse",
                "job_type": "TEMPORARY",
                "location": "Boston, MA",
            }
        },
    )


class JobUpdate(StrictInput):
    """All fields optional; only the keys sent are changed."""

    organization_id: Annotated[IdStr | None, NotNull] = None
    created_by_user_id: Annotated[IdStr | None, NotNull] = None
    manager_id: IdStr | None = None
    job_title: Annotated[str | None, NotNull, Field(min_length=1)] = None
    status: Annotated[JobStatus | None, NotNull] = None
    job_type: Annotated[JobType | None, NotNull] = None
    location: Annotated[str | None, NotNull, Field(min_length=1)] = None
    days_active: PositiveInt | None = None
    days_inactive: PositiveInt | None = None
    approved: Annotated[bool | None, NotNull] = None
    start_date: datetime | None = None
    end_date: datetime | None = None


class JobResponse(BaseModel):
    job_id: str
    organization_id: str
    created_by_user_id: str
    manager_id: str | None
    job_title: str
    status: str
    job_type: str
    location: str
    days_active: int | None
    days_inactive: int | None
    approved: bool
    start_date: datetime | None
    end_date: datetime | None
    created_at: datetime
    last_updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
