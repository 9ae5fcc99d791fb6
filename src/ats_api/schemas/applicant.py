from __future__ import annotations

from datetime import datetime
from typing import Annotated, Literal

from pydantic import AnyUrl, BaseModel, ConfigDict, Field, PlainSerializer

from ats_api.schemas.common import IdStr, NotNull, StrictInput

ApplicantStatus = Literal["APPLIED", "PLACED", "REJECTED", "SHORTLISTED", "INTERVIEWING"]
ApplicationStatus = Literal["APPLIED", "SCREENED", "OFFERED", "HIRED"]
InterviewStatus = Literal["PENDING", "COMPLETED_RESULT_PENDING", "REJECTED", "ACCEPTED"]
FileUrl = Annotated[AnyUrl, PlainSerializer(str, return_type=str)]


class ApplicantCreate(StrictInput):
    full_name: str = Field(min_length=1)
    status: ApplicantStatus = "APPLIED"
    last_active_at: datetime | None = None


class ApplicantUpdate(StrictInput):
    full_name: Annotated[str | None, NotNull, Field(min_length=1)] = None
    status: Annotated[ApplicantStatus | None, NotNull] = None
    last_active_at: datetime | None = None


class ApplicantResponse(BaseModel):
    applicant_id: str
    full_name: str
    status: str
    last_active_at: datetime | None
    created_at: datetime
    last_updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ApplicantDocumentCreate(StrictInput):
    applicant_id: IdStr
    document_type: str = Field(min_length=1)
    file_url: FileUrl


class ApplicantDocumentUpdate(StrictInput):
    applicant_id: Annotated[IdStr | None, NotNull] = None
    document_type: Annotated[str | None, NotNull, Field(min_length=1)] = None
    file_url: Annotated[FileUrl | None, NotNull] = None


class ApplicantDocumentResponse(BaseModel):
    applicant_document_id: str
    applicant_id: str
    document_type: str
    file_url: str
    created_at: datetime
    last_updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ApplicationCreate(StrictInput):
    job_id: IdStr
    applicant_id: IdStr
    source: str | None = None
    status: ApplicationStatus = "APPLIED"
    applied_at: datetime | None = None


class ApplicationUpdate(StrictInput):
    """An application cannot be moved to another job or applicant."""

    source: str | None = None
    status: Annotated[ApplicationStatus | None, NotNull] = None
    applied_at: datetime | None = None


class ApplicationResponse(BaseModel):
    application_id: str
    job_id: str
    applicant_id: str
    source: str | None
    status: str
    applied_at: datetime | None
    created_at: datetime
    last_updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class InterviewCreate(StrictInput):
    application_id: IdStr
    interview_date: datetime
    status: InterviewStatus


class InterviewUpdate(StrictInput):
    application_id: Annotated[IdStr | None, NotNull] = None
    interview_date: Annotated[datetime | None, NotNull] = None
    status: Annotated[InterviewStatus | None, NotNull] = None


class InterviewResponse(BaseModel):
    interview_id: str
    application_id: str
    interview_date: datetime
    status: str
    created_at: datetime
    last_updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
