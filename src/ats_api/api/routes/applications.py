from __future__ import annotations

from ats_api.api.crud import EntityConfig, create_crud_router
from ats_api.db.filters import FilterField, FilterType
from ats_api.models.applicant import Application, Interview
from ats_api.schemas.applicant import (
    ApplicationCreate,
    ApplicationResponse,
    ApplicationUpdate,
    InterviewCreate,
    InterviewResponse,
    InterviewUpdate,
)

APPLICATION_CONFIG = EntityConfig(
    model=Application,
    name="Application",
    id_field="application_id",
    response_schema=ApplicationResponse,
    create_schema=ApplicationCreate,
    update_schema=ApplicationUpdate,
    filter_config=[
        FilterField("job_id", FilterType.EXACT),
        FilterField("applicant_id", FilterType.EXACT),
        FilterField("status", FilterType.EXACT),
        FilterField("source", FilterType.ILIKE),
        FilterField("applied_at", FilterType.DATE_RANGE),
    ],
)

INTERVIEW_CONFIG = EntityConfig(
    model=Interview,
    name="Interview",
    id_field="interview_id",
    response_schema=InterviewResponse,
    create_schema=InterviewCreate,
    update_schema=InterviewUpdate,
    filter_config=[
        FilterField("application_id", FilterType.EXACT),
        FilterField("status", FilterType.EXACT),
        FilterField("interview_date", FilterType.DATE_RANGE),
    ],
)

applications_router = create_crud_router(
    APPLICATION_CONFIG, prefix="/applications", tags=["applications"]
)
interviews_router = create_crud_router(INTERVIEW_CONFIG, prefix="/interviews", tags=["interviews"])
