from __future__ import annotations

from ats_api.api.crud import EntityConfig, create_crud_router
from ats_api.db.filters import FilterField, FilterType
from ats_api.models.job import Job
from ats_api.schemas.job import JobCreate, JobResponse, JobUpdate

JOB_FILTERS = [
    FilterField("organization_id", FilterType.EXACT),
    FilterField("manager_id", FilterType.EXACT),
    FilterField("created_by_user_id", FilterType.EXACT),
    FilterField("status", FilterType.EXACT),
    FilterField("job_type", FilterType.EXACT),
    FilterField("approved", FilterType.EXACT, python_type=bool),
    FilterField("job_title", FilterType.ILIKE, param_name="search"),
    FilterField("location", FilterType.ILIKE),
    FilterField("created_at", FilterType.DATE_RANGE),
    FilterField("start_date", FilterType.DATE_RANGE),
]

JOB_CONFIG = EntityConfig(
    model=Job,
    name="Job",
    id_field="job_id",
    response_schema=JobResponse,
    create_schema=JobCreate,
    update_schema=JobUpdate,
    filter_config=JOB_FILTERS,
)

router = create_crud_router(JOB_CONFIG, prefix="/jobs", tags=["jobs"])
