from __future__ import annotations

from ats_api.api.crud import EntityConfig, create_crud_router
from ats_api.db.filters import FilterField, FilterType
from ats_api.models.organization import Organization
from ats_api.schemas.organization import (
    OrganizationCreate,
    OrganizationResponse,
    OrganizationUpdate,
)

ORGANIZATION_CONFIG = EntityConfig(
    model=Organization,
    name="Organization",
    id_field="organization_id",
    response_schema=OrganizationResponse,
    create_schema=OrganizationCreate,
    update_schema=OrganizationUpdate,
    filter_config=[
        FilterField("status", FilterType.EXACT),
        FilterField("created_by_user_id", FilterType.EXACT),
        FilterField("name", FilterType.ILIKE, param_name="search"),
    ],
)

router = create_crud_router(ORGANIZATION_CONFIG, prefix="/organizations", tags=["organizations"])
