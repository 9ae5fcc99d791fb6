from __future__ import annotations

from ats_api.api.crud import EntityConfig, create_crud_router
from ats_api.db.filters import FilterField, FilterType
from ats_api.models.applicant import Applicant, ApplicantDocument
from ats_api.schemas.applicant import (
    ApplicantCreate,
    ApplicantDocumentCreate,
    ApplicantDocumentResponse,
    ApplicantDocumentUpdate,
    ApplicantResponse,
    ApplicantUpdate,
)

APPLICANT_CONFIG = EntityConfig(
    model=Applicant,
    name="Applicant",
    id_field="applicant_id",
    response_schema=ApplicantResponse,
    create_schema=ApplicantCreate,
    update_schema=ApplicantUpdate,
    filter_config=[
        FilterField("status", FilterType.EXACT),
        FilterField("full_name", FilterType.ILIKE, param_name="search"),
        FilterField("last_active_at", FilterType.DATE_RANGE),
    ],
)

APPLICANT_DOCUMENT_CONFIG = EntityConfig(
    model=ApplicantDocument,
    name="ApplicantDocument",
    id_field="applicant_document_id",
    response_schema=ApplicantDocumentResponse,
    create_schema=ApplicantDocumentCreate,
    update_schema=ApplicantDocumentUpdate,
    filter_config=[
        FilterField("applicant_id", FilterType.EXACT),
        FilterField("document_type", FilterType.EXACT),
    ],
)

applicants_router = create_crud_router(APPLICANT_CONFIG, prefix="/applicants", tags=["applicants"])
documents_router = create_crud_router(
    APPLICANT_DOCUMENT_CONFIG,
    prefix="/applicant-documents",
    tags=["applicant-documents"],
)
