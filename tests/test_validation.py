"""Tests for request-body validation and error mapping."""

from __future__ import annotations

from pydantic import BaseModel, Field

from ats_api.api.crud.validation import validate_payload
from ats_api.schemas.common import StrictInput
from ats_api.schemas.generic import FieldError
from ats_api.schemas.job import JobCreate, JobUpdate


class Address(BaseModel):
    city: str = Field(min_length=1)


class Contact(StrictInput):
    name: str = Field(min_length=1)
    age: int | None = None
    address: Address | None = None
    tier: str = "basic"


class TestValidatePayload:
    def test_success_returns_data_with_defaults(self) -> None:
        data, errors = validate_payload(Contact, {"name": "Ada"})
        assert errors is None
        assert data == {"name": "Ada", "tier": "basic"}

    def test_one_error_per_violated_rule(self) -> None:
        data, errors = validate_payload(Contact, {"name": "", "age": "old", "extra": 1})
        assert data is None
        assert [error.field for error in errors] == ["name", "age", "extra"]
        assert all(isinstance(error, FieldError) and error.message for error in errors)

    def test_nested_path_is_dotted(self) -> None:
        _, errors = validate_payload(Contact, {"name": "Ada", "address": {"city": ""}})
        assert [error.field for error in errors] == ["address.city"]

    def test_non_object_body(self) -> None:
        _, errors = validate_payload(Contact, "just a string")
        assert len(errors) == 1
        assert errors[0].field == ""

    def test_partial_returns_only_sent_keys(self) -> None:
        data, errors = validate_payload(JobUpdate, {"location": "Remote"}, partial=True)
        assert errors is None
        assert data == {"location": "Remote"}

    def test_partial_rejects_null_for_required_column(self) -> None:
        _, errors = validate_payload(JobUpdate, {"job_title": None}, partial=True)
        assert [error.field for error in errors] == ["job_title"]
        assert "cannot be null" in errors[0].message

    def test_ids_are_dumped_as_strings(self) -> None:
        payload = {
            "organization_id": "0190a6b2-3c4d-7e8f-9a0b-1c2d3e4f5a6b",
            "created_by_user_id": "0190a6b2-1111-7222-8333-444455556666",
            "job_title": "Nurse",
            "job_type": "TEMPORARY",
            "location": "Boston",
        }
        data, errors = validate_payload(JobCreate, payload)
        assert errors is None
        assert data["organization_id"] == payload["organization_id"]
        assert isinstance(data["organization_id"], str)
        assert data["status"] == "DRAFT"
        assert data["approved"] is False
        assert "manager_id" not in data


class TestWithoutSchema:
    def test_object_passes_through(self) -> None:
        data, errors = validate_payload(None, {"anything": 1})
        assert data == {"anything": 1}
        assert errors is None

    def test_non_object_rejected(self) -> None:
        data, errors = validate_payload(None, [1, 2])
        assert data is None
        assert errors == [FieldError(field="", message="Request body must be a JSON object")]
