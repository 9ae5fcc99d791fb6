"""End-to-end tests for the /api/jobs endpoints."""

from __future__ import annotations

from fastapi.testclient import TestClient


def _job_payload(organization, user, **overrides) -> dict:
    payload = {
        "organization_id": organization.organization_id,
        "created_by_user_id": user.user_id,
        "job_title": "Registered Nurse",
        "job_type": "TEMPORARY",
        "location": "Boston, MA",
    }
    payload.update(overrides)
    return payload


class TestJobLifecycle:
    def test_create_get_delete_get(
        self, client: TestClient, organization_factory, user_factory
    ) -> None:
        user = user_factory()
        organization = organization_factory(created_by=user)

        created = client.post("/api/jobs", json=_job_payload(organization, user))
        assert created.status_code == 201
        job = created.json()["data"]
        job_id = job["job_id"]
        assert job_id
        assert job["status"] == "DRAFT"
        assert job["approved"] is False

        fetched = client.get(f"/api/jobs/{job_id}")
        assert fetched.status_code == 200
        assert fetched.json()["data"] == job

        deleted = client.delete(f"/api/jobs/{job_id}")
        assert deleted.status_code == 200
        assert deleted.json()["data"] == {"job_id": job_id}

        gone = client.get(f"/api/jobs/{job_id}")
        assert gone.status_code == 404
        assert gone.json() == {"success": False, "error": "Job not found", "statusCode": 404}

    def test_client_cannot_choose_job_id(
        self, client: TestClient, organization_factory, user_factory
    ) -> None:
        user = user_factory()
        organization = organization_factory(created_by=user)
        payload = _job_payload(
            organization, user, job_id="0190a6b2-3c4d-7e8f-9a0b-1c2d3e4f5a6b"
        )

        response = client.post("/api/jobs", json=payload)

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "job_id"


class TestJobValidation:
    def test_reports_each_invalid_field(self, client: TestClient) -> None:
        response = client.post(
            "/api/jobs",
            json={
                "organization_id": "not-a-uuid",
                "created_by_user_id": "0190a6b2-1111-7222-8333-444455556666",
                "job_title": "",
                "job_type": "FREELANCE",
                "location": "Remote",
                "days_active": -3,
            },
        )
        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "Validation failed"
        fields = sorted(error["field"] for error in body["errors"])
        assert fields == ["days_active", "job_title", "job_type", "organization_id"]

        listing = client.get("/api/jobs").json()["data"]
        assert listing["paging"]["total"] == 0

    def test_unknown_organization(self, client: TestClient, user_factory) -> None:
        user = user_factory()
        response = client.post(
            "/api/jobs",
            json={
                "organization_id": "0190a6b2-3c4d-7e8f-9a0b-1c2d3e4f5a6b",
                "created_by_user_id": user.user_id,
                "job_title": "Welder",
                "job_type": "PERMANENT",
                "location": "Austin, TX",
            },
        )
        assert response.status_code == 404
        assert response.json()["error"] == "Related record not found"


class TestJobUpdate:
    def test_patch_changes_only_sent_fields(
        self, client: TestClient, organization_factory, user_factory
    ) -> None:
        user = user_factory()
        organization = organization_factory(created_by=user)
        job = client.post("/api/jobs", json=_job_payload(organization, user)).json()["data"]

        response = client.patch(f"/api/jobs/{job['job_id']}", json={"status": "OPEN"})

        assert response.status_code == 200
        updated = response.json()["data"]
        assert updated["status"] == "OPEN"
        for field in ("job_title", "job_type", "location", "organization_id", "approved"):
            assert updated[field] == job[field]

    def test_patch_missing_job(self, client: TestClient) -> None:
        response = client.patch("/api/jobs/missing", json={"status": "OPEN"})
        assert response.status_code == 404
        assert response.json()["error"] == "Job not found"

    def test_delete_missing_job(self, client: TestClient) -> None:
        response = client.delete("/api/jobs/missing")
        assert response.status_code == 404


class TestJobList:
    def test_filter_by_status_and_pagination(
        self, client: TestClient, organization_factory, user_factory
    ) -> None:
        user = user_factory()
        organization = organization_factory(created_by=user)
        for i in range(4):
            client.post(
                "/api/jobs",
                json=_job_payload(organization, user, job_title=f"Open {i}", status="OPEN"),
            )
        client.post("/api/jobs", json=_job_payload(organization, user, job_title="Draft"))

        body = client.get("/api/jobs", params={"status": "OPEN", "limit": 3}).json()["data"]

        assert body["paging"] == {"total": 4, "page": 1, "limit": 3, "totalPages": 2}
        assert [job["job_title"] for job in body["data"]] == ["Open 3", "Open 2", "Open 1"]

    def test_bad_filter_value_is_bad_request(self, client: TestClient) -> None:
        response = client.get("/api/jobs", params={"approved": "maybe"})
        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "approved"
