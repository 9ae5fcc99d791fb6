from __future__ import annotations

from fastapi import APIRouter

from ats_api.api.routes import applicants, applications, health, jobs, organizations, users

router = APIRouter()
router.include_router(health.router)
router.include_router(users.users_router)
router.include_router(users.user_activity_router)
router.include_router(users.tasks_router)
router.include_router(organizations.router)
router.include_router(jobs.router)
router.include_router(applicants.applicants_router)
router.include_router(applicants.documents_router)
router.include_router(applications.applications_router)
router.include_router(applications.interviews_router)
