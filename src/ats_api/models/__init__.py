"""Mapped tables. Importing this package registers them on ``Base.metadata``."""

from __future__ import annotations

from ats_api.models.applicant import Applicant, ApplicantDocument, Application, Interview
from ats_api.models.job import Job
from ats_api.models.organization import Organization
from ats_api.models.user import Task, User, UserActivity

__all__ = [
    "Applicant",
    "ApplicantDocument",
    "Application",
    "Interview",
    "Job",
    "Organization",
    "Task",
    "User",
    "UserActivity",
]
