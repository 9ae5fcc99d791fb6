from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from ats_api.db.base import TimestampedBase, id_column


class Applicant(TimestampedBase):
    __tablename__ = "applicants"

    applicant_id: Mapped[str] = id_column()
    full_name: Mapped[str] = mapped_column(String(255), nullable=False)
    status: Mapped[str] = mapped_column(String(16), default="APPLIED")
    last_active_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), default=None
    )


class ApplicantDocument(TimestampedBase):
    """Metadata for a document stored outside the database."""

    __tablename__ = "applicant_documents"

    applicant_document_id: Mapped[str] = id_column()
    applicant_id: Mapped[str] = mapped_column(
        ForeignKey("applicants.applicant_id"), nullable=False
    )
    document_type: Mapped[str] = mapped_column(String(128), nullable=False)
    file_url: Mapped[str] = mapped_column(Text, nullable=False)


class Application(TimestampedBase):
    __tablename__ = "applications"
    __table_args__ = (
        UniqueConstraint("job_id", "applicant_id", name="uq_applications_job_applicant"),
    )

    application_id: Mapped[str] = id_column()
    job_id: Mapped[str] = mapped_column(ForeignKey("jobs.job_id"), nullable=False)
    applicant_id: Mapped[str] = mapped_column(
        ForeignKey("applicants.applicant_id"), nullable=False
    )
    source: Mapped[str | None] = mapped_column(String(128), default=None)
    status: Mapped[str] = mapped_column(String(16), default="APPLIED")
    applied_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), default=None)


class Interview(TimestampedBase):
    __tablename__ = "interviews"

    interview_id: Mapped[str] = id_column()
    application_id: Mapped[str] = mapped_column(
        ForeignKey("applications.application_id"), nullable=False, unique=True
    )
    interview_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    status: Mapped[str] = mapped_column(String(32), nullable=False)
