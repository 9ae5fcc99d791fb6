from __future__ import annotations

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from ats_api.db.base import TimestampedBase, id_column


class Organization(TimestampedBase):
    __tablename__ = "organizations"

    organization_id: Mapped[str] = id_column()
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    created_by_user_id: Mapped[str] = mapped_column(
        ForeignKey("users.user_id"), nullable=False
    )
    website: Mapped[str | None] = mapped_column(String(512), default=None)
    status: Mapped[str] = mapped_column(String(16), default="ACTIVE")
    phone: Mapped[str | None] = mapped_column(String(64), default=None)
