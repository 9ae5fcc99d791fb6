from __future__ import annotations

from datetime import datetime

from sqlalchemy import JSON, Boolean, DateTime, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from ats_api.db.base import TimestampedBase, id_column


class User(TimestampedBase):
    __tablename__ = "users"

    user_id: Mapped[str] = id_column()
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    status: Mapped[str] = mapped_column(String(16), default="ACTIVE")
    is_admin: Mapped[bool] = mapped_column(Boolean, default=True)


class Task(TimestampedBase):
    __tablename__ = "tasks"

    task_id: Mapped[str] = id_column()
    user_id: Mapped[str] = mapped_column(ForeignKey("users.user_id"), nullable=False)
    assigned_to_user_id: Mapped[str] = mapped_column(
        ForeignKey("users.user_id"), nullable=False
    )
    description: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[str] = mapped_column(String(64), nullable=False)
    due_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), default=None)


class UserActivity(TimestampedBase):
    __tablename__ = "user_activities"

    user_activity_id: Mapped[str] = id_column()
    user_id: Mapped[str] = mapped_column(
        ForeignKey("users.user_id"), nullable=False, unique=True
    )
    last_login_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), default=None
    )
    last_actions: Mapped[dict | None] = mapped_column(JSON, default=None)
