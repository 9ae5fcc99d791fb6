from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from ats_api.schemas.common import IdStr, NotNull, StrictInput

UserStatus = Literal["ACTIVE", "INACTIVE"]


class UserCreate(StrictInput):
    name: str = Field(min_length=1)
    email: EmailStr
    password_hash: str = Field(min_length=8)
    status: UserStatus = "ACTIVE"
    is_admin: bool = True


class UserUpdate(StrictInput):
    """Email is the login identity and cannot be changed."""

    name: Annotated[str | None, NotNull, Field(min_length=1)] = None
    password_hash: Annotated[str | None, NotNull, Field(min_length=8)] = None
    status: Annotated[UserStatus | None, NotNull] = None
    is_admin: Annotated[bool | None, NotNull] = None


class UserResponse(BaseModel):
    """Never includes the password hash."""

    user_id: str
    name: str
    email: str
    status: str
    is_admin: bool
    created_at: datetime
    last_updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class TaskCreate(StrictInput):
    user_id: IdStr
    assigned_to_user_id: IdStr
    description: str = Field(min_length=1)
    status: str = Field(min_length=1)
    due_date: datetime | None = None


class TaskUpdate(StrictInput):
    user_id: Annotated[IdStr | None, NotNull] = None
    assigned_to_user_id: Annotated[IdStr | None, NotNull] = None
    description: Annotated[str | None, NotNull, Field(min_length=1)] = None
    status: Annotated[str | None, NotNull, Field(min_length=1)] = None
    due_date: datetime | None = None


class TaskResponse(BaseModel):
    task_id: str
    user_id: str
    assigned_to_user_id: str
    description: str
    status: str
    due_date: datetime | None
    created_at: datetime
    last_updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class UserActivityCreate(StrictInput):
    user_id: IdStr
    last_login_at: datetime | None = None
    last_actions: dict[str, Any] | None = None


class UserActivityUpdate(StrictInput):
    last_login_at: datetime | None = None
    last_actions: dict[str, Any] | None = None


class UserActivityResponse(BaseModel):
    user_activity_id: str
    user_id: str
    last_login_at: datetime | None
    last_actions: dict[str, Any] | None
    created_at: datetime
    last_updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
