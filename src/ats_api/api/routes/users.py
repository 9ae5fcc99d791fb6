from __future__ import annotations

from ats_api.api.crud import EntityConfig, create_crud_router
from ats_api.db.filters import FilterField, FilterType
from ats_api.models.user import Task, User, UserActivity
from ats_api.schemas.user import (
    TaskCreate,
    TaskResponse,
    TaskUpdate,
    UserActivityCreate,
    UserActivityResponse,
    UserActivityUpdate,
    UserCreate,
    UserResponse,
    UserUpdate,
)

USER_CONFIG = EntityConfig(
    model=User,
    name="User",
    id_field="user_id",
    response_schema=UserResponse,
    create_schema=UserCreate,
    update_schema=UserUpdate,
    filter_config=[
        FilterField("status", FilterType.EXACT),
        FilterField("is_admin", FilterType.EXACT, python_type=bool),
        FilterField("name", FilterType.ILIKE, param_name="search"),
    ],
)

TASK_CONFIG = EntityConfig(
    model=Task,
    name="Task",
    id_field="task_id",
    response_schema=TaskResponse,
    create_schema=TaskCreate,
    update_schema=TaskUpdate,
    filter_config=[
        FilterField("user_id", FilterType.EXACT),
        FilterField("assigned_to_user_id", FilterType.EXACT),
        FilterField("status", FilterType.EXACT),
        FilterField("due_date", FilterType.DATE_RANGE),
    ],
)

USER_ACTIVITY_CONFIG = EntityConfig(
    model=UserActivity,
    name="UserActivity",
    id_field="user_activity_id",
    response_schema=UserActivityResponse,
    create_schema=UserActivityCreate,
    update_schema=UserActivityUpdate,
    filter_config=[
        FilterField("user_id", FilterType.EXACT),
        FilterField("last_login_at", FilterType.DATE_RANGE),
    ],
)

users_router = create_crud_router(USER_CONFIG, prefix="/users", tags=["users"])
tasks_router = create_crud_router(TASK_CONFIG, prefix="/user-tasks", tags=["tasks"])
user_activity_router = create_crud_router(
    USER_ACTIVITY_CONFIG,
    prefix="/user-activity",
    tags=["user-activity"],
    plural_name="UserActivities",
)
