"""Declarative list filters shared by repositories and list endpoints."""

from __future__ import annotations

import dataclasses
from datetime import datetime
from enum import Enum
from typing import Any

from sqlalchemy.sql import Select


class FilterType(Enum):
    """Supported filter types."""

    EXACT = "exact"
    ILIKE = "ilike"
    DATE_RANGE = "date_range"


@dataclasses.dataclass(frozen=True)
class FilterField:
    """Declarative filter field configuration.

    Args:
        column_name: Mapped column to filter on.
        filter_type: How to filter (EXACT, ILIKE, DATE_RANGE).
        param_name: Query parameter name. Defaults to column_name.
        python_type: Python type of the query parameter. Default str.
    """

    column_name: str
    filter_type: FilterType
    param_name: str | None = None
    python_type: type = str

    @property
    def effective_param_name(self) -> str:
        return self.param_name if self.param_name is not None else self.column_name


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def apply_filters(
    query: Select,
    model: type,
    filter_config: list[FilterField],
    filter_values: dict[str, Any],
) -> Select:
    """Add a WHERE clause to ``query`` for every filter with a value.

    Filters combine with AND. Missing or None values are skipped.
    """
    for field in filter_config:
        column = getattr(model, field.column_name)
        param = field.effective_param_name

        if field.filter_type == FilterType.EXACT:
            value = filter_values.get(param)
            if value is not None:
                query = query.where(column == value)

        elif field.filter_type == FilterType.ILIKE:
            value = filter_values.get(param)
            if value is not None:
                query = query.where(column.ilike(f"%{_escape_like(value)}%", escape="\\"))

        elif field.filter_type == FilterType.DATE_RANGE:
            after_value = filter_values.get(f"{param}_after")
            before_value = filter_values.get(f"{param}_before")
            if after_value is not None:
                query = query.where(column >= after_value)
            if before_value is not None:
                query = query.where(column <= before_value)

    return query


def make_filter_dependency(
    filter_config: list[FilterField],
    resource_name: str = "",
) -> type:
    """Build a dataclass whose fields FastAPI reads as query parameters.

    DATE_RANGE filters expand to ``<param>_after`` and ``<param>_before``.
    """
    fields: list[tuple[str, Any, dataclasses.Field]] = []

    for field in filter_config:
        param = field.effective_param_name
        if field.filter_type == FilterType.DATE_RANGE:
            fields.append((f"{param}_after", datetime | None, dataclasses.field(default=None)))
            fields.append((f"{param}_before", datetime | None, dataclasses.field(default=None)))
        elif field.filter_type == FilterType.EXACT:
            fields.append((param, field.python_type | None, dataclasses.field(default=None)))
        elif field.filter_type == FilterType.ILIKE:
            fields.append((param, str | None, dataclasses.field(default=None)))

    class_name = f"{resource_name}FilterParams" if resource_name else "FilterParams"
    return dataclasses.make_dataclass(class_name, fields)
