"""Storage accessor used by the CRUD factory.

Each entity gets a repository exposing the six storage operations the
handlers need. Database errors are re-raised as the small exception
hierarchy below so callers can map them to HTTP statuses without knowing
which database backend is in use.
"""

from __future__ import annotations

from typing import Any, Protocol, Sequence

from sqlalchemy import func, inspect, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from ats_api.db.filters import FilterField, apply_filters

# PostgreSQL SQLSTATE codes
_PG_UNIQUE_VIOLATION = "23505"
_PG_FOREIGN_KEY_VIOLATION = "23503"


class StorageError(Exception):
    """Base class for storage failures."""


class UniqueConstraintError(StorageError):
    """A write would duplicate a value that must be unique."""


class ForeignKeyConstraintError(StorageError):
    """A write references a missing row, or a delete orphans one."""


class RecordNotFoundError(StorageError):
    """The record targeted by a write does not exist."""


class Repository(Protocol):
    def find_many(
        self,
        *,
        skip: int,
        take: int,
        order_by: Sequence[tuple[str, str]],
        filters: dict[str, Any] | None = None,
    ) -> Sequence[Any]: ...

    def count(self, filters: dict[str, Any] | None = None) -> int: ...

    def find_unique(self, record_id: str) -> Any | None: ...

    def create(self, data: dict[str, Any]) -> Any: ...

    def update(self, record_id: str, data: dict[str, Any]) -> Any: ...

    def delete(self, record_id: str) -> Any: ...


def classify_integrity_error(exc: IntegrityError) -> StorageError:
    """Translate a driver integrity error into a storage error."""
    orig = exc.orig
    code = getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)
    message = str(orig).lower()

    if code == _PG_UNIQUE_VIOLATION:
        return UniqueConstraintError(str(orig))
    if code == _PG_FOREIGN_KEY_VIOLATION:
        return ForeignKeyConstraintError(str(orig))

    # SQLite and MySQL report the constraint kind only in the message
    if "foreign key" in message:
        return ForeignKeyConstraintError(str(orig))
    if "unique" in message or "duplicate" in message:
        return UniqueConstraintError(str(orig))
    return StorageError(str(orig))


class SqlAlchemyRepository:
    """Repository backed by a SQLAlchemy session and mapped model."""

    def __init__(
        self,
        session: Session,
        model: type,
        id_field: str,
        filter_config: list[FilterField] | None = None,
    ) -> None:
        self.session = session
        self.model = model
        self.id_field = id_field
        self.filter_config = filter_config or []
        self._columns = {attr.key for attr in inspect(model).column_attrs}

    def find_many(
        self,
        *,
        skip: int,
        take: int,
        order_by: Sequence[tuple[str, str]],
        filters: dict[str, Any] | None = None,
    ) -> Sequence[Any]:
        query = self._filtered(select(self.model), filters)
        order_clauses = []
        for column_name, direction in order_by:
            column = getattr(self.model, column_name)
            order_clauses.append(column.desc() if direction == "desc" else column.asc())
        query = query.order_by(*order_clauses).offset(skip).limit(take)
        try:
            return self.session.execute(query).scalars().all()
        except SQLAlchemyError as exc:
            raise StorageError(str(exc)) from exc

    def count(self, filters: dict[str, Any] | None = None) -> int:
        query = self._filtered(select(func.count()).select_from(self.model), filters)
        try:
            return self.session.execute(query).scalar() or 0
        except SQLAlchemyError as exc:
            raise StorageError(str(exc)) from exc

    def find_unique(self, record_id: str) -> Any | None:
        try:
            return self.session.get(self.model, record_id)
        except SQLAlchemyError as exc:
            raise StorageError(str(exc)) from exc

    def create(self, data: dict[str, Any]) -> Any:
        self._check_columns(data)
        try:
            item = self.model(**data)
        except TypeError as exc:
            raise StorageError(str(exc)) from exc
        self.session.add(item)
        self._commit()
        self.session.refresh(item)
        return item

    def update(self, record_id: str, data: dict[str, Any]) -> Any:
        self._check_columns(data)
        item = self.find_unique(record_id)
        if item is None:
            raise RecordNotFoundError(record_id)
        for field, value in data.items():
            setattr(item, field, value)
        self._commit()
        self.session.refresh(item)
        return item

    def delete(self, record_id: str) -> Any:
        item = self.find_unique(record_id)
        if item is None:
            raise RecordNotFoundError(record_id)
        self.session.delete(item)
        self._commit()
        return item

    def _filtered(self, query, filters: dict[str, Any] | None):
        if not filters:
            return query
        return apply_filters(query, self.model, self.filter_config, filters)

    def _check_columns(self, data: dict[str, Any]) -> None:
        unknown = sorted(set(data) - self._columns)
        if unknown:
            raise StorageError(f"Unknown field(s) for {self.model.__name__}: {', '.join(unknown)}")

    def _commit(self) -> None:
        try:
            self.session.commit()
        except IntegrityError as exc:
            self.session.rollback()
            raise classify_integrity_error(exc) from exc
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise StorageError(str(exc)) from exc
