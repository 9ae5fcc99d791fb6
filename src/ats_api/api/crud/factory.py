"""Generic CRUD handlers and router factory.

One :class:`EntityConfig` per table is enough to get the five standard
endpoints (list, get, create, update, delete) with pagination, optional
body validation and translation of storage errors into the response
envelope.
"""

from __future__ import annotations

import asyncio
import dataclasses
import logging
from typing import Any, Callable

from fastapi import APIRouter, Body, Depends, Path, Query
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from sqlalchemy.orm import Session
from starlette.status import (
    HTTP_201_CREATED,
    HTTP_400_BAD_REQUEST,
    HTTP_404_NOT_FOUND,
    HTTP_409_CONFLICT,
    HTTP_500_INTERNAL_SERVER_ERROR,
)

from ats_api.api.response import send_error, send_success
from ats_api.db.filters import FilterField, make_filter_dependency
from ats_api.db.repository import (
    ForeignKeyConstraintError,
    RecordNotFoundError,
    Repository,
    SqlAlchemyRepository,
    UniqueConstraintError,
)
from ats_api.db.session import get_count_db, get_db
from ats_api.schemas.generic import (
    ErrorResponse,
    FieldError,
    PageResult,
    Paging,
    SuccessResponse,
)

from .pagination import PageRequest, parse_page_request, total_pages
from .validation import validate_payload

logger = logging.getLogger(__name__)


def default_repository(session: Session, config: EntityConfig) -> Repository:
    return SqlAlchemyRepository(session, config.model, config.id_field, config.filter_config)


@dataclasses.dataclass(frozen=True)
class EntityConfig:
    """Everything the factory needs to know about one entity.

    Args:
        model: SQLAlchemy mapped class.
        name: Display name used in messages, e.g. "Job".
        id_field: Identifier attribute, e.g. "job_id".
        response_schema: Pydantic schema used to serialize records.
        create_schema: Optional validator for POST bodies.
        update_schema: Optional validator for PATCH bodies.
        default_limit: Page size when ``limit`` is missing or invalid.
        max_limit: Upper bound for ``limit``.
        filter_config: Declarative filters accepted by the list endpoint.
        repository_factory: Builds the storage accessor for a session.
    """

    model: type
    name: str
    id_field: str
    response_schema: type[BaseModel]
    create_schema: type[BaseModel] | None = None
    update_schema: type[BaseModel] | None = None
    default_limit: int = 10
    max_limit: int = 100
    filter_config: list[FilterField] = dataclasses.field(default_factory=list)
    repository_factory: Callable[[Session, EntityConfig], Repository] = default_repository


class CrudController:
    """The five standard handlers for one entity."""

    def __init__(self, config: EntityConfig) -> None:
        self.config = config

    @property
    def name(self) -> str:
        return self.config.name

    def _repository(self, db: Session) -> Repository:
        return self.config.repository_factory(db, self.config)

    def _serialize(self, item: Any) -> dict[str, Any]:
        return self.config.response_schema.model_validate(item).model_dump(mode="json")

    def _missing_id(self) -> JSONResponse:
        return send_error(f"{self.name} ID is required", HTTP_400_BAD_REQUEST)

    def _not_found(self) -> JSONResponse:
        return send_error(f"{self.name} not found", HTTP_404_NOT_FOUND)

    def _conflict(self) -> JSONResponse:
        return send_error(f"{self.name} with this value already exists", HTTP_409_CONFLICT)

    async def _fetch_page_and_total(
        self,
        page_repository: Repository,
        count_repository: Repository,
        page_request: PageRequest,
        filters: dict[str, Any] | None,
    ) -> tuple[list[Any], int]:
        fetch_page = run_in_threadpool(
            page_repository.find_many,
            skip=page_request.offset,
            take=page_request.limit,
            order_by=[(self.config.id_field, "desc")],
            filters=filters,
        )
        if count_repository is page_repository:
            items = await fetch_page
            return items, await run_in_threadpool(count_repository.count, filters)

        # Both calls must finish before either session is released
        items, total = await asyncio.gather(
            fetch_page,
            run_in_threadpool(count_repository.count, filters),
            return_exceptions=True,
        )
        for outcome in (items, total):
            if isinstance(outcome, BaseException):
                raise outcome
        return items, total

    async def get_all(
        self,
        db: Session,
        page: str | int | None = None,
        limit: str | int | None = None,
        filters: dict[str, Any] | None = None,
        count_db: Session | None = None,
    ) -> JSONResponse:
        """List one page of records.

        When ``count_db`` is given the total is counted on it while the page
        is fetched on ``db``. Otherwise both queries run in turn on ``db``.
        """
        page_request = parse_page_request(
            page,
            limit,
            default_limit=self.config.default_limit,
            max_limit=self.config.max_limit,
        )
        page_repository = self._repository(db)
        count_repository = (
            page_repository if count_db is None else self._repository(count_db)
        )
        try:
            items, total = await self._fetch_page_and_total(
                page_repository, count_repository, page_request, filters
            )
        except Exception:
            logger.exception("Error fetching %s", self.name)
            return send_error(f"Failed to fetch {self.name}", HTTP_500_INTERNAL_SERVER_ERROR)

        result = PageResult[dict](
            data=[self._serialize(item) for item in items],
            paging=Paging(
                total=total,
                page=page_request.page,
                limit=page_request.limit,
                total_pages=total_pages(total, page_request.limit),
            ),
        )
        return send_success(result)

    def get_by_id(self, db: Session, item_id: str | None) -> JSONResponse:
        if not item_id or not item_id.strip():
            return self._missing_id()
        try:
            item = self._repository(db).find_unique(item_id)
        except Exception:
            logger.exception("Error fetching %s %s", self.name, item_id)
            return send_error(f"Failed to fetch {self.name}", HTTP_500_INTERNAL_SERVER_ERROR)

        if item is None:
            return self._not_found()
        return send_success(self._serialize(item))

    def create(self, db: Session, payload: Any) -> JSONResponse:
        data, errors = validate_payload(self.config.create_schema, payload)
        if errors is not None:
            return send_error("Validation failed", HTTP_400_BAD_REQUEST, errors)

        try:
            item = self._repository(db).create(data)
        except UniqueConstraintError as exc:
            logger.warning("Duplicate %s rejected: %s", self.name, exc)
            return self._conflict()
        except (ForeignKeyConstraintError, RecordNotFoundError) as exc:
            logger.warning("%s references a missing record: %s", self.name, exc)
            return send_error("Related record not found", HTTP_404_NOT_FOUND)
        except Exception:
            logger.exception("Error creating %s", self.name)
            return send_error(f"Failed to create {self.name}", HTTP_500_INTERNAL_SERVER_ERROR)

        return send_success(self._serialize(item), HTTP_201_CREATED)

    def update(self, db: Session, item_id: str | None, payload: Any) -> JSONResponse:
        if not item_id or not item_id.strip():
            return self._missing_id()

        data, errors = validate_payload(self.config.update_schema, payload, partial=True)
        if errors is not None:
            return send_error("Validation failed", HTTP_400_BAD_REQUEST, errors)
        if self.config.id_field in data:
            return send_error(
                "Validation failed",
                HTTP_400_BAD_REQUEST,
                [FieldError(field=self.config.id_field, message="Identifier cannot be changed")],
            )

        repository = self._repository(db)
        try:
            if repository.find_unique(item_id) is None:
                return self._not_found()
            item = repository.update(item_id, data)
        except UniqueConstraintError as exc:
            logger.warning("Duplicate %s rejected: %s", self.name, exc)
            return self._conflict()
        except RecordNotFoundError:
            return self._not_found()
        except ForeignKeyConstraintError as exc:
            logger.warning("%s references a missing record: %s", self.name, exc)
            return send_error("Related record not found", HTTP_404_NOT_FOUND)
        except Exception:
            logger.exception("Error updating %s %s", self.name, item_id)
            return send_error(f"Failed to update {self.name}", HTTP_500_INTERNAL_SERVER_ERROR)

        return send_success(self._serialize(item))

    def delete(self, db: Session, item_id: str | None) -> JSONResponse:
        if not item_id or not item_id.strip():
            return self._missing_id()

        try:
            self._repository(db).delete(item_id)
        except RecordNotFoundError:
            return self._not_found()
        except ForeignKeyConstraintError as exc:
            logger.warning("%s %s is still referenced: %s", self.name, item_id, exc)
            return send_error(
                f"{self.name} is referenced by other records", HTTP_409_CONFLICT
            )
        except Exception:
            logger.exception("Error deleting %s %s", self.name, item_id)
            return send_error(f"Failed to delete {self.name}", HTTP_500_INTERNAL_SERVER_ERROR)

        return send_success({self.config.id_field: item_id})


def create_crud_router(
    config: EntityConfig,
    *,
    prefix: str,
    tags: list[str] | None = None,
    plural_name: str | None = None,
) -> APIRouter:
    """Mount the five CRUD endpoints for ``config`` on a new APIRouter.

    Args:
        config: Entity descriptor.
        prefix: URL prefix (e.g. "/jobs").
        tags: OpenAPI tags. Defaults to the prefix without its slash.
        plural_name: Used in the list route name. Defaults to name + "s".

    Returns:
        APIRouter with GET "", GET "/{item_id}", POST "", PATCH "/{item_id}"
        and DELETE "/{item_id}".
    """
    controller = CrudController(config)
    router = APIRouter(prefix=prefix, tags=tags or [prefix.strip("/")])
    name_lower = config.name.lower()
    plural_lower = (plural_name or f"{config.name}s").lower()
    filter_dep = make_filter_dependency(config.filter_config, resource_name=config.name)

    item_model = config.response_schema
    error_responses: dict[int | str, dict[str, Any]] = {
        HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        HTTP_404_NOT_FOUND: {"model": ErrorResponse},
        HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    }

    async def list_items(
        page: str | None = Query(default=None),
        limit: str | None = Query(default=None),
        filters: Any = Depends(filter_dep),
        db: Session = Depends(get_db),
        count_db: Session = Depends(get_count_db),
    ) -> JSONResponse:
        return await controller.get_all(
            db, page, limit, dataclasses.asdict(filters), count_db=count_db
        )

    def get_item(
        item_id: str = Path(),
        db: Session = Depends(get_db),
    ) -> JSONResponse:
        return controller.get_by_id(db, item_id)

    def create_item(
        payload: Any = Body(default=None),
        db: Session = Depends(get_db),
    ) -> JSONResponse:
        return controller.create(db, payload)

    def update_item(
        item_id: str = Path(),
        payload: Any = Body(default=None),
        db: Session = Depends(get_db),
    ) -> JSONResponse:
        return controller.update(db, item_id, payload)

    def delete_item(
        item_id: str = Path(),
        db: Session = Depends(get_db),
    ) -> JSONResponse:
        return controller.delete(db, item_id)

    # Unique OpenAPI operation ids across entity routers
    list_items.__name__ = f"list_{plural_lower}"
    get_item.__name__ = f"get_{name_lower}"
    create_item.__name__ = f"create_{name_lower}"
    update_item.__name__ = f"update_{name_lower}"
    delete_item.__name__ = f"delete_{name_lower}"

    router.add_api_route(
        "",
        list_items,
        methods=["GET"],
        response_model=None,
        responses={200: {"model": SuccessResponse[PageResult[item_model]]}, **error_responses},
        name=list_items.__name__,
    )
    router.add_api_route(
        "/{item_id}",
        get_item,
        methods=["GET"],
        response_model=None,
        responses={200: {"model": SuccessResponse[item_model]}, **error_responses},
        name=get_item.__name__,
    )
    router.add_api_route(
        "",
        create_item,
        methods=["POST"],
        status_code=HTTP_201_CREATED,
        response_model=None,
        responses={
            HTTP_201_CREATED: {"model": SuccessResponse[item_model]},
            HTTP_409_CONFLICT: {"model": ErrorResponse},
            **error_responses,
        },
        name=create_item.__name__,
    )
    router.add_api_route(
        "/{item_id}",
        update_item,
        methods=["PATCH"],
        response_model=None,
        responses={
            200: {"model": SuccessResponse[item_model]},
            HTTP_409_CONFLICT: {"model": ErrorResponse},
            **error_responses,
        },
        name=update_item.__name__,
    )
    router.add_api_route(
        "/{item_id}",
        delete_item,
        methods=["DELETE"],
        response_model=None,
        responses={
            200: {"model": SuccessResponse[dict[str, str]]},
            HTTP_409_CONFLICT: {"model": ErrorResponse},
            **error_responses,
        },
        name=delete_item.__name__,
    )

    return router
