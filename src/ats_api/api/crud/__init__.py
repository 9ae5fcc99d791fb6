"""Generic CRUD factory for entity endpoints."""

from __future__ import annotations

from ats_api.api.crud.factory import CrudController, EntityConfig, create_crud_router

__all__ = ["CrudController", "EntityConfig", "create_crud_router"]
