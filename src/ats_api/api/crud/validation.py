"""Run optional request-body validators and map their failures."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ValidationError

from ats_api.schemas.generic import FieldError


def format_validation_errors(exc: ValidationError) -> list[FieldError]:
    return [
        FieldError(field=".".join(str(part) for part in error["loc"]), message=error["msg"])
        for error in exc.errors()
    ]


def validate_payload(
    schema: type[BaseModel] | None,
    body: Any,
    *,
    partial: bool = False,
) -> tuple[dict[str, Any] | None, list[FieldError] | None]:
    """Validate ``body`` against ``schema``.

    Returns ``(data, None)`` on success and ``(None, errors)`` on failure.
    With ``partial`` only the keys present in the body are returned, so an
    update never touches fields the caller left out. Without a schema the
    body passes through as long as it is a JSON object.
    """
    if schema is None:
        if not isinstance(body, dict):
            return None, [FieldError(field="", message="Request body must be a JSON object")]
        return dict(body), None

    try:
        validated = schema.model_validate(body)
    except ValidationError as exc:
        return None, format_validation_errors(exc)

    if partial:
        return validated.model_dump(exclude_unset=True), None
    return validated.model_dump(exclude_none=True), None
