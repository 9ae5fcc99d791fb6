"""Field types shared by the entity schemas."""

from __future__ import annotations

from typing import Annotated
from uuid import UUID

from pydantic import BaseModel, BeforeValidator, ConfigDict, PlainSerializer

# Validated as a UUID, stored and returned as its string form
IdStr = Annotated[UUID, PlainSerializer(str, return_type=str)]


def _reject_none(value: object) -> object:
    if value is None:
        raise ValueError("cannot be null")
    return value


# For optional update fields backed by NOT NULL columns: the key may be left
# out, but an explicit null is an error.
NotNull = BeforeValidator(_reject_none)


class StrictInput(BaseModel):
    """Base for request bodies: unknown keys are rejected."""

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)
