from __future__ import annotations

import secrets
import time
from datetime import datetime, timezone
from typing import Any
from uuid import UUID

from sqlalchemy import DateTime, String, event
from sqlalchemy.orm import DeclarativeBase, Mapped, MappedAsDataclass, mapped_column


def generate_id() -> str:
    """Return a time-ordered UUID (version 7 layout) as a string.

    The top 48 bits hold the Unix time in milliseconds and the next 12 bits
    the sub-millisecond fraction, so later ids sort after earlier ones.
    Ids minted within the same 1/4096 ms tick differ only in their random
    tail, so their relative order is arbitrary.
    """
    nanos = time.time_ns()
    millis, remainder = divmod(nanos, 1_000_000)
    sub_millis = (remainder * 4096) // 1_000_000

    value = (millis & 0xFFFF_FFFF_FFFF) << 80
    value |= 0x7 << 76
    value |= sub_millis << 64
    value |= 0b10 << 62
    value |= secrets.randbits(62)
    return str(UUID(int=value))


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def id_column() -> Any:
    """Primary key column populated with :func:`generate_id`."""
    return mapped_column(
        String(36),
        primary_key=True,
        init=False,
        default_factory=generate_id,
    )


class Base(MappedAsDataclass, DeclarativeBase):
    pass


class TimestampedBase(Base):
    __abstract__ = True

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        init=False,
        default_factory=utcnow,
    )
    last_updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        init=False,
        default_factory=utcnow,
    )


@event.listens_for(TimestampedBase, "before_update", propagate=True)
def _touch_last_updated_at(mapper, connection, target) -> None:
    target.last_updated_at = utcnow()
