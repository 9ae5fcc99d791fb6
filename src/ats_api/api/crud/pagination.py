"""Page request parsing for list endpoints."""

from __future__ import annotations

import math
from dataclasses import dataclass

DEFAULT_PAGE = 1
# Largest OFFSET the storage engines accept (signed 64-bit)
MAX_OFFSET = 2**63 - 1


@dataclass(frozen=True)
class PageRequest:
    page: int
    limit: int

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


def _parse_int(raw: str | int | None) -> int | None:
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    try:
        return int(raw.strip())
    except ValueError:
        return None


def parse_page_request(
    page: str | int | None,
    limit: str | int | None,
    *,
    default_limit: int,
    max_limit: int,
) -> PageRequest:
    """Turn raw ``page``/``limit`` query values into an effective page request.

    Missing or non-integer values fall back to the defaults, a page below 1
    becomes 1 and the limit is clamped to ``[1, max_limit]``. A page so large
    that its offset would overflow MAX_OFFSET is lowered to the last page that
    fits, which is always empty in practice. Input is never rejected.
    """
    parsed_page = _parse_int(page)
    if parsed_page is None or parsed_page < 1:
        parsed_page = DEFAULT_PAGE

    parsed_limit = _parse_int(limit)
    if parsed_limit is None:
        parsed_limit = default_limit
    parsed_limit = min(max_limit, max(1, parsed_limit))
    parsed_page = min(parsed_page, MAX_OFFSET // parsed_limit)

    return PageRequest(page=parsed_page, limit=parsed_limit)


def total_pages(total: int, limit: int) -> int:
    return math.ceil(total / limit)
