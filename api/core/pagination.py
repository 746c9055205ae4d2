"""Pagination and search query helpers shared by every list endpoint."""

import math
from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends, Request

from core.config import get_settings


@dataclass(frozen=True, slots=True)
class Pagination:
    page: int
    limit: int

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


def _positive_int(raw: str | None, default: int) -> int:
    try:
        value = int(raw) if raw is not None else default
    except ValueError:
        return default
    return value if value > 0 else default


def total_pages(total_count: int, limit: int) -> int:
    return math.ceil(total_count / limit)


def pagination_handler(request: Request) -> Pagination:
    """Read ``page`` and ``limit`` from the query string.

    Missing, non-numeric and non-positive values fall back to page 1 and the
    configured default page size. No upper bound is applied to ``limit``.
    """
    params = request.query_params
    return Pagination(
        page=_positive_int(params.get("page"), 1),
        limit=_positive_int(params.get("limit"), get_settings().default_page_size),
    )


def search_handler(request: Request) -> str:
    """Free-text ``search`` term, stripped; empty string when absent."""
    return (request.query_params.get("search") or "").strip()


PaginationParams = Annotated[Pagination, Depends(pagination_handler)]
SearchTerm = Annotated[str, Depends(search_handler)]
