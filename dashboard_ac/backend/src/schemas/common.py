"""Response envelopes and pagination schemas shared by every router."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Generic, Literal, TypeVar

from fastapi import Query
from pydantic import BaseModel

T = TypeVar("T")

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100


class Envelope(BaseModel, Generic[T]):
    """Uniform wrapper for single-item responses."""

    status: Literal["success", "error"] = "success"
    message: str
    data: T | None = None


class ErrorEnvelope(BaseModel):
    status: Literal["error"] = "error"
    message: str
    error: Any | None = None


class PaginationMeta(BaseModel):
    page: int
    limit: int
    total: int
    total_pages: int

    @classmethod
    def build(cls, page: int, limit: int, total: int) -> "PaginationMeta":
        return cls(
            page=page,
            limit=limit,
            total=total,
            total_pages=math.ceil(total / limit) if limit else 0,
        )


class PaginatedEnvelope(BaseModel, Generic[T]):
    """Uniform wrapper for list responses."""

    status: Literal["success", "error"] = "success"
    message: str
    data: list[T]
    pagination: PaginationMeta


@dataclass(frozen=True)
class PageParams:
    """Normalised ``page``/``limit`` query parameters.

    Out-of-range values fall back to the defaults instead of failing.
    """

    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    @classmethod
    def normalize(cls, page: int | None, limit: int | None) -> "PageParams":
        if page is None or page < 1:
            page = DEFAULT_PAGE
        if limit is None or limit < 1 or limit > MAX_LIMIT:
            limit = DEFAULT_LIMIT
        return cls(page=page, limit=limit)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


def page_params(
    page: int | None = Query(default=DEFAULT_PAGE),
    limit: int | None = Query(default=DEFAULT_LIMIT),
) -> PageParams:
    """FastAPI dependency returning normalised pagination parameters."""

    return PageParams.normalize(page, limit)


def envelope(message: str, data: Any = None) -> dict[str, Any]:
    return {"status": "success", "message": message, "data": data}


def paginated(message: str, items: list[Any], total: int, params: PageParams) -> dict[str, Any]:
    return {
        "status": "success",
        "message": message,
        "data": items,
        "pagination": PaginationMeta.build(params.page, params.limit, total),
    }


__all__ = [
    "Envelope",
    "ErrorEnvelope",
    "PageParams",
    "PaginatedEnvelope",
    "PaginationMeta",
    "envelope",
    "page_params",
    "paginated",
]
