"""Generic list/search component shared by every collection.

All list endpoints go through `paginate`, so they agree on defaults, sort
direction, secret stripping and the "empty page is not an error" rule.
"""
import asyncio
import math
import re
from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence, Type

from fastapi import Query
from pymongo import ASCENDING, DESCENDING

from healthhub.config import get_settings
from healthhub.constants import SortOrder
from healthhub.exceptions import ValidationError
from healthhub.models.base import TimestampedDocument
from healthhub.responses import success_response


@dataclass
class PageParams:
    page: int = 1
    limit: int = 10
    sortOrder: SortOrder = SortOrder.DESC

    def __post_init__(self):
        max_size = get_settings().MAX_PAGE_SIZE
        self.page = max(1, self.page)
        # limit <= 0 would break skip/totalPages arithmetic
        self.limit = max(1, min(self.limit, max_size))

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit

    @property
    def direction(self) -> int:
        return ASCENDING if self.sortOrder == SortOrder.ASC else DESCENDING

    @classmethod
    def from_raw(cls, page: Any = None, limit: Any = None, sort_order: Any = None) -> "PageParams":
        """Lenient parsing of query strings: junk falls back to the defaults."""
        return cls(
            page=_to_int(page, 1),
            limit=_to_int(limit, get_settings().DEFAULT_PAGE_SIZE),
            sortOrder=parse_sort_order(sort_order),
        )


def _to_int(value: Any, default: int) -> int:
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        return default
    return parsed or default


def parse_sort_order(value: Any) -> SortOrder:
    if isinstance(value, str) and value.strip().lower() == SortOrder.ASC.value:
        return SortOrder.ASC
    return SortOrder.DESC


def page_params(
    page: Optional[str] = Query(None, description="1-based page number"),
    limit: Optional[str] = Query(None, description="Page size"),
    sortOrder: Optional[str] = Query(None, description="asc | desc (by creation time)"),
) -> PageParams:
    """FastAPI dependency for the common page/limit/sortOrder query params."""
    return PageParams.from_raw(page, limit, sortOrder)


@dataclass
class Page:
    items: list[dict]
    total: int
    params: PageParams

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.params.limit)

    def to_response(self, items_key: str, found_message: str, empty_message: str):
        if not self.items:
            return success_response(200, False, empty_message, [])
        return success_response(200, True, found_message, {
            items_key: self.items,
            "currentPage": self.params.page,
            "totalPages": self.total_pages,
            "total": self.total,
        })


def search_filter(term: Optional[str], fields: Sequence[str]) -> dict:
    """Case-insensitive substring match on any of `fields`; blank terms are rejected."""
    if term is None or not term.strip():
        raise ValidationError("Search value is required")
    pattern = re.escape(term.strip())
    return {"$or": [{f: {"$regex": pattern, "$options": "i"}} for f in fields]}


async def paginate(
    model: Type[TimestampedDocument],
    params: PageParams,
    filters: Optional[dict] = None,
    serializer: Optional[Callable[[TimestampedDocument], dict]] = None,
) -> Page:
    """Count and fetch one page of `model` concurrently, newest first unless asc."""
    filters = filters or {}
    total, documents = await asyncio.gather(
        model.find(filters).count(),
        model.find(filters)
        .sort([("createdAt", params.direction), ("_id", params.direction)])
        .skip(params.skip)
        .limit(params.limit)
        .to_list(),
    )
    serialize = serializer or (lambda d: d.to_public())
    return Page(items=[serialize(d) for d in documents], total=total, params=params)
