# clean_api/shared/utils/pagination.py

from typing import Literal, Optional, Sequence, TypeVar

from fastapi import Query
from fastapi_pagination import Page, Params

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100

T = TypeVar("T")


def pagination_params(
        page: int = Query(1, ge=1, description="Page number"),
        size: int = Query(
            DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE, description="Items per page"
        ),
) -> Params:
    return Params(page=page, size=size)


def page_offset(params: Params) -> int:
    return (params.page - 1) * params.size


def build_page(items: Sequence[T], total: int, params: Params) -> Page[T]:
    """Wrap one already-sliced page of results in the standard Page envelope."""
    return Page.create(items=list(items), params=params, total=total)


class ListQuery:
    """Search and ordering options shared by list endpoints."""

    def __init__(
            self,
            search: Optional[str] = Query(None, max_length=100, description="Case-insensitive text filter"),
            sort: str = Query("created_at", description="Field to sort by"),
            order: Literal["asc", "desc"] = Query("desc", description="Sort direction"),
    ):
        self.search = search
        self.sort = sort
        self.order = order

