"""페이지네이션 유틸리티 모듈.

Pagination utility module for SQLAlchemy async queries.
Provides the page-request/page-result models, sort parameter parsing,
and a generic paginate function shared by all list endpoints.

Page numbers are 0-based. A sort parameter has the form
``prop[,prop...][,asc|desc]`` and may be repeated.
"""

import math
import re
from typing import Any, Generic, Literal, Sequence, TypeVar

from pydantic import BaseModel
from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from employee_api.config import settings
from employee_api.utils.exceptions import BadRequestError

T = TypeVar("T")

_DIRECTIONS: frozenset[str] = frozenset({"asc", "desc"})
_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


class SortOrder(BaseModel):
    """단일 정렬 조건.

    A single ordering clause: property name (snake_case) plus direction.
    """

    property: str
    direction: Literal["asc", "desc"] = "asc"


class PageRequest(BaseModel):
    """페이지 요청 모델 — (페이지 번호, 페이지 크기, 정렬) 튜플.

    Page-request describing a data window.

    Attributes:
        page: 페이지 번호, 0부터 시작 (Page number, 0-based)
        size: 페이지 크기 (Items per page)
        sort: 정렬 조건 목록 (Ordering clauses, applied in order)
    """

    page: int = 0
    size: int = 20
    sort: list[SortOrder] = []

    @property
    def offset(self) -> int:
        return self.page * self.size


class Page(BaseModel, Generic[T]):
    """페이지네이션 결과 모델.

    Pagination result model for typed responses.
    Contains the page items and metadata for client-side pagination controls.

    Attributes:
        items: 현재 페이지 항목 목록 (Items for the current page)
        total_count: 전체 항목 수 (Total count across all pages)
        page_number: 현재 페이지 번호 (Current page number, 0-based)
        page_size: 페이지당 항목 수 (Items per page)
        total_pages: 전체 페이지 수 (Total number of pages)
        first: 첫 페이지 여부 (Whether this is the first page)
        last: 마지막 페이지 여부 (Whether this is the last page)
    """

    items: list[T]
    total_count: int
    page_number: int
    page_size: int
    total_pages: int
    first: bool
    last: bool

    @classmethod
    def of(cls, items: Sequence[T], total_count: int, page_request: PageRequest) -> "Page[T]":
        """조회 결과와 페이지 요청으로 페이지 결과를 만듭니다.

        Build a page-result from fetched items, the total count and the request.
        """
        total_pages: int = math.ceil(total_count / page_request.size) if total_count else 0
        return cls(
            items=list(items),
            total_count=total_count,
            page_number=page_request.page,
            page_size=page_request.size,
            total_pages=total_pages,
            first=page_request.page == 0,
            last=page_request.page + 1 >= total_pages,
        )


def to_snake_case(name: str) -> str:
    """camelCase 속성명을 snake_case로 변환합니다 (firstName -> first_name)."""
    return _CAMEL_BOUNDARY.sub("_", name).lower()


def parse_sort(values: Sequence[str]) -> list[SortOrder]:
    """정렬 쿼리 파라미터를 정렬 조건 목록으로 변환합니다.

    Parse repeated ``sort`` query values into ordering clauses.
    Each value is ``prop[,prop...][,asc|desc]``; the trailing direction
    applies to every property in that value and defaults to ascending.

    Args:
        values: ``sort`` 쿼리 파라미터 값 목록 (Raw sort parameter values)

    Returns:
        list[SortOrder]: 정렬 조건 목록 (Parsed ordering clauses)

    Raises:
        BadRequestError: 속성명이 비어 있을 때 (A value names no property)
    """
    orders: list[SortOrder] = []
    for value in values:
        parts: list[str] = [p.strip() for p in value.split(",") if p.strip()]
        if not parts:
            continue

        direction: str = "asc"
        if parts[-1].lower() in _DIRECTIONS:
            direction = parts.pop().lower()
        if not parts:
            raise BadRequestError(f"Sort value '{value}' names no property")

        orders.extend(
            SortOrder(property=to_snake_case(p), direction=direction) for p in parts
        )
    return orders


def build_page_request(page: int, size: int, sort: Sequence[str] = ()) -> PageRequest:
    """쿼리 파라미터로 페이지 요청을 생성합니다.

    Build a PageRequest from raw query values.
    Negative pages clamp to 0, sizes below 1 fall back to the configured
    default, and sizes above the configured maximum are capped.
    """
    if size < 1:
        size = settings.PAGE_DEFAULT_SIZE
    return PageRequest(
        page=max(page, 0),
        size=min(size, settings.PAGE_MAX_SIZE),
        sort=parse_sort(sort),
    )


async def paginate(
    db: AsyncSession,
    query: Select[Any],
    page_request: PageRequest,
) -> tuple[Sequence[Any], int]:
    """SQLAlchemy 쿼리에 대한 페이지네이션을 수행합니다.

    Execute a paginated SQLAlchemy query, returning items and total count.
    Runs two queries: one for the total count (via subquery) and one for
    the actual page of results with OFFSET/LIMIT. Ordering must already be
    applied to ``query``.

    Args:
        db: 비동기 DB 세션 (Async database session)
        query: SQLAlchemy Select 쿼리 (Base query to paginate)
        page_request: 페이지 요청 (Page-request describing the window)

    Returns:
        tuple[Sequence[Any], int]: (항목 목록, 전체 개수) 튜플
            (Tuple of paginated items and total count)
    """
    # 전체 개수 조회 — 서브쿼리로 감싸서 COUNT 실행 (Count total via subquery)
    count_query = select(func.count()).select_from(query.order_by(None).subquery())
    total: int = (await db.execute(count_query)).scalar() or 0

    # 페이지 항목 조회 — OFFSET/LIMIT 적용 (Fetch page items with offset/limit)
    result = await db.execute(
        query.offset(page_request.offset)
        .limit(page_request.size)
        .execution_options(populate_existing=True)
    )
    items: Sequence[Any] = result.scalars().all()

    return items, total
