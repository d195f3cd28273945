"""FastAPI 의존성 주입 모듈 — 페이지 요청 및 서비스 제공.

FastAPI dependency injection module.
Provides reusable dependencies for building a page-request from query
parameters and for handing the employee service to route handlers, so
tests can override either through ``app.dependency_overrides``.

Page Request Parameters:
    - page: 페이지 번호, 0부터 시작 (0-based page number, default 0)
    - size: 페이지 크기 (Page size, default PAGE_DEFAULT_SIZE)
    - sort: ``prop[,prop...][,asc|desc]``, 반복 가능 (Repeatable)
"""

from typing import Annotated

from fastapi import Query

from employee_api.config import settings
from employee_api.services.employee_service import EmployeeService, employee_service
from employee_api.utils.pagination import PageRequest, build_page_request


async def get_page_request(
    page: Annotated[int, Query(description="0-based page number")] = 0,
    size: Annotated[int, Query(description="Items per page")] = settings.PAGE_DEFAULT_SIZE,
    sort: Annotated[list[str], Query(description="prop[,prop...][,asc|desc]")] = [],
) -> PageRequest:
    """쿼리 파라미터로 페이지 요청을 생성합니다.

    Build the PageRequest for paginated endpoints.
    """
    return build_page_request(page, size, sort)


def get_employee_service() -> EmployeeService:
    """직원 서비스 인스턴스를 반환합니다 (Return the employee service)."""
    return employee_service
