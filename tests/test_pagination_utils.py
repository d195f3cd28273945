"""페이지네이션 유틸리티 단위 테스트.

Pagination utility unit tests — sort parsing, page-request normalisation
and page-result metadata.
"""

import pytest
from fastapi import HTTPException

from employee_api.utils.pagination import (
    Page,
    PageRequest,
    SortOrder,
    build_page_request,
    parse_sort,
    to_snake_case,
)


class TestParseSort:
    """정렬 파라미터 파싱 테스트."""

    def test_single_property_defaults_to_ascending(self):
        assert parse_sort(["salary"]) == [SortOrder(property="salary", direction="asc")]

    def test_trailing_direction_applies_to_all_properties(self):
        assert parse_sort(["lastName,firstName,DESC"]) == [
            SortOrder(property="last_name", direction="desc"),
            SortOrder(property="first_name", direction="desc"),
        ]

    def test_repeated_values_keep_order(self):
        orders = parse_sort(["first_name,asc", "employee_id,desc"])
        assert [(o.property, o.direction) for o in orders] == [
            ("first_name", "asc"),
            ("employee_id", "desc"),
        ]

    def test_blank_values_ignored(self):
        assert parse_sort(["", " , "]) == []

    def test_direction_without_property(self):
        with pytest.raises(HTTPException) as exc_info:
            parse_sort(["desc"])
        assert exc_info.value.status_code == 400

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("employeeId", "employee_id"),
            ("firstName", "first_name"),
            ("salary", "salary"),
            ("last_name", "last_name"),
        ],
    )
    def test_to_snake_case(self, name, expected):
        assert to_snake_case(name) == expected


class TestBuildPageRequest:
    """페이지 요청 보정 테스트."""

    def test_values_kept(self):
        request = build_page_request(2, 10, ["salary,desc"])
        assert request.page == 2
        assert request.size == 10
        assert request.offset == 20
        assert request.sort == [SortOrder(property="salary", direction="desc")]

    def test_negative_page_clamped(self):
        assert build_page_request(-1, 10).page == 0

    def test_non_positive_size_uses_default(self):
        assert build_page_request(0, 0).size == 20
        assert build_page_request(0, -5).size == 20

    def test_size_capped(self):
        assert build_page_request(0, 5000).size == 2000


class TestPageOf:
    """페이지 결과 메타데이터 테스트."""

    def test_middle_page(self):
        page = Page[int].of([4, 5, 6], 8, PageRequest(page=1, size=3))
        assert page.total_pages == 3
        assert page.first is False
        assert page.last is False
        assert page.items == [4, 5, 6]

    def test_last_page(self):
        page = Page[int].of([7, 8], 8, PageRequest(page=2, size=3))
        assert page.last is True

    def test_exact_multiple(self):
        page = Page[int].of([1, 2, 3, 4], 8, PageRequest(page=0, size=4))
        assert page.total_pages == 2
        assert page.first is True
        assert page.last is False

    def test_empty(self):
        page = Page[int].of([], 0, PageRequest(page=0, size=20))
        assert page.total_pages == 0
        assert page.first is True
        assert page.last is True
