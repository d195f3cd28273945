"""직원 레포지토리 및 서비스 테스트.

Employee repository and service tests — queries run directly against the
session, and the service is exercised with an injected stub repository.
"""

from unittest.mock import AsyncMock

import pytest
from sqlalchemy.exc import IntegrityError, MultipleResultsFound
from sqlalchemy.ext.asyncio import AsyncSession

from employee_api.repositories.employee_repository import EmployeeRepository
from employee_api.services.employee_service import EmployeeService
from employee_api.utils.pagination import PageRequest, SortOrder

repository = EmployeeRepository()


class TestRepositoryLookups:
    """레포지토리 조회 테스트."""

    async def test_find_by_email(self, db: AsyncSession, employees):
        employee = await repository.find_by_email(db, "carol.park@example.com")
        assert employee is not None
        assert employee.employee_id == 5

    async def test_native_lookup_maps_to_entity(self, db: AsyncSession, employees):
        """네이티브 SQL 결과가 Employee 엔티티로 매핑됨."""
        employee = await repository.find_by_email_and_first_name_native(
            db, "frank.han@example.com", "Frank"
        )
        assert employee is not None
        assert (employee.last_name, employee.salary) == ("Han", 3800)

    async def test_last_name_and_email_variants_match(self, db: AsyncSession, employees):
        v1 = await repository.find_by_last_name_and_email_v1(db, "Choi", "david.choi@example.com")
        v2 = await repository.find_by_last_name_and_email_v2(db, "Choi", "david.choi@example.com")
        assert v1 is v2
        assert v1.employee_id == 6

    async def test_single_lookup_with_many_rows_raises(self, db: AsyncSession, duplicate_janes):
        with pytest.raises(MultipleResultsFound):
            await repository.find_by_first_name(db, "Jane")

    async def test_find_by_first_names_empty_collection(self, db: AsyncSession, employees):
        assert await repository.find_by_first_names(db, []) == []

    async def test_get_by_id(self, db: AsyncSession, employees):
        employee = await repository.get_by_id(db, 3)
        assert employee.first_name == "Alice"
        assert await repository.get_by_id(db, 404) is None


class TestRepositoryPagination:
    """레포지토리 페이지네이션 테스트."""

    async def test_find_all_sorted(self, db: AsyncSession, employees):
        request = PageRequest(page=0, size=3, sort=[SortOrder(property="salary", direction="asc")])
        items, total = await repository.find_all(db, request)
        assert total == 8
        assert [e.salary for e in items] == [3800, 3900, 4200]

    async def test_native_pagination_ignores_sort(self, db: AsyncSession, employees):
        request = PageRequest(page=1, size=5, sort=[SortOrder(property="salary", direction="desc")])
        items, total = await repository.find_all_with_pagination(db, request)
        assert total == 8
        assert [e.employee_id for e in items] == [6, 7, 8]


class TestRepositoryMutations:
    """레포지토리 수정 테스트."""

    async def test_update_email_refreshes_reads(self, db: AsyncSession, employees):
        """네이티브 UPDATE 후 조회 시 최신 값이 반환됨."""
        assert await repository.update_email_by_id(db, "john@new.example.com", 2) == 1
        employee = await repository.get_by_id(db, 2)
        assert employee.email == "john@new.example.com"

    async def test_update_name_missing_id(self, db: AsyncSession, employees):
        assert await repository.update_name_by_id(db, "Nobody", 12345) == 0

    async def test_insert_duplicate_id(self, db: AsyncSession, employees):
        with pytest.raises(IntegrityError):
            await repository.insert(db, 1, "Dup", "Licate", "dup@example.com", 1)


class TestServiceInjection:
    """생성자 주입된 레포지토리로 서비스 동작 확인."""

    async def test_insert_returns_fixed_message(self):
        stub = AsyncMock(spec=EmployeeRepository)
        service = EmployeeService(stub)

        message = await service.insert_employee(None, 7, "Erin", "Jung", "e@x.com", 10)

        assert message == "Data inserted Successfully"
        stub.insert.assert_awaited_once_with(None, 7, "Erin", "Jung", "e@x.com", 10)

    async def test_lookup_miss_passes_through_as_none(self):
        stub = AsyncMock(spec=EmployeeRepository)
        stub.find_by_email.return_value = None
        service = EmployeeService(stub)

        assert await service.find_by_email(None, "nobody@example.com") is None

    async def test_update_count_passes_through(self):
        stub = AsyncMock(spec=EmployeeRepository)
        stub.update_email_by_id.return_value = 1
        service = EmployeeService(stub)

        assert await service.update_email_by_id(None, "x@y.z", 1) == 1
