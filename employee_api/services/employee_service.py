"""직원 서비스 — 레포지토리 위임 계층.

Employee Service — Thin layer between the router and the repository.
Forwards every call to the repository, converts ORM rows to response
schemas, and produces the fixed insert confirmation message.
"""

from typing import Collection, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from employee_api.models.employee import Employee
from employee_api.repositories.employee_repository import (
    EmployeeRepository,
    employee_repository,
)
from employee_api.schemas.employee import (
    INSERT_SUCCESS_MESSAGE,
    EmployeePage,
    EmployeeResponse,
)
from employee_api.utils.pagination import PageRequest


class EmployeeService:
    """직원 관련 요청을 레포지토리로 전달하는 서비스.

    Service forwarding employee requests to the repository.
    The repository is injected through the constructor.

    Attributes:
        repository: 직원 레포지토리 (Employee repository)
    """

    def __init__(self, repository: EmployeeRepository) -> None:
        self.repository: EmployeeRepository = repository

    def _to_response(self, employee: Employee | None) -> EmployeeResponse | None:
        """직원 모델을 응답 스키마로 변환합니다. None은 그대로 반환.

        Convert an Employee model instance to an EmployeeResponse; None passes through.
        """
        if employee is None:
            return None
        return EmployeeResponse(
            employee_id=employee.employee_id,
            first_name=employee.first_name,
            last_name=employee.last_name,
            email=employee.email,
            salary=employee.salary,
        )

    def _to_page(
        self,
        employees: Sequence[Employee],
        total: int,
        page_request: PageRequest,
    ) -> EmployeePage:
        return EmployeePage.of(
            [self._to_response(e) for e in employees], total, page_request
        )

    # --- 페이지네이션 (Pagination) ---

    async def list_employees(
        self, db: AsyncSession, page_request: PageRequest
    ) -> EmployeePage:
        """직원 목록을 페이지 단위로 조회합니다 (요청 정렬 적용).

        List employees one page at a time, honoring the requested sort.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            page_request: 페이지 요청 (Page-request)

        Returns:
            EmployeePage: 직원 페이지 (Page of employees)
        """
        employees, total = await self.repository.find_all(db, page_request)
        return self._to_page(employees, total, page_request)

    async def find_all_with_pagination(
        self, db: AsyncSession, page_request: PageRequest
    ) -> EmployeePage:
        """직원 ID 오름차순 페이지를 조회합니다 (요청 정렬 무시).

        List employees ordered by id; the requested sort is ignored.
        """
        employees, total = await self.repository.find_all_with_pagination(db, page_request)
        return self._to_page(employees, total, page_request)

    # --- 단건 조회 (Single-record lookups) ---

    async def find_by_first_name_and_email(
        self, db: AsyncSession, first_name: str, email: str
    ) -> EmployeeResponse | None:
        return self._to_response(
            await self.repository.find_by_first_name_and_email(db, first_name, email)
        )

    async def find_by_email(self, db: AsyncSession, email: str) -> EmployeeResponse | None:
        return self._to_response(await self.repository.find_by_email(db, email))

    async def find_by_first_and_last_name(
        self, db: AsyncSession, first_name: str, last_name: str
    ) -> EmployeeResponse | None:
        return self._to_response(
            await self.repository.find_by_first_and_last_name(db, first_name, last_name)
        )

    async def find_by_first_name(
        self, db: AsyncSession, first_name: str
    ) -> EmployeeResponse | None:
        return self._to_response(await self.repository.find_by_first_name(db, first_name))

    async def find_by_last_name_and_email_v1(
        self, db: AsyncSession, last_name: str, email: str
    ) -> EmployeeResponse | None:
        return self._to_response(
            await self.repository.find_by_last_name_and_email_v1(db, last_name, email)
        )

    async def find_by_last_name_and_email_v2(
        self, db: AsyncSession, emp_last_name: str, emp_email: str
    ) -> EmployeeResponse | None:
        return self._to_response(
            await self.repository.find_by_last_name_and_email_v2(
                db, emp_last_name, emp_email
            )
        )

    async def find_by_email_and_first_name_native(
        self, db: AsyncSession, emp_email: str, emp_first_name: str
    ) -> EmployeeResponse | None:
        return self._to_response(
            await self.repository.find_by_email_and_first_name_native(
                db, emp_email, emp_first_name
            )
        )

    async def find_by_first_names(
        self, db: AsyncSession, first_names: Collection[str]
    ) -> list[EmployeeResponse]:
        """이름 집합으로 직원 목록을 조회합니다.

        List employees whose first name is any of the given names.
        """
        employees: list[Employee] = await self.repository.find_by_first_names(
            db, first_names
        )
        return [self._to_response(e) for e in employees]

    # --- 수정 (Mutations) ---

    async def update_name_by_id(
        self, db: AsyncSession, first_name: str, employee_id: int
    ) -> int:
        return await self.repository.update_name_by_id(db, first_name, employee_id)

    async def update_email_by_id(
        self, db: AsyncSession, email: str, employee_id: int
    ) -> int:
        return await self.repository.update_email_by_id(db, email, employee_id)

    async def insert_employee(
        self,
        db: AsyncSession,
        employee_id: int,
        first_name: str,
        last_name: str,
        email: str,
        salary: int,
    ) -> str:
        """직원을 추가하고 고정된 완료 메시지를 반환합니다.

        Insert an employee and return the fixed confirmation message.
        Duplicate ids surface as a database error from the repository.

        Returns:
            str: "Data inserted Successfully"
        """
        await self.repository.insert(db, employee_id, first_name, last_name, email, salary)
        return INSERT_SUCCESS_MESSAGE


# 싱글턴 인스턴스 — Singleton instance
employee_service: EmployeeService = EmployeeService(employee_repository)
