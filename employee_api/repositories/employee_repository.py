"""직원 레포지토리 — 직원 조회, 페이지네이션, 수정 쿼리.

Employee Repository — Named queries over the employee table.

Two query styles are used side by side:
    - 엔티티 쿼리 (Entity queries): ``select(Employee)`` expressions, with
      values bound positionally or through named ``bindparam``s.
    - 네이티브 쿼리 (Native queries): SQL text in the database dialect,
      mapped back onto ``Employee`` with ``from_statement``.

Writes never commit; the caller owns the transaction.
"""

from typing import Any, Collection, Sequence

from sqlalchemy import Select, bindparam, select, text, update
from sqlalchemy.ext.asyncio import AsyncSession

from employee_api.models.employee import Employee
from employee_api.repositories.base import BaseRepository
from employee_api.utils.pagination import PageRequest

# ---------------------------------------------------------------------------
# 네이티브 SQL — Native SQL statements
# ---------------------------------------------------------------------------
FIND_BY_FIRST_NAME_SQL = text(
    "SELECT * FROM EMPLOYEE E WHERE E.FIRST_NAME = :first_name"
)
FIND_BY_EMAIL_AND_FIRST_NAME_SQL = text(
    "SELECT * FROM EMPLOYEE E WHERE E.EMAIL = :email AND E.FIRST_NAME = :first_name"
)
FIND_ALL_ORDERED_BY_ID_SQL = text(
    "SELECT * FROM EMPLOYEE ORDER BY EMPLOYEE_ID ASC LIMIT :limit OFFSET :offset"
)
COUNT_ALL_SQL = text("SELECT COUNT(*) FROM EMPLOYEE")
UPDATE_EMAIL_BY_ID_SQL = text(
    "UPDATE EMPLOYEE SET EMAIL = :email WHERE EMPLOYEE_ID = :employee_id"
)
INSERT_EMPLOYEE_SQL = text(
    "INSERT INTO EMPLOYEE(EMPLOYEE_ID, FIRST_NAME, LAST_NAME, EMAIL, SALARY) "
    "VALUES(:employee_id, :first_name, :last_name, :email, :salary)"
)

# ---------------------------------------------------------------------------
# 명명 파라미터 엔티티 쿼리 — Entity queries with named parameters
# ---------------------------------------------------------------------------
FIND_BY_LAST_NAME_AND_EMAIL: Select = select(Employee).where(
    Employee.last_name == bindparam("last_name"),
    Employee.email == bindparam("email"),
)
FIND_BY_FIRST_NAMES: Select = select(Employee).where(
    Employee.first_name.in_(bindparam("first_names", expanding=True))
)


class EmployeeRepository(BaseRepository[Employee]):
    """직원 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the employee table.
    Single-row lookups return None on a miss.
    """

    def __init__(self) -> None:
        super().__init__(Employee)

    # --- 페이지네이션 (Pagination) ---

    async def find_all(
        self,
        db: AsyncSession,
        page_request: PageRequest,
    ) -> tuple[Sequence[Employee], int]:
        """전체 직원을 페이지 단위로 조회합니다. 요청된 정렬을 적용합니다.

        Retrieve a page of all employees, honoring the requested sort.
        """
        return await self.get_page(db, page_request)

    async def find_all_with_pagination(
        self,
        db: AsyncSession,
        page_request: PageRequest,
    ) -> tuple[list[Employee], int]:
        """네이티브 SQL로 직원 ID 오름차순 페이지를 조회합니다.

        Retrieve a page of employees ordered by id ascending with native SQL.
        The page-request's sort is ignored; the statement fixes the order.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            page_request: 페이지 요청 (Page-request; only page/size are used)

        Returns:
            tuple[list[Employee], int]: (직원 목록, 전체 개수)
                                        (Employees on the page, total count)
        """
        total: int = (await db.execute(COUNT_ALL_SQL)).scalar() or 0
        items: list[Employee] = await self._fetch_all(
            db,
            select(Employee).from_statement(FIND_ALL_ORDERED_BY_ID_SQL),
            {"limit": page_request.size, "offset": page_request.offset},
        )
        return items, total

    # --- 위치 파라미터 엔티티 쿼리 (Entity queries, positional values) ---

    async def find_by_first_name_and_email(
        self, db: AsyncSession, first_name: str, email: str
    ) -> Employee | None:
        query: Select = select(Employee).where(
            Employee.first_name == first_name, Employee.email == email
        )
        return await self._fetch_one(db, query)

    async def find_by_email(self, db: AsyncSession, email: str) -> Employee | None:
        return await self._fetch_one(db, select(Employee).where(Employee.email == email))

    async def find_by_first_and_last_name(
        self, db: AsyncSession, first_name: str, last_name: str
    ) -> Employee | None:
        query: Select = select(Employee).where(
            Employee.first_name == first_name, Employee.last_name == last_name
        )
        return await self._fetch_one(db, query)

    # --- 네이티브 쿼리 (Native queries) ---

    async def find_by_first_name(self, db: AsyncSession, first_name: str) -> Employee | None:
        """이름으로 직원을 조회합니다 (네이티브 SQL).

        Look up an employee by first name with native SQL.
        """
        return await self._fetch_one(
            db,
            select(Employee).from_statement(FIND_BY_FIRST_NAME_SQL),
            {"first_name": first_name},
        )

    async def find_by_email_and_first_name_native(
        self, db: AsyncSession, emp_email: str, emp_first_name: str
    ) -> Employee | None:
        """이메일과 이름으로 직원을 조회합니다 (네이티브 SQL, 명명 파라미터).

        Look up an employee by email and first name with native SQL.
        """
        return await self._fetch_one(
            db,
            select(Employee).from_statement(FIND_BY_EMAIL_AND_FIRST_NAME_SQL),
            {"email": emp_email, "first_name": emp_first_name},
        )

    # --- 명명 파라미터 엔티티 쿼리 (Entity queries, named parameters) ---

    async def find_by_last_name_and_email_v1(
        self, db: AsyncSession, last_name: str, email: str
    ) -> Employee | None:
        """성과 이메일로 직원을 조회합니다 — 인자명과 파라미터명이 같음.

        Look up by last name and email; argument names match the bound names.
        """
        return await self._fetch_one(
            db, FIND_BY_LAST_NAME_AND_EMAIL, {"last_name": last_name, "email": email}
        )

    async def find_by_last_name_and_email_v2(
        self, db: AsyncSession, emp_last_name: str, emp_email: str
    ) -> Employee | None:
        """v1과 동일한 쿼리 — 인자명만 바인딩 이름과 다름.

        Same query as v1; only the argument names differ from the bound names.
        """
        return await self._fetch_one(
            db,
            FIND_BY_LAST_NAME_AND_EMAIL,
            {"last_name": emp_last_name, "email": emp_email},
        )

    async def find_by_first_names(
        self, db: AsyncSession, first_names: Collection[str]
    ) -> list[Employee]:
        """이름 집합 중 하나와 일치하는 모든 직원을 조회합니다 (IN 절).

        Retrieve every employee whose first name is in the given collection.
        An empty collection matches nothing.
        """
        return await self._fetch_all(
            db, FIND_BY_FIRST_NAMES, {"first_names": list(first_names)}
        )

    # --- 수정 쿼리 (Modifying queries) ---

    async def update_name_by_id(
        self, db: AsyncSession, first_name: str, employee_id: int
    ) -> int:
        """ID로 직원 이름을 수정합니다 (엔티티 UPDATE).

        Set the first name of the employee with the given id.

        Returns:
            int: 수정된 행 수, 0 또는 1 (Affected row count)
        """
        statement = (
            update(Employee)
            .where(Employee.employee_id == employee_id)
            .values(first_name=first_name)
        )
        result = await db.execute(statement)
        return result.rowcount

    async def update_email_by_id(
        self, db: AsyncSession, email: str, employee_id: int
    ) -> int:
        """ID로 직원 이메일을 수정합니다 (네이티브 UPDATE).

        Set the email of the employee with the given id with native SQL.

        Returns:
            int: 수정된 행 수, 0 또는 1 (Affected row count)
        """
        result = await db.execute(
            UPDATE_EMAIL_BY_ID_SQL, {"email": email, "employee_id": employee_id}
        )
        return result.rowcount

    async def insert(
        self,
        db: AsyncSession,
        employee_id: int,
        first_name: str,
        last_name: str,
        email: str,
        salary: int,
    ) -> None:
        """네이티브 INSERT로 직원을 추가합니다.

        Insert an employee with native SQL. A duplicate id raises
        ``IntegrityError`` from the database.
        """
        params: dict[str, Any] = {
            "employee_id": employee_id,
            "first_name": first_name,
            "last_name": last_name,
            "email": email,
            "salary": salary,
        }
        await db.execute(INSERT_EMPLOYEE_SQL, params)


# 싱글턴 인스턴스 — Singleton instance
employee_repository: EmployeeRepository = EmployeeRepository()
