"""기본 레포지토리 — 모든 레포지토리의 부모 클래스.

Base Repository — Parent class for all domain repositories.
Provides primary-key lookup, sorted/paginated listing and single/multi
row fetch helpers shared by the domain repositories.

Usage:
    class EmployeeRepository(BaseRepository[Employee]):
        def __init__(self) -> None:
            super().__init__(Employee)
"""

from typing import Any, Generic, Sequence, TypeVar

from sqlalchemy import Select, inspect, select
from sqlalchemy.sql.expression import Executable
from sqlalchemy.ext.asyncio import AsyncSession

from employee_api.database import Base
from employee_api.utils.exceptions import BadRequestError
from employee_api.utils.pagination import PageRequest, SortOrder, paginate

# 제네릭 타입 변수 — SQLAlchemy 모델을 나타냄
# Generic type variable representing a SQLAlchemy model
ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """제네릭 레포지토리.

    Generic repository providing common read operations.
    Reads always refresh identity-mapped instances (populate_existing) so
    rows changed by native UPDATE statements are returned current.

    Attributes:
        model: SQLAlchemy 모델 클래스 (The SQLAlchemy model class)
    """

    def __init__(self, model: type[ModelType]) -> None:
        """레포지토리를 초기화합니다.

        Initialize the repository with a model class.

        Args:
            model: 이 레포지토리가 관리할 SQLAlchemy 모델 클래스
                   (SQLAlchemy model class this repository manages)
        """
        self.model: type[ModelType] = model

    async def get_by_id(self, db: AsyncSession, record_id: Any) -> ModelType | None:
        """기본 키로 단일 레코드를 조회합니다.

        Retrieve a single record by its primary key.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            record_id: 조회할 레코드의 기본 키 (Primary key of the record)

        Returns:
            ModelType | None: 조회된 레코드 또는 None (Found record or None)
        """
        return await db.get(self.model, record_id, populate_existing=True)

    async def get_page(
        self,
        db: AsyncSession,
        page_request: PageRequest,
        query: Select | None = None,
    ) -> tuple[Sequence[ModelType], int]:
        """요청된 정렬을 적용하여 한 페이지를 조회합니다.

        Retrieve one page of records, applying the page-request's sort.
        Without sort clauses the database's natural order is used.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            page_request: 페이지 요청 (Page-request)
            query: 기본 SELECT 쿼리, None이면 전체 조회
                   (Base SELECT query; None selects every row)

        Returns:
            tuple[Sequence[ModelType], int]: (레코드 목록, 전체 개수)
                                             (List of records, total count)

        Raises:
            BadRequestError: 모델에 없는 정렬 속성일 때 (Unknown sort property)
        """
        if query is None:
            query = select(self.model)
        query = self._apply_sort(query, page_request.sort)
        return await paginate(db, query, page_request)

    def _apply_sort(self, query: Select, sort: Sequence[SortOrder]) -> Select:
        """정렬 조건을 ORDER BY 절로 변환합니다."""
        sortable: list[str] = inspect(self.model).column_attrs.keys()
        for order in sort:
            if order.property not in sortable:
                raise BadRequestError(f"Unknown sort property: {order.property}")
            column = getattr(self.model, order.property)
            query = query.order_by(column.desc() if order.direction == "desc" else column.asc())
        return query

    async def _fetch_one(
        self,
        db: AsyncSession,
        statement: Executable,
        params: dict[str, Any] | None = None,
    ) -> ModelType | None:
        """0개 또는 1개 행을 반환하는 쿼리를 실행합니다.

        Execute a query expected to match zero or one row.
        More than one matching row raises ``MultipleResultsFound``.
        """
        result = await db.execute(
            statement.execution_options(populate_existing=True), params
        )
        return result.scalars().one_or_none()

    async def _fetch_all(
        self,
        db: AsyncSession,
        statement: Executable,
        params: dict[str, Any] | None = None,
    ) -> list[ModelType]:
        """여러 행을 반환하는 쿼리를 실행합니다 (Execute a multi-row query)."""
        result = await db.execute(
            statement.execution_options(populate_existing=True), params
        )
        return list(result.scalars().all())
