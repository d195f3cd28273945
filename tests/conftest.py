"""테스트 인프라 — 인메모리 SQLite DB, 세션, httpx 클라이언트 픽스처.

Test infrastructure — In-memory SQLite DB, session, and httpx client fixtures.
Each test gets a fresh in-memory database (StaticPool keeps the single
connection alive), so no cleanup between tests is needed.
"""

from collections.abc import AsyncGenerator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from employee_api.database import Base, get_db
from employee_api.main import app
from employee_api.models import Employee

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

# (employee_id, first_name, last_name, email, salary)
SAMPLE_EMPLOYEES: list[tuple[int, str, str, str, int]] = [
    (1, "Jane", "Doe", "jane.doe@example.com", 5000),
    (2, "John", "Smith", "john.smith@example.com", 4200),
    (3, "Alice", "Kim", "alice.kim@example.com", 6100),
    (4, "Bob", "Lee", "bob.lee@example.com", 3900),
    (5, "Carol", "Park", "carol.park@example.com", 4700),
    (6, "David", "Choi", "david.choi@example.com", 5300),
    (7, "Erin", "Jung", "erin.jung@example.com", 4400),
    (8, "Frank", "Han", "frank.han@example.com", 3800),
]


# ---------------------------------------------------------------------------
# Function-scoped: 엔진, 세션, 클라이언트
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """테스트용 인메모리 async 엔진. 스키마를 생성합니다."""
    eng = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield eng
    await eng.dispose()


@pytest_asyncio.fixture
async def db(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """각 테스트에 격리된 DB 세션을 제공합니다."""
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async with factory() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def client(db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """FastAPI 테스트 클라이언트 — DB 세션을 오버라이드합니다."""
    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        try:
            yield db
        except SQLAlchemyError:
            await db.rollback()
            raise

    app.dependency_overrides[get_db] = _override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# 헬퍼 픽스처: 테스트용 데이터 생성
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def employees(db: AsyncSession) -> list[Employee]:
    """샘플 직원 8명을 생성합니다."""
    rows = [
        Employee(
            employee_id=employee_id,
            first_name=first_name,
            last_name=last_name,
            email=email,
            salary=salary,
        )
        for employee_id, first_name, last_name, email, salary in SAMPLE_EMPLOYEES
    ]
    db.add_all(rows)
    await db.commit()
    return rows


@pytest_asyncio.fixture
async def duplicate_janes(db: AsyncSession, employees) -> Employee:
    """이름이 같은 두 번째 Jane을 추가합니다 (단건 조회 다중 결과용)."""
    twin = Employee(
        employee_id=9,
        first_name="Jane",
        last_name="Roe",
        email="jane.roe@example.com",
        salary=4100,
    )
    db.add(twin)
    await db.commit()
    return twin
