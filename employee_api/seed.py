"""초기 데이터 시드 스크립트 — 샘플 직원 생성.

Seed script — Creates the employee table and a handful of sample employees.
Run this script once to bootstrap a development database.

Usage:
    python -m employee_api.seed
"""

import asyncio
import logging

from sqlalchemy import func, select

from employee_api.database import Base, async_session, engine
from employee_api.models import Employee

logger = logging.getLogger(__name__)

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


async def seed() -> None:
    """데이터베이스를 샘플 직원으로 시드합니다.

    Seed the database with sample employees.
    Creates tables if they don't exist, then inserts the sample rows.

    Idempotent: 직원이 이미 있으면 건너뜁니다 (Skips if any employee exists).
    """
    # 테이블 생성 — DDL 실행 (Create all tables from ORM metadata)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session() as db:
        existing: int = (await db.execute(select(func.count()).select_from(Employee))).scalar() or 0
        if existing:
            logger.info("Already seeded (%d employees). Skipping.", existing)
            return

        db.add_all(
            Employee(
                employee_id=employee_id,
                first_name=first_name,
                last_name=last_name,
                email=email,
                salary=salary,
            )
            for employee_id, first_name, last_name, email, salary in SAMPLE_EMPLOYEES
        )
        await db.commit()
        logger.info("Seeded %d employees", len(SAMPLE_EMPLOYEES))

    await engine.dispose()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(seed())
