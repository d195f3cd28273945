"""직원 SQLAlchemy ORM 모델 정의.

Employee SQLAlchemy ORM model definition.

Tables:
    - employee: 직원 (Employees; referenced as EMPLOYEE by native SQL)
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from employee_api.database import Base


class Employee(Base):
    """직원 모델 — 단일 관계형 엔티티.

    Employee model — the single relational entity of the service.
    The primary key is supplied by the caller on insert and never changes.
    Column names are lower-case so that unquoted native SQL
    (EMPLOYEE, FIRST_NAME, ...) resolves to them on every dialect.

    Attributes:
        employee_id: 직원 식별자 (Caller-assigned identifier)
        first_name: 이름 (First name)
        last_name: 성 (Last name)
        email: 이메일 (Email address, not unique)
        salary: 급여 (Salary)
    """

    __tablename__ = "employee"

    # 직원 식별자 — Caller-assigned primary key, never generated by the database
    employee_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    first_name: Mapped[str] = mapped_column(String(255), nullable=False)
    last_name: Mapped[str] = mapped_column(String(255), nullable=False)
    # 이메일 — 형식 검증/중복 검사 없음 (No format validation or duplicate detection)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    salary: Mapped[int] = mapped_column(Integer, nullable=False)

    def __repr__(self) -> str:
        return f"<Employee {self.employee_id} {self.first_name} {self.last_name}>"
