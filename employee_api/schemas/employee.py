"""직원 Pydantic 응답 스키마 정의.

Employee Pydantic response schema definitions.
"""

from pydantic import BaseModel

from employee_api.utils.pagination import Page


class EmployeeResponse(BaseModel):
    """직원 응답 스키마.

    Employee response schema.

    Attributes:
        employee_id: 직원 식별자 (Employee identifier)
        first_name: 이름 (First name)
        last_name: 성 (Last name)
        email: 이메일 (Email address)
        salary: 급여 (Salary)
    """

    employee_id: int
    first_name: str
    last_name: str
    email: str
    salary: int


# 직원 페이지 응답 — Page-result of employees
EmployeePage = Page[EmployeeResponse]

# 삽입 완료 메시지 — Fixed confirmation returned by the insert endpoint
INSERT_SUCCESS_MESSAGE: str = "Data inserted Successfully"
