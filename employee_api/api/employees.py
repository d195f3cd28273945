"""직원 라우터 — 직원 조회, 페이지네이션, 수정 엔드포인트.

Employee Router — Lookup, pagination and mutation endpoints.

Response Conventions:
    - 단건 조회 실패: 204 No Content (Single-record miss)
    - 다건 조회 실패: 빈 목록 (Collection miss: empty list)
    - 수정: 영향받은 행 수 (Updates return the affected row count)
    - 추가: 고정 문자열 "Data inserted Successfully" (text/plain)
    - 데이터베이스 오류: 500 (Persistence faults: 500)

Mutating endpoints commit the request's transaction after the service call.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, Response, status
from fastapi.responses import PlainTextResponse
from sqlalchemy.ext.asyncio import AsyncSession

from employee_api.api.deps import get_employee_service, get_page_request
from employee_api.database import get_db
from employee_api.schemas.employee import EmployeePage, EmployeeResponse
from employee_api.services.employee_service import EmployeeService
from employee_api.utils.pagination import PageRequest

router: APIRouter = APIRouter()

DbSession = Annotated[AsyncSession, Depends(get_db)]
Service = Annotated[EmployeeService, Depends(get_employee_service)]


def _one_or_no_content(employee: EmployeeResponse | None) -> EmployeeResponse | Response:
    """조회 결과가 없으면 204 응답을 반환합니다 (Map a miss to 204 No Content)."""
    if employee is None:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return employee


# ---------------------------------------------------------------------------
# 페이지네이션 — Pagination
# ---------------------------------------------------------------------------
@router.get("/listEmp", response_model=EmployeePage)
async def list_employees(
    db: DbSession,
    service: Service,
    page_request: Annotated[PageRequest, Depends(get_page_request)],
) -> EmployeePage:
    """직원 목록을 페이지 단위로 조회합니다. 요청한 정렬을 적용합니다.

    Paged list of employees in the requested (or natural) order.
    """
    return await service.list_employees(db, page_request)


@router.get("/pagination", response_model=EmployeePage)
async def find_all_with_pagination(
    db: DbSession,
    service: Service,
    page_request: Annotated[PageRequest, Depends(get_page_request)],
) -> EmployeePage:
    """직원 ID 오름차순 페이지를 조회합니다. sort 파라미터는 무시됩니다.

    Paged list ordered by employee id ascending; ``sort`` is ignored.
    """
    return await service.find_all_with_pagination(db, page_request)


# ---------------------------------------------------------------------------
# 단건 조회 — Single-record lookups
# ---------------------------------------------------------------------------
@router.get("/byNameAndEmail/{name}/{email}", response_model=EmployeeResponse)
async def find_by_first_name_and_email(
    name: str,
    email: str,
    db: DbSession,
    service: Service,
) -> EmployeeResponse | Response:
    return _one_or_no_content(await service.find_by_first_name_and_email(db, name, email))


@router.get("/byEmial/{email}", response_model=EmployeeResponse)
async def find_by_email(
    email: str,
    db: DbSession,
    service: Service,
) -> EmployeeResponse | Response:
    return _one_or_no_content(await service.find_by_email(db, email))


@router.get("/byName/{firstName}/{lastName}", response_model=EmployeeResponse)
async def find_by_first_and_last_name(
    first_name: Annotated[str, Path(alias="firstName")],
    last_name: Annotated[str, Path(alias="lastName")],
    db: DbSession,
    service: Service,
) -> EmployeeResponse | Response:
    return _one_or_no_content(
        await service.find_by_first_and_last_name(db, first_name, last_name)
    )


@router.get("/byFirstName/{firstName}", response_model=EmployeeResponse)
async def find_by_first_name(
    first_name: Annotated[str, Path(alias="firstName")],
    db: DbSession,
    service: Service,
) -> EmployeeResponse | Response:
    return _one_or_no_content(await service.find_by_first_name(db, first_name))


@router.get("/byLastNameAndEmailJPQL1/{lastName}/{email}", response_model=EmployeeResponse)
async def find_by_last_name_and_email_v1(
    last_name: Annotated[str, Path(alias="lastName")],
    email: str,
    db: DbSession,
    service: Service,
) -> EmployeeResponse | Response:
    return _one_or_no_content(
        await service.find_by_last_name_and_email_v1(db, last_name, email)
    )


@router.get("/byLastNameAndEmailJPQL2/{lastName}/{email}", response_model=EmployeeResponse)
async def find_by_last_name_and_email_v2(
    emp_last_name: Annotated[str, Path(alias="lastName")],
    emp_email: Annotated[str, Path(alias="email")],
    db: DbSession,
    service: Service,
) -> EmployeeResponse | Response:
    """v1과 동일 — 인자 이름만 다릅니다 (Same as v1 with different argument names)."""
    return _one_or_no_content(
        await service.find_by_last_name_and_email_v2(db, emp_last_name, emp_email)
    )


@router.get("/byEmailAndFirstNameNative/{email}/{firstName}", response_model=EmployeeResponse)
async def find_by_email_and_first_name_native(
    emp_email: Annotated[str, Path(alias="email")],
    emp_first_name: Annotated[str, Path(alias="firstName")],
    db: DbSession,
    service: Service,
) -> EmployeeResponse | Response:
    return _one_or_no_content(
        await service.find_by_email_and_first_name_native(db, emp_email, emp_first_name)
    )


# ---------------------------------------------------------------------------
# 다건 조회 — Collection lookup
# ---------------------------------------------------------------------------
@router.get("/getEmployeesByFirstNames", response_model=list[EmployeeResponse])
async def find_by_first_names(
    first_names: Annotated[list[str], Query(alias="firstNames")],
    db: DbSession,
    service: Service,
) -> list[EmployeeResponse]:
    """이름 목록으로 직원을 조회합니다. 콤마 구분 값과 반복 파라미터 모두 허용.

    Look up employees by a set of first names.
    Accepts ``firstNames=a,b`` as well as repeated ``firstNames`` parameters.
    """
    names: set[str] = {
        name.strip()
        for value in first_names
        for name in value.split(",")
        if name.strip()
    }
    return await service.find_by_first_names(db, names)


# ---------------------------------------------------------------------------
# 수정 — Mutations (트랜잭션 커밋 포함)
# ---------------------------------------------------------------------------
@router.put("/updateEmployeeByEmpId/{empName}/{employeeId}", response_model=int)
async def update_name_by_id(
    emp_name: Annotated[str, Path(alias="empName")],
    employee_id: Annotated[int, Path(alias="employeeId")],
    db: DbSession,
    service: Service,
) -> int:
    """ID로 직원 이름을 수정합니다. 수정된 행 수를 반환합니다.

    Update the employee's first name; returns the affected row count.
    """
    updated: int = await service.update_name_by_id(db, emp_name, employee_id)
    await db.commit()
    return updated


@router.put("/updateEmployeeEmailByEmpId/{empEmail}/{employeeId}", response_model=int)
async def update_email_by_id(
    emp_email: Annotated[str, Path(alias="empEmail")],
    employee_id: Annotated[int, Path(alias="employeeId")],
    db: DbSession,
    service: Service,
) -> int:
    """ID로 직원 이메일을 수정합니다. 수정된 행 수를 반환합니다.

    Update the employee's email; returns the affected row count.
    """
    updated: int = await service.update_email_by_id(db, emp_email, employee_id)
    await db.commit()
    return updated


@router.put(
    "/insertEmployee/{empId}/{firstName}/{lastName}/{email}/{salary}",
    response_class=PlainTextResponse,
)
async def insert_employee(
    emp_id: Annotated[int, Path(alias="empId")],
    first_name: Annotated[str, Path(alias="firstName")],
    last_name: Annotated[str, Path(alias="lastName")],
    email: str,
    salary: int,
    db: DbSession,
    service: Service,
) -> str:
    """직원을 추가합니다. 고정된 완료 메시지를 반환합니다.

    Insert an employee; responds with the fixed confirmation text.
    """
    message: str = await service.insert_employee(
        db, emp_id, first_name, last_name, email, salary
    )
    await db.commit()
    return message
