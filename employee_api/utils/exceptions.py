"""커스텀 HTTP 예외 및 예외 핸들러 모듈.

Custom HTTP exception classes and exception handlers.
Provides pre-configured HTTPException subclasses for request errors and
the handler that turns persistence-layer faults into 500 responses.

Usage:
    from employee_api.utils.exceptions import BadRequestError
    raise BadRequestError("Unknown sort property: age")
"""

import logging

from fastapi import HTTPException, Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class BadRequestError(HTTPException):
    """400 Bad Request 예외 — 잘못된 요청 데이터 시 사용.

    400 Bad Request exception.
    Raised when the request data is invalid beyond what Pydantic validation catches
    (e.g. an unknown sort property or direction).

    Args:
        detail: 오류 메시지 (Error message, default: "Bad request")
    """

    def __init__(self, detail: str = "Bad request") -> None:
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


async def database_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """영속성 계층 오류를 500 응답으로 변환합니다.

    Translate any SQLAlchemy error (constraint violation, multiple rows for
    a single-row lookup, driver failure) into a generic server error.
    """
    logger.error(
        "database.error",
        exc_info=exc,
        extra={
            "exc_type": type(exc).__name__,
            "path": request.url.path,
            "method": request.method,
        },
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Database error"},
    )

