"""FastAPI 애플리케이션 엔트리포인트 — 미들웨어, 예외 핸들러 및 라우터 등록.

FastAPI application entry point — Middleware, exception handler and router registration.
Configures request logging, CORS, health check, and the employee router.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError

from employee_api.api.employees import router as employees_router
from employee_api.config import settings
from employee_api.middleware.axiom_logging import AxiomLoggingMiddleware
from employee_api.utils.exceptions import database_error_handler

app: FastAPI = FastAPI(
    title=settings.APP_NAME,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

# Axiom API 로깅 미들웨어 — Axiom API request/response logging
# CORS보다 먼저 등록하여 모든 요청을 캡처 (Registered before CORS to capture all requests)
app.add_middleware(AxiomLoggingMiddleware)

# CORS 미들웨어 — Cross-Origin Resource Sharing middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# 영속성 계층 오류 → 500 (Persistence-layer faults become 500 responses)
app.add_exception_handler(SQLAlchemyError, database_error_handler)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """서버 상태 확인 엔드포인트.

    Health check endpoint for load balancers and monitoring.
    """
    return {"status": "ok"}


# 직원 라우터 — 경로는 접두사 없이 루트에 등록 (Employee routes live at the root path)
app.include_router(employees_router, tags=["Employees"])
