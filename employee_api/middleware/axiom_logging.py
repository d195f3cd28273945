"""Axiom API 로깅 미들웨어.

Axiom API logging middleware.
Captures request/response data and sends structured logs to Axiom.
Logs: method, path, route template, path/query params, status code,
duration and error reason. Email addresses carried in path or query
parameters are masked before they leave the process.
"""

import json
import re
import time
from typing import Any

from axiom_py import Client as AxiomClient
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from employee_api.config import settings

# 이메일 패턴 — local part is masked, domain kept for troubleshooting
_EMAIL = re.compile(r"^([^@\s]{1,2})[^@\s]*(@[^@\s]+)$")

# 로깅 제외 경로 — Paths excluded from logging
_SKIP_PATHS = {"/health", "/docs", "/redoc", "/openapi.json"}


def _mask_email(value: str) -> str:
    """이메일 로컬 파트 마스킹 — ``jane@x.com`` -> ``ja***@x.com``."""
    return _EMAIL.sub(r"\1***\2", value)


def _mask_params(params: dict[str, str]) -> dict[str, str]:
    return {k: _mask_email(v) for k, v in params.items()}


def _mask_path(path: str) -> str:
    return "/".join(_mask_email(segment) for segment in path.split("/"))


def _route_template(request: Request) -> str | None:
    """매칭된 라우트 경로 템플릿 (e.g. ``/byEmial/{email}``)."""
    route = request.scope.get("route")
    return getattr(route, "path", None)


class AxiomLoggingMiddleware(BaseHTTPMiddleware):
    """모든 API 요청/응답을 Axiom에 로깅하는 미들웨어.

    Middleware that logs all API requests and responses to Axiom.
    Passes requests through untouched when Axiom is not configured.
    """

    def __init__(self, app: Any) -> None:
        super().__init__(app)
        self._client: AxiomClient | None = None
        self._dataset: str = settings.AXIOM_DATASET

        if settings.AXIOM_API_TOKEN and settings.AXIOM_DATASET:
            self._client = AxiomClient(token=settings.AXIOM_API_TOKEN)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in _SKIP_PATHS or not self._client:
            return await call_next(request)

        start_time = time.time()
        error_detail: str | None = None
        status_code: int = 500
        try:
            response = await call_next(request)
            status_code = response.status_code

            # 에러 응답시 body에서 사유 추출 — Extract error detail from error responses
            if status_code >= 400:
                resp_body = b""
                async for chunk in response.body_iterator:
                    resp_body += chunk if isinstance(chunk, bytes) else chunk.encode("utf-8")

                try:
                    error_detail = str(json.loads(resp_body).get("detail"))[:500]
                except (json.JSONDecodeError, UnicodeDecodeError, AttributeError):
                    error_detail = resp_body.decode("utf-8", errors="replace")[:500]

                # 소비한 body를 다시 응답으로 반환 — Re-wrap consumed body
                response = Response(
                    content=resp_body,
                    status_code=status_code,
                    headers=dict(response.headers),
                    media_type=response.media_type,
                )
        except Exception as exc:
            error_detail = f"{type(exc).__name__}: {str(exc)[:300]}"
            raise
        finally:
            log_event: dict[str, Any] = {
                "method": request.method,
                "path": _mask_path(request.url.path),
                "route": _route_template(request),
                "status_code": status_code,
                "duration_ms": round((time.time() - start_time) * 1000, 2),
            }
            if request.path_params:
                log_event["path_params"] = _mask_params(dict(request.path_params))
            if request.query_params:
                log_event["query_params"] = _mask_params(dict(request.query_params))
            if error_detail:
                log_event["error"] = error_detail

            try:
                self._client.ingest_events(self._dataset, [log_event])
            except Exception:
                pass  # 로깅 실패가 요청 처리에 영향주지 않도록 — Never break request on log failure

        return response
