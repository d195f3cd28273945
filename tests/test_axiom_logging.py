"""Axiom 로깅 미들웨어 테스트.

Axiom logging middleware tests — email masking and log event contents.
"""

import pytest_asyncio
from httpx import AsyncClient

from employee_api.main import app
from employee_api.middleware import axiom_logging
from employee_api.middleware.axiom_logging import _mask_email, _mask_path


class _RecordingClient:
    """ingest_events 호출을 기록하는 가짜 Axiom 클라이언트."""

    def __init__(self) -> None:
        self.events: list[dict] = []

    def ingest_events(self, dataset: str, events: list[dict]) -> None:
        self.events.extend(events)


@pytest_asyncio.fixture
async def recorder(client: AsyncClient):
    """앱 미들웨어 스택의 Axiom 클라이언트를 기록용 가짜로 교체합니다."""
    await client.get("/health")  # 미들웨어 스택 빌드 (builds the middleware stack)
    layer = app.middleware_stack
    while not isinstance(layer, axiom_logging.AxiomLoggingMiddleware):
        assert layer is not None, "AxiomLoggingMiddleware not installed"
        layer = getattr(layer, "app", None)

    fake = _RecordingClient()
    layer._client = fake
    yield fake
    layer._client = None


class TestMasking:
    def test_email_local_part_masked(self):
        assert _mask_email("jane.doe@example.com") == "ja***@example.com"

    def test_non_email_untouched(self):
        assert _mask_email("Jane") == "Jane"

    def test_path_segments_masked(self):
        assert _mask_path("/byName/Jane/jane@x.com") == "/byName/Jane/ja***@x.com"


class TestLogEvents:
    async def test_lookup_logged_with_route_and_masked_params(
        self, client: AsyncClient, employees, recorder
    ):
        res = await client.get("/byEmial/jane.doe@example.com")
        assert res.status_code == 200

        event = recorder.events[-1]
        assert event["method"] == "GET"
        assert event["route"] == "/byEmial/{email}"
        assert event["path"] == "/byEmial/ja***@example.com"
        assert event["path_params"] == {"email": "ja***@example.com"}
        assert event["status_code"] == 200

    async def test_error_detail_logged(self, client: AsyncClient, employees, recorder):
        res = await client.put("/insertEmployee/1/Dup/Licate/dup@example.com/1")
        assert res.status_code == 500
        assert res.json() == {"detail": "Database error"}
        assert recorder.events[-1]["error"] == "Database error"

    async def test_health_not_logged(self, client: AsyncClient, recorder):
        await client.get("/health")
        assert recorder.events == []
