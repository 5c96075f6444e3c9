from __future__ import annotations

import json
from typing import Any, Optional

import httpx
import pytest
from fastapi.testclient import TestClient

from hours_filler.core.deps import get_factorial_client
from hours_filler.main import app


class FakeFactorial:
    """
    In-memory Factorial API.
    Records every call and stores the shifts it accepts.
    """

    def __init__(self, employee_id: Any = 7, period_id: Optional[Any] = 42):
        self.employee_id = employee_id
        self.period_id = period_id
        self.identity_status = 200
        self.identity_body: Optional[dict] = None
        self.period_status = 200
        self.rejected_dates: set[str] = set()
        self.broken_dates: set[str] = set()

        self.calls: list[tuple[str, str]] = []
        self.cookies: list[Optional[str]] = []
        self.period_queries: list[dict[str, str]] = []
        self.shift_attempts: list[dict[str, Any]] = []
        self.shifts: list[dict[str, Any]] = []

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url="https://factorial.test",
            transport=httpx.MockTransport(self.handler),
        )

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.calls.append((request.method, request.url.path))
        self.cookies.append(request.headers.get("cookie"))

        if request.url.path == "/graphql":
            return self._current(request)
        if request.url.path == "/attendance/periods":
            return self._periods(request)
        if request.url.path == "/attendance/shifts":
            return self._create_shift(request)
        return httpx.Response(404, json={"message": "Not found"})

    def _current(self, request: httpx.Request) -> httpx.Response:
        if self.identity_status != 200:
            return httpx.Response(self.identity_status, json={"message": "Unauthorized"})
        if self.identity_body is not None:
            return httpx.Response(200, json=self.identity_body)
        return httpx.Response(
            200,
            json={
                "data": {
                    "apiCore": {
                        "currentsConnection": {
                            "edges": [{"node": {"employee": {"id": self.employee_id}}}]
                        }
                    }
                }
            },
        )

    def _periods(self, request: httpx.Request) -> httpx.Response:
        self.period_queries.append(dict(request.url.params))
        if self.period_status != 200:
            return httpx.Response(self.period_status, json={"message": "boom"})
        if self.period_id is None:
            return httpx.Response(200, json=[])
        return httpx.Response(200, json=[{"id": self.period_id}, {"id": -1}])

    def _create_shift(self, request: httpx.Request) -> httpx.Response:
        payload = json.loads(request.content)
        self.shift_attempts.append(payload)

        if payload["date"] in self.broken_dates:
            raise httpx.ConnectError("connection reset", request=request)
        if payload["period_id"] is None:
            return httpx.Response(422, json={"message": "Period can't be blank"})
        if payload["date"] in self.rejected_dates:
            return httpx.Response(422, json={"message": "Shift overlaps another shift"})

        self.shifts.append(payload)
        return httpx.Response(201, json={"id": len(self.shifts), **payload})


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def factorial():
    return FakeFactorial()


@pytest.fixture
def api(factorial):
    async def _factorial_client():
        async with factorial.client() as client:
            yield client

    app.dependency_overrides[get_factorial_client] = _factorial_client
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()

