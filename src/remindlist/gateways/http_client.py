# src/remindlist/gateways/http_client.py

from __future__ import annotations

"""
REST client implementing the TaskGateway port.

Endpoints (relative to base_url):
- POST   /tasks          {"name": ...}      -> task JSON
- GET    /tasks                             -> {"tasks": [...], "rowCount"?, "pagination"?}
- PUT    /tasks/{id}     full task JSON
- DELETE /tasks/{id}

HTTP and transport failures are translated into GatewayError subclasses.
"""

import logging
from typing import Any

import httpx

from ..tasks.errors import (
    GatewayError,
    GatewayNotFoundError,
    GatewayTimeoutError,
    GatewayValidationError,
)
from ..tasks.task_models import FetchResult, Task

logger = logging.getLogger(__name__)


def _make_timeout(total_s: float) -> httpx.Timeout:
    return httpx.Timeout(total_s, connect=min(5.0, total_s))


class HttpTaskGateway:
    def __init__(
        self,
        base_url: str,
        *,
        token: str | None = None,
        timeout_seconds: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if not base_url or not base_url.strip():
            raise ValueError("base_url is required for the HTTP gateway")

        headers = {"Accept": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"

        self._client = httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            headers=headers,
            timeout=_make_timeout(timeout_seconds),
            transport=transport,
        )
        logger.info("HttpTaskGateway ready base_url=%s", base_url)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(self, method: str, url: str, *, task_id: str | None = None, **kwargs: Any) -> httpx.Response:
        try:
            resp = await self._client.request(method, url, **kwargs)
        except httpx.TimeoutException as e:
            raise GatewayTimeoutError(f"{method} {url} timed out") from e
        except httpx.HTTPError as e:
            raise GatewayError(f"{method} {url} failed: {e}") from e

        if resp.status_code == 404:
            raise GatewayNotFoundError(task_id or "", f"{method} {url}: not found")
        if resp.status_code in (400, 422):
            raise GatewayValidationError(f"{method} {url}: {resp.status_code} {resp.text[:200]}")
        try:
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise GatewayError(f"{method} {url}: HTTP {resp.status_code}") from e
        return resp

    @staticmethod
    def _json(resp: httpx.Response) -> Any:
        try:
            return resp.json()
        except ValueError as e:
            raise GatewayError(f"invalid JSON from {resp.request.url}") from e

    async def create(self, name: str) -> Task:
        resp = await self._request("POST", "/tasks", json={"name": name})
        data = self._json(resp)
        if not isinstance(data, dict):
            raise GatewayError("create: expected a task object")
        try:
            return Task.from_dict(data)
        except ValueError as e:
            raise GatewayError(f"create: {e}") from e

    async def fetch_all(self) -> FetchResult:
        resp = await self._request("GET", "/tasks")
        data = self._json(resp)
        if not isinstance(data, dict) or not isinstance(data.get("tasks"), list):
            raise GatewayError("fetch_all: expected {'tasks': [...]}")

        tasks: list[Task] = []
        for item in data["tasks"]:
            if not isinstance(item, dict):
                continue
            try:
                tasks.append(Task.from_dict(item))
            except ValueError:
                logger.warning("Skipping malformed task payload: %r", item)

        row_count = data.get("rowCount")
        pagination = data.get("pagination")
        return FetchResult(
            tasks=tuple(tasks),
            row_count=int(row_count) if isinstance(row_count, int) else None,
            pagination=str(pagination) if pagination is not None else None,
        )

    async def update(self, task: Task) -> None:
        await self._request("PUT", f"/tasks/{task.id}", task_id=task.id, json=task.to_dict())

    async def delete(self, task_id: str) -> None:
        await self._request("DELETE", f"/tasks/{task_id}", task_id=task_id)
