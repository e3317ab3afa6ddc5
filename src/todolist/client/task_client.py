"""HTTP client for the items API.

Each user action maps to exactly one request. Failures are logged once as
``api.error`` and re-raised as :class:`TaskApiError`; nothing is retried.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import BaseModel, ValidationError

from todolist.domain.task_models import Task, TaskCreate, TaskUpdate

logger = logging.getLogger("todolist.client")

DEFAULT_BASE_URL = "https://todolistserver-xit0.onrender.com"


class TaskApiError(Exception):
    """A request to the items API failed.

    `status_code` is None when no response was received.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


def build_http_client(
    base_url: str = DEFAULT_BASE_URL,
    *,
    timeout: float = 30.0,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        base_url=base_url,
        timeout=httpx.Timeout(timeout),
        headers={"Accept": "application/json"},
        transport=transport,
    )


class TaskClient:
    def __init__(self, http: httpx.AsyncClient) -> None:
        self._http = http

    async def aclose(self) -> None:
        await self._http.aclose()

    def _payload(self, model: type[BaseModel], method: str, url: str, **fields: Any) -> dict:
        try:
            return model(**fields).model_dump(by_alias=True)
        except ValidationError as exc:
            logger.error(
                "api.error",
                extra={"category": "client", "event": "api.error", "method": method, "url": url, "detail": str(exc)},
            )
            raise TaskApiError(str(exc)) from exc

    async def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        try:
            response = await self._http.request(method, url, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            detail = exc.response.text
            logger.error(
                "api.error",
                extra={
                    "category": "client",
                    "event": "api.error",
                    "method": method,
                    "url": url,
                    "status_code": exc.response.status_code,
                    "detail": detail,
                },
            )
            raise TaskApiError(detail or str(exc), exc.response.status_code) from exc
        except httpx.HTTPError as exc:
            logger.error(
                "api.error",
                extra={"category": "client", "event": "api.error", "method": method, "url": url, "detail": str(exc)},
            )
            raise TaskApiError(str(exc)) from exc
        return response

    async def get_tasks(self) -> list[Task]:
        response = await self._request("GET", "/items")
        return [Task.model_validate(item) for item in response.json()]

    async def add_task(self, name: str) -> Task:
        logger.info("task.add", extra={"category": "client", "event": "task.add", "task_name": name})
        payload = self._payload(TaskCreate, "POST", "/items", name=name)
        del payload["isComplete"]
        response = await self._request("POST", "/items", json=payload)
        return Task.model_validate(response.json())

    async def set_completed(self, task_id: int, name: str, is_complete: bool) -> Task:
        logger.info(
            "task.set_completed",
            extra={
                "category": "client",
                "event": "task.set_completed",
                "task_id": task_id,
                "task_name": name,
                "is_complete": is_complete,
            },
        )
        url = f"/items/{task_id}"
        payload = self._payload(TaskUpdate, "PUT", url, name=name, is_complete=is_complete)
        await self._request("PUT", url, json=payload)
        return Task(id=task_id, name=name, is_complete=is_complete)

    async def delete_task(self, task_id: int) -> None:
        logger.info("task.delete", extra={"category": "client", "event": "task.delete", "task_id": task_id})
        await self._request("DELETE", f"/items/{task_id}")
