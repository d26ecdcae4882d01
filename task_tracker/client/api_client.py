"""HTTP client for the task tracker API"""
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

import httpx

from task_tracker import config
from task_tracker.errors import NotFound, TransportFailure, ValidationError
from task_tracker.models.task import Priority, Task

logger = logging.getLogger(__name__)


class TaskApiClient:
    """
    Thin async wrapper over the /api/tasks routes.

    Maps HTTP failures onto the shared error taxonomy:
    400 -> ValidationError, 404 -> NotFound, anything else -> TransportFailure.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            base_url=base_url or config.API_URL,
            timeout=timeout or config.HTTP_TIMEOUT_SECONDS,
            transport=transport,
        )

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        try:
            response = await self._client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            logger.warning(f"{method} {path} failed: {e}")
            raise TransportFailure(str(e)) from e

        if response.status_code == 400:
            raise ValidationError(self._error_message(response, "Invalid request"))
        if response.status_code == 404:
            raise NotFound(message=self._error_message(response, "Task not found"))
        if response.is_error:
            raise TransportFailure(f"{method} {path} returned {response.status_code}")

        return response

    @staticmethod
    def _error_message(response: httpx.Response, default: str) -> str:
        try:
            return response.json().get("error") or default
        except ValueError:
            return default

    async def list_tasks(self) -> List[Task]:
        response = await self._request("GET", "/api/tasks")
        return [Task.model_validate(item) for item in response.json()]

    async def create_task(
        self,
        title: str,
        priority: Optional[Priority] = None,
        created_at: Optional[datetime] = None,
    ) -> Task:
        payload: Dict[str, Any] = {"title": title}
        if priority is not None:
            payload["priority"] = Priority(priority).value
        payload["createdAt"] = (created_at or datetime.now(timezone.utc)).isoformat()

        response = await self._request("POST", "/api/tasks", json=payload)
        return Task.model_validate(response.json())

    async def update_task(
        self,
        task_id: str,
        title: Optional[str] = None,
        priority: Optional[Priority] = None,
    ) -> Task:
        payload: Dict[str, Any] = {}
        if title is not None:
            payload["title"] = title
        if priority is not None:
            payload["priority"] = Priority(priority).value

        response = await self._request("PATCH", f"/api/tasks/{task_id}", json=payload)
        return Task.model_validate(response.json())

    async def toggle_task(self, task_id: str) -> Task:
        response = await self._request("PATCH", f"/api/tasks/{task_id}/toggle")
        return Task.model_validate(response.json())

    async def delete_task(self, task_id: str) -> None:
        await self._request("DELETE", f"/api/tasks/{task_id}")

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
