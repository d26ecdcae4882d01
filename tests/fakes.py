# tests/fakes.py

from __future__ import annotations

import asyncio

import httpx
from fastapi import FastAPI

from task_tracker.client import TaskApiClient, TaskController


class FlakyTransport(httpx.AsyncBaseTransport):
    """
    ASGI transport into the app that can be slowed down or switched off.

    While `down` is set every request fails the way an unreachable server does;
    requests to a path in `failing_paths` fail the same way. `delay` adds
    latency to each request.
    """

    def __init__(self, app: FastAPI) -> None:
        self._inner = httpx.ASGITransport(app=app)
        self.down = False
        self.delay = 0.0
        self.failing_paths: set[str] = set()

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.down or request.url.path in self.failing_paths:
            raise httpx.ConnectError("connection refused", request=request)
        return await self._inner.handle_async_request(request)

    async def aclose(self) -> None:
        await self._inner.aclose()


def make_controller(
    app: FastAPI,
    transport: httpx.AsyncBaseTransport | None = None,
    **timers: float,
) -> TaskController:
    api = TaskApiClient(
        base_url="http://testserver",
        transport=transport or httpx.ASGITransport(app=app),
    )
    return TaskController(api=api, **timers)
