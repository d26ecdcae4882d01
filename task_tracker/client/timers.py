"""Cancelable timers owned by the client controller"""
import asyncio
import logging
from typing import Callable, Dict

logger = logging.getLogger(__name__)


class Timers:
    """
    Named one-shot timers on the running event loop.

    Scheduling a name that is already pending replaces the earlier timer.
    cancel_all() is called on controller teardown so no callback fires on
    stale state.
    """

    def __init__(self):
        self._handles: Dict[str, asyncio.TimerHandle] = {}

    def schedule(self, name: str, delay: float, callback: Callable[[], None]) -> None:
        self.cancel(name)
        loop = asyncio.get_running_loop()

        def _fire():
            self._handles.pop(name, None)
            callback()

        self._handles[name] = loop.call_later(delay, _fire)

    def cancel(self, name: str) -> None:
        handle = self._handles.pop(name, None)
        if handle is not None:
            handle.cancel()

    def cancel_all(self) -> None:
        for name in list(self._handles):
            self.cancel(name)
        logger.debug("Cancelled all pending timers")

    def pending(self, name: str) -> bool:
        return name in self._handles
