"""Application lifecycle signals.

`ApplicationReadySignal` is a one-shot subscription: callbacks registered before
`fire()` are scheduled as background tasks exactly once, when the host reports it
is ready to serve. Firing never waits for subscribers, and a failing subscriber
never reaches the host; `drain()` lets shutdown wait for work still in flight.
"""
from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Callable

from loguru import logger

from statedb.app.core import SERVICE_NAME

ReadyCallback = Callable[[], Awaitable[None]]


def _log(event: str, **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).info("")


class ApplicationReadySignal:
    def __init__(self) -> None:
        self._subscribers: list[ReadyCallback] = []
        self._tasks: set[asyncio.Task[None]] = set()
        self._fired = False

    @property
    def fired(self) -> bool:
        return self._fired

    def subscribe(self, callback: ReadyCallback) -> None:
        if self._fired:
            raise RuntimeError("ready signal already fired")
        self._subscribers.append(callback)

    def fire(self) -> None:
        """Schedule every subscriber once. Must be called from a running event loop."""
        if self._fired:
            return
        loop = asyncio.get_running_loop()
        self._fired = True
        _log("application_ready", subscribers=len(self._subscribers))
        for callback in self._subscribers:
            task = loop.create_task(self._dispatch(callback))
            self._tasks.add(task)
            task.add_done_callback(self._tasks.discard)

    async def drain(self) -> None:
        if self._tasks:
            await asyncio.gather(*self._tasks)

    @staticmethod
    async def _dispatch(callback: ReadyCallback) -> None:
        try:
            await callback()
        except Exception as e:
            logger.exception("ready subscriber failed: {}", e)
