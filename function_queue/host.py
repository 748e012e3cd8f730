"""
Function Queue Host

Base class for objects that gate work behind a one-time "ready" signal.
The host holds a FunctionQueue and forwards to it; callbacks receive the
host itself, and the host's on_executed() is wired in as the lifecycle hook.

Usage::

    class Plugin(FunctionQueueHost):
        def on_executed(self):
            logger.info("plugin ready")

    plugin = Plugin()
    plugin.enqueue(lambda p: p.register_hooks())
    await plugin.execute()
"""

import asyncio
from typing import Any, Optional

from function_queue.queue import FunctionQueue, QueueableFunction, T


class FunctionQueueHost:
    """
    Cooperative base that embeds a FunctionQueue.

    Extra constructor arguments are passed up the MRO, so the host can be
    combined with other base classes.
    """

    def __init__(
        self,
        *args: Any,
        error_namespace: Optional[str] = None,
        loop: Optional[asyncio.AbstractEventLoop] = None,
        **kwargs: Any,
    ):
        # Other bases may enqueue from their own __init__
        self._function_queue = FunctionQueue(
            owner=self,
            on_executed=self.on_executed,
            error_namespace=error_namespace,
            loop=loop,
        )
        super().__init__(*args, **kwargs)

    @property
    def function_queue(self) -> FunctionQueue:
        return self._function_queue

    @property
    def is_executed(self) -> bool:
        return self._function_queue.is_executed

    def enqueue(self, fnc: QueueableFunction[T]) -> "asyncio.Future[T]":
        return self._function_queue.enqueue(fnc)

    async def execute(self) -> "FunctionQueueHost":
        return await self._function_queue.execute()

    def on_executed(self) -> None:
        """Lifecycle callback for queue execution complete."""
        pass
