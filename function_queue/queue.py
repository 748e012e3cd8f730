"""
Function Queue

Collects callbacks until execute() is called, then runs them in order.
After that the queue is a pass-through: anything enqueued runs immediately.

Usage::

    queue = FunctionQueue()

    pending = queue.enqueue(lambda q: "ready")
    await queue.execute()
    print(await pending)   # "ready"

INVARIANTS:
    - The latch flips once; execute() never re-runs an entry
    - Entries are invoked in FIFO order; completion order is not awaited
    - execute() drains only the entries present when it was called
    - A failing entry settles its own future and nothing else
"""

from __future__ import annotations

import asyncio
import logging
from collections import deque
from typing import Any, Awaitable, Callable, Deque, Optional, TypeVar, Union

from function_queue.config import config
from function_queue.errors import QueueValidationError, contextual_error
from function_queue.resolver import pipe_resolver
from function_queue.state import FunctionQueueSnapshotV1, QueueState

logger = logging.getLogger(__name__)

T = TypeVar("T")

QueueableFunction = Callable[[Any], Union[T, Awaitable[T]]]
QueuedFunction = Callable[[Any], Any]


def _noop() -> None:
    pass


class FunctionQueue:
    """
    Deferred execution queue with a one-shot execution latch.

    Args:
        owner:           Object passed to every callback (defaults to the queue).
        on_executed:     Called with no arguments once the queue has executed.
        error_namespace: Namespace for raised errors (defaults to config).
        loop:            Event loop for enqueue futures (defaults to the running loop).
    """

    def __init__(
        self,
        owner: Any = None,
        on_executed: Optional[Callable[[], None]] = None,
        *,
        error_namespace: Optional[str] = None,
        loop: Optional[asyncio.AbstractEventLoop] = None,
    ):
        self._owner = self if owner is None else owner
        self._on_executed = on_executed or _noop
        self._error_namespace = error_namespace or config.error_namespace
        self._loop = loop
        self._queue: Deque[QueuedFunction] = deque()
        self._state = QueueState(namespace=self._error_namespace)

    @property
    def is_executed(self) -> bool:
        """Has queue execution been completed."""
        return self._state.executed

    @property
    def owner(self) -> Any:
        return self._owner

    @property
    def pending_count(self) -> int:
        return len(self._queue)

    def __len__(self) -> int:
        return len(self._queue)

    def enqueue(self, fnc: QueueableFunction[T]) -> "asyncio.Future[T]":
        """
        Add a function to the queue.

        The function receives the owner. If the queue has already executed,
        it runs before this call returns.

        Returns:
            Future resolving with the function's result (awaited if needed).

        Raises:
            QueueValidationError: fnc is not callable.
        """
        if not callable(fnc):
            raise contextual_error(
                f'Cannot enqueue input of type "{type(fnc).__name__}", expected a function.',
                self._error_namespace,
                QueueValidationError,
            )

        loop = self._loop or asyncio.get_running_loop()
        future: asyncio.Future = loop.create_future()
        resolver = pipe_resolver(
            fnc,
            lambda value: _settle_result(future, value),
            lambda exc: _settle_exception(future, exc),
            loop=loop,
        )

        if self.is_executed:
            self._drain_stranded()
            logger.debug("Running %r immediately (queue already executed)", fnc)
            resolver(self._owner)
        else:
            self._queue.append(resolver)
            logger.debug("Enqueued %r (pending=%d)", fnc, len(self._queue))

        return future

    async def execute(self) -> Any:
        """
        Execute all the functions in the queue in order.

        Only entries present at call time are run. Asynchronous results are
        not awaited here; each settles its own future.

        Returns:
            The owner.
        """
        if self.is_executed:
            self._drain_stranded()
            return self._owner

        queue_length = len(self._queue)
        for _ in range(queue_length):
            resolver = self._queue.popleft()
            resolver(self._owner)

        self._state.mark_executed()
        logger.info("Function queue executed: %d entries run, %d deferred", queue_length, len(self._queue))
        self._on_executed()

        return self._owner

    def snapshot(self) -> FunctionQueueSnapshotV1:
        """Diagnostic view of the queue."""
        return FunctionQueueSnapshotV1(
            status=self._state.status,
            pending_count=len(self._queue),
            error_namespace=self._error_namespace,
        )

    def _drain_stranded(self) -> None:
        # Entries enqueued by callbacks during execute() missed that pass
        while self._queue:
            resolver = self._queue.popleft()
            resolver(self._owner)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(status={self._state.status.value}, pending={len(self._queue)})>"


def _settle_result(future: "asyncio.Future[Any]", value: Any) -> None:
    if not future.done():
        future.set_result(value)


def _settle_exception(future: "asyncio.Future[Any]", exc: BaseException) -> None:
    if future.done():
        return
    if isinstance(exc, asyncio.CancelledError):
        future.cancel()
    else:
        future.set_exception(exc)
