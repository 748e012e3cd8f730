"""
Resolver Pipeline

Adapts a callback into a function whose settle value is piped to a resolve
callback. Plain return values are forwarded at once. Coroutines are started
eagerly, so their body runs up to its first suspension before the adapter
returns; their outcome is forwarded when they complete.
"""

import asyncio
import inspect
import logging
from typing import Any, Awaitable, Callable, Optional

logger = logging.getLogger(__name__)

Resolve = Callable[[Any], None]
Reject = Callable[[BaseException], None]


def pipe_resolver(
    callback: Callable[[Any], Any],
    resolve: Resolve,
    reject: Optional[Reject] = None,
    *,
    loop: Optional[asyncio.AbstractEventLoop] = None,
) -> Callable[[Any], Any]:
    """
    Wrap ``callback`` so that calling the adapter with an owner settles
    ``resolve``/``reject``.

    Args:
        callback: Function taking the owner, returning a value or awaitable.
        resolve:  Receives the final value.
        reject:   Receives the exception. When omitted, synchronous failures
                  propagate to the adapter's caller and asynchronous ones go
                  to the event loop's exception handler.
        loop:     Loop to schedule awaitables on (defaults to the running loop).

    Returns:
        ``adapter(owner)``. It returns the plain value, or the scheduled
        future when the callback produced an awaitable.
    """

    def resolver(owner: Any) -> Any:
        try:
            result = callback(owner)
        except (Exception, asyncio.CancelledError) as exc:
            if reject is None:
                raise
            logger.debug("Callback %r raised %r", callback, exc)
            reject(exc)
            return None

        if inspect.isawaitable(result):
            return _pipe_awaitable(result, resolve, reject, loop)

        resolve(result)
        return result

    return resolver


def _pipe_awaitable(
    awaitable: Awaitable[Any],
    resolve: Resolve,
    reject: Optional[Reject],
    loop: Optional[asyncio.AbstractEventLoop],
) -> "asyncio.Future[Any]":
    task = _start(awaitable, loop)

    def _on_done(done: "asyncio.Future[Any]") -> None:
        if reject is None:
            # A failure raises here and lands in the loop's exception handler
            resolve(done.result())
            return
        if done.cancelled():
            reject(asyncio.CancelledError())
            return
        exc = done.exception()
        if exc is not None:
            logger.debug("Awaited callback result failed: %r", exc)
            reject(exc)
        else:
            resolve(done.result())

    task.add_done_callback(_on_done)
    return task


def _start(awaitable: Awaitable[Any], loop: Optional[asyncio.AbstractEventLoop]) -> "asyncio.Future[Any]":
    loop = loop or asyncio.get_running_loop()
    if asyncio.iscoroutine(awaitable) and loop.is_running():
        # Run the first step now so invocation order matches call order
        return asyncio.Task(awaitable, loop=loop, eager_start=True)
    return asyncio.ensure_future(awaitable, loop=loop)
