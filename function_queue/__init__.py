"""
function_queue

Deferred execution queue: collect callbacks until an object is ready,
run them once in order, then pass every later callback straight through.
"""

from .config import FunctionQueueConfig, config
from .errors import ContextualError, LatchTransitionError, QueueValidationError, contextual_error
from .host import FunctionQueueHost
from .queue import FunctionQueue
from .resolver import pipe_resolver
from .state import FunctionQueueSnapshotV1, QueueState, QueueStatus

__all__ = [
    "FunctionQueue",
    "FunctionQueueHost",
    "pipe_resolver",
    # State
    "QueueState",
    "QueueStatus",
    "FunctionQueueSnapshotV1",
    # Errors
    "ContextualError",
    "QueueValidationError",
    "LatchTransitionError",
    "contextual_error",
    # Config
    "FunctionQueueConfig",
    "config",
]
