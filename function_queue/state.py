"""
Queue State

Execution latch for FunctionQueue plus the diagnostic snapshot contract.

State machine:
    pending → executed

INVARIANTS:
    - executed is terminal; the latch never reverts
    - the transition happens at most once per queue
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Literal, Set

from pydantic import BaseModel, ConfigDict, Field

from function_queue.errors import LatchTransitionError, contextual_error


class QueueStatus(str, Enum):
    """Execution latch states."""
    PENDING = "pending"
    EXECUTED = "executed"


ALLOWED_TRANSITIONS: Dict[QueueStatus, Set[QueueStatus]] = {
    QueueStatus.PENDING: {QueueStatus.EXECUTED},
    QueueStatus.EXECUTED: set(),
}


@dataclass
class QueueState:
    """Internal queue state."""
    namespace: str = "FunctionQueue"
    status: QueueStatus = field(default=QueueStatus.PENDING)

    @property
    def executed(self) -> bool:
        return self.status == QueueStatus.EXECUTED

    def mark_executed(self) -> None:
        """Flip the latch. Raises LatchTransitionError if already executed."""
        if QueueStatus.EXECUTED not in ALLOWED_TRANSITIONS[self.status]:
            raise contextual_error(
                f"Illegal latch transition: {self.status.value} -> {QueueStatus.EXECUTED.value}",
                self.namespace,
                LatchTransitionError,
            )
        self.status = QueueStatus.EXECUTED


class FunctionQueueSnapshotV1(BaseModel):
    """Point-in-time view of a FunctionQueue."""

    model_config = ConfigDict(extra="forbid")

    contract_version: Literal["v1"] = "v1"
    status: QueueStatus
    pending_count: int = Field(ge=0)
    error_namespace: str
