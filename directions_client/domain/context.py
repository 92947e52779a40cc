"""Per-call context: deadline and cancellation."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class CallContext:
    """Deadline and cancellation signal shared by the calls of one operation.

    A comparison passes the same context to both of its calls, so
    cancelling it aborts whichever call is in flight and stops the
    second one from being issued.

    Attributes:
        timeout_seconds: Connect/read timeout, or None for the client default
        cancel_event: Set it to cancel the operation
    """

    timeout_seconds: Optional[float] = None
    cancel_event: threading.Event = field(default_factory=threading.Event, repr=False)

    def cancel(self) -> None:
        self.cancel_event.set()

    @property
    def cancelled(self) -> bool:
        return self.cancel_event.is_set()
