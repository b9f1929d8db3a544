"""Callbacks that wait for the host thread to come round."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Callable

__all__ = ["EuroscopeTimerTickEvent", "PendingEuroscopeEvents"]


@dataclass(frozen=True)
class EuroscopeTimerTickEvent:
    """Raised each time the host's timer ticks."""


class PendingEuroscopeEvents:
    """Stores callbacks and runs them all when the host timer ticks."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._pending: list[Callable[[], None]] = []

    def add_event(self, callback: Callable[[], None]) -> None:
        """Queue a callback for the next timer tick."""
        with self._lock:
            self._pending.append(callback)

    def on_event(self, event: EuroscopeTimerTickEvent) -> None:
        """Run every queued callback in the order it was added, then forget them."""
        with self._lock:
            pending, self._pending = self._pending, []
        for callback in pending:
            callback()

    def __len__(self) -> int:
        with self._lock:
            return len(self._pending)