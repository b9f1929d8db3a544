"""Strategies for handing an event to a listener."""

from __future__ import annotations

import functools
from abc import ABC, abstractmethod
from concurrent.futures import Executor
from typing import Any, Protocol

from flowevents.flags import EventDispatchMode
from flowevents.pending import PendingEuroscopeEvents

__all__ = [
    "EventDispatcher",
    "SynchronousEventDispatcher",
    "AsynchronousEventDispatcher",
    "EuroscopeEventDispatcher",
    "EventDispatcherFactory",
]


class _Listener(Protocol):
    def on_event(self, event: Any) -> None: ...


def _require(value: Any, message: str) -> None:
    if value is None:
        raise ValueError(message)


class EventDispatcher(ABC):
    """Delivers events to one listener."""

    @abstractmethod
    def dispatch(self, event: Any) -> None:
        """Deliver the event."""


class SynchronousEventDispatcher(EventDispatcher):
    """Calls the listener straight away on the current thread."""

    def __init__(self, listener: _Listener) -> None:
        _require(listener, "Listener cannot be null")
        self._listener = listener

    def dispatch(self, event: Any) -> None:
        self._listener.on_event(event)


class AsynchronousEventDispatcher(EventDispatcher):
    """Hands the call to the listener to an executor."""

    def __init__(self, listener: _Listener, executor: Executor) -> None:
        _require(listener, "Listener cannot be null")
        _require(executor, "Thread pool cannot be null")
        self._listener = listener
        self._executor = executor

    def dispatch(self, event: Any) -> None:
        self._executor.submit(self._listener.on_event, event)


class EuroscopeEventDispatcher(EventDispatcher):
    """Queues the call to the listener until the next host timer tick."""

    def __init__(self, listener: _Listener, pending: PendingEuroscopeEvents) -> None:
        _require(listener, "Listener cannot be null")
        _require(pending, "Pending ES events cannot be null")
        self._listener = listener
        self._pending = pending

    def dispatch(self, event: Any) -> None:
        self._pending.add_event(functools.partial(self._listener.on_event, event))


class EventDispatcherFactory:
    """Builds the dispatcher that suits a dispatch mode."""

    def __init__(self, pending: PendingEuroscopeEvents, executor: Executor) -> None:
        _require(pending, "pendingEuroscopeEvents cannot be null")
        _require(executor, "threadPool cannot be null")
        self._pending = pending
        self._executor = executor

    def create_dispatcher(self, listener: _Listener, mode: EventDispatchMode) -> EventDispatcher:
        """Return a dispatcher delivering to ``listener`` in the given mode."""
        if mode == EventDispatchMode.SYNC:
            return SynchronousEventDispatcher(listener)
        if mode == EventDispatchMode.ASYNC:
            return AsynchronousEventDispatcher(listener, self._executor)
        if mode == EventDispatchMode.EUROSCOPE:
            return EuroscopeEventDispatcher(listener, self._pending)
        raise ValueError("Unknown dispatch mode")