"""An event bus routing events to per-type streams."""

from __future__ import annotations

import threading
from concurrent.futures import Executor, ThreadPoolExecutor
from typing import Any

from flowevents.dispatchers import EventDispatcherFactory
from flowevents.flags import EventDispatchMode, SubscriptionFlags
from flowevents.pending import EuroscopeTimerTickEvent, PendingEuroscopeEvents
from flowevents.stream import EventStream, EventSubscription

__all__ = ["InternalEventBus", "make_event_bus"]


class InternalEventBus:
    """Routes each event to the stream kept for its type."""

    def __init__(self, dispatcher_factory: EventDispatcherFactory, executor: Executor | None = None) -> None:
        self._dispatcher_factory = dispatcher_factory
        self._executor = executor
        self._streams: dict[type, EventStream] = {}
        self._lock = threading.Lock()

    def stream(self, event_type: type) -> EventStream:
        """Return the stream for ``event_type``, creating it on first use."""
        with self._lock:
            found = self._streams.get(event_type)
            if found is None:
                found = self._streams[event_type] = EventStream()
            return found

    def subscribe(self, event_type: type, subscription: EventSubscription) -> None:
        """Add a prepared subscription to the stream for ``event_type``."""
        self.stream(event_type).subscribe(subscription)

    def on_event(self, event: Any) -> None:
        """Deliver an event to the subscribers of its type."""
        self.stream(type(event)).on_event(event)

    def _subscribe(
        self, event_type: type, listener: Any, event_filter: Any, mode: EventDispatchMode, once: bool
    ) -> None:
        if listener is None:
            raise ValueError("Listener cannot be null")
        self.subscribe(
            event_type,
            EventSubscription(
                self._dispatcher_factory.create_dispatcher(listener, mode),
                listener,
                event_filter,
                SubscriptionFlags(mode, once),
            ),
        )

    def subscribe_async(self, event_type: type, listener: Any, event_filter: Any = None) -> None:
        """Deliver events to ``listener`` on a worker thread."""
        self._subscribe(event_type, listener, event_filter, EventDispatchMode.ASYNC, False)

    def subscribe_async_once(self, event_type: type, listener: Any, event_filter: Any = None) -> None:
        """Deliver the next matching event to ``listener`` on a worker thread."""
        self._subscribe(event_type, listener, event_filter, EventDispatchMode.ASYNC, True)

    def subscribe_sync(self, event_type: type, listener: Any, event_filter: Any = None) -> None:
        """Deliver events to ``listener`` on the raising thread."""
        self._subscribe(event_type, listener, event_filter, EventDispatchMode.SYNC, False)

    def subscribe_sync_once(self, event_type: type, listener: Any, event_filter: Any = None) -> None:
        """Deliver the next matching event to ``listener`` on the raising thread."""
        self._subscribe(event_type, listener, event_filter, EventDispatchMode.SYNC, True)

    def has_listener_for_subscription(self, listener_type: type, event_type: type, flags: SubscriptionFlags) -> bool:
        """Whether a listener of ``listener_type`` listens for ``event_type`` with these flags."""
        return self.stream(event_type).has_listener_for_subscription(listener_type, flags)

    def close(self) -> None:
        """Stop the worker pool, waiting for queued deliveries to finish."""
        if self._executor is not None:
            self._executor.shutdown(wait=True)

    def __enter__(self) -> InternalEventBus:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def make_event_bus() -> InternalEventBus:
    """Build a bus with its own worker pool and timer-tick event queue."""
    executor = ThreadPoolExecutor()
    pending = PendingEuroscopeEvents()
    bus = InternalEventBus(EventDispatcherFactory(pending, executor), executor)
    bus.subscribe_sync(EuroscopeTimerTickEvent, pending)
    return bus