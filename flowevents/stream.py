"""A stream of one type of event and its subscriptions."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Any

from flowevents.dispatchers import EventDispatcher
from flowevents.flags import SubscriptionFlags

__all__ = ["EventSubscription", "EventStream"]


@dataclass(eq=False)
class EventSubscription:
    """A listener, the dispatcher that reaches it, an optional filter and flags.

    A filter is any object with a ``should_process(event)`` method.
    """

    dispatcher: EventDispatcher
    listener: Any
    event_filter: Any
    flags: SubscriptionFlags

    def __post_init__(self) -> None:
        if self.dispatcher is None:
            raise ValueError("Dispatcher cannot be null")
        if self.listener is None:
            raise ValueError("Listener cannot be null")


class EventStream:
    """Holds the subscriptions for one event type and delivers to them."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._subscriptions: list[EventSubscription] = []

    def subscribe(self, subscription: EventSubscription) -> None:
        """Add a subscription to the stream."""
        with self._lock:
            self._subscriptions.append(subscription)

    def on_event(self, event: Any) -> None:
        """Deliver an event to every subscription whose filter lets it through.

        Subscriptions flagged ``once`` are dropped after their first delivery.
        """
        with self._lock:
            spent: set[int] = set()
            for subscription in list(self._subscriptions):
                event_filter = subscription.event_filter
                if event_filter is not None and not event_filter.should_process(event):
                    continue
                subscription.dispatcher.dispatch(event)
                if subscription.flags.once:
                    spent.add(id(subscription))
            if spent:
                self._subscriptions = [s for s in self._subscriptions if id(s) not in spent]

    def has_listener_of_type(self, listener_type: type) -> bool:
        """Whether any subscribed listener is an instance of ``listener_type``."""
        with self._lock:
            return any(isinstance(s.listener, listener_type) for s in self._subscriptions)

    def has_listener_for_subscription(self, listener_type: type, expected_flags: SubscriptionFlags) -> bool:
        """Whether a listener of ``listener_type`` is subscribed with exactly these flags."""
        with self._lock:
            return any(
                isinstance(s.listener, listener_type)
                and s.flags.once == expected_flags.once
                and s.flags.dispatch_mode == expected_flags.dispatch_mode
                for s in self._subscriptions
            )