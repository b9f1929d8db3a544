"""Dispatch modes and per-subscription flags."""

from __future__ import annotations

import enum
from dataclasses import dataclass

__all__ = ["EventDispatchMode", "SubscriptionFlags"]


class EventDispatchMode(enum.IntEnum):
    """How an event reaches a subscribed listener."""

    #: Delivered on the thread that raised the event.
    SYNC = 0
    #: Delivered on a worker thread.
    ASYNC = 1
    #: Held back and delivered on the next host timer tick.
    EUROSCOPE = 2


@dataclass(frozen=True)
class SubscriptionFlags:
    """Options attached to a single subscription."""

    dispatch_mode: EventDispatchMode
    once: bool = False