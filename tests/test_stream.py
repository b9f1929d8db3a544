from typing import NamedTuple

import pytest

from flowevents.dispatchers import SynchronousEventDispatcher
from flowevents.flags import EventDispatchMode, SubscriptionFlags
from flowevents.stream import EventStream, EventSubscription


class Number(NamedTuple):
    value: int


class Collector(list):
    def on_event(self, event):
        self.append(event)


class OtherCollector(Collector):
    pass


class EvenOnly:
    def should_process(self, event):
        return event.value % 2 == 0


def subscribe(stream, listener, once=False, event_filter=None):
    stream.subscribe(
        EventSubscription(
            SynchronousEventDispatcher(listener),
            listener,
            event_filter,
            SubscriptionFlags(EventDispatchMode.SYNC, once),
        )
    )
    return listener


def publish(stream, *values):
    for value in values:
        stream.on_event(Number(value))


@pytest.fixture
def stream():
    return EventStream()


def test_events_reach_every_subscriber(stream):
    listeners = [subscribe(stream, Collector()) for _ in range(2)]
    publish(stream, 1, 2)
    assert listeners == [[Number(1), Number(2)]] * 2


def test_once_subscription_is_removed_after_delivery(stream):
    listener = subscribe(stream, Collector(), once=True)
    publish(stream, 1, 2)
    assert listener == [Number(1)]
    assert not stream.has_listener_of_type(Collector)


def test_filtered_out_event_keeps_once_subscription(stream):
    listener = subscribe(stream, Collector(), once=True, event_filter=EvenOnly())
    publish(stream, 1)
    assert listener == []
    assert stream.has_listener_of_type(Collector)
    publish(stream, 2, 4)
    assert listener == [Number(2)]


def test_filter_applies_to_repeating_subscription(stream):
    listener = subscribe(stream, Collector(), event_filter=EvenOnly())
    publish(stream, 1, 2, 3, 4)
    assert listener == [Number(2), Number(4)]


def test_has_listener_of_type(stream):
    subscribe(stream, Collector())
    assert stream.has_listener_of_type(Collector)
    assert not stream.has_listener_of_type(OtherCollector)


@pytest.mark.parametrize(
    "mode, once, expected",
    [
        (EventDispatchMode.SYNC, True, True),
        (EventDispatchMode.SYNC, False, False),
        (EventDispatchMode.ASYNC, True, False),
    ],
)
def test_has_listener_for_subscription_matches_flags(stream, mode, once, expected):
    subscribe(stream, OtherCollector(), once=True)
    assert stream.has_listener_for_subscription(OtherCollector, SubscriptionFlags(mode, once)) is expected


@pytest.mark.parametrize("missing", ["dispatcher", "listener"])
def test_subscription_requires_dispatcher_and_listener(missing):
    dispatcher = None if missing == "dispatcher" else SynchronousEventDispatcher(Collector())
    listener = None if missing == "listener" else Collector()
    with pytest.raises(ValueError):
        EventSubscription(dispatcher, listener, None, SubscriptionFlags(EventDispatchMode.SYNC))


def test_listener_may_subscribe_while_handling_event(stream):
    late = Collector()

    class Subscriber:
        def on_event(self, event):
            subscribe(stream, late)

    subscribe(stream, Subscriber(), once=True)
    publish(stream, 1, 2)
    assert late == [Number(2)]
    assert stream.has_listener_of_type(Collector) is True
    assert stream.has_listener_of_type(Subscriber) is False