# flowevents

A small in-process event bus. Listeners subscribe to one event type. Each
subscription says how events reach the listener:

- **synchronously**, on the thread that publishes the event;
- **asynchronously**, on a worker thread pool;
- **deferred**, kept until the next `EuroscopeTimerTickEvent` is published and
  then run on the thread that publishes that tick.

A subscription can be limited to a single delivery ("once"). It can also carry
a filter. When the filter turns an event down, the listener is not called and
the subscription stays in place.

The package has no dependencies outside the standard library.

## Installation

```
pip install flowevents
```

## Usage

```python
from dataclasses import dataclass

from flowevents.bus import make_event_bus


@dataclass(frozen=True)
class MeasureActivated:
    identifier: str


class Printer:
    def on_event(self, event):
        print("activated:", event.identifier)


class OnlyLondon:
    def should_process(self, event):
        return event.identifier.startswith("EGTT")


with make_event_bus() as bus:
    bus.subscribe_sync(MeasureActivated, Printer(), OnlyLondon())
    bus.on_event(MeasureActivated("EGTT01A"))   # printed
    bus.on_event(MeasureActivated("LFFF01A"))   # filtered out
```

A listener is any object with an `on_event(event)` method. A filter is any
object with a `should_process(event)` method, or `None` for no filter.

`InternalEventBus.on_event` sends an event to the stream kept for its exact
type, `type(event)`. Subscribers to a base class do not receive events of a
subclass.

There are four subscription methods on `InternalEventBus`. Each takes the
event type, the listener and an optional filter. Each raises `ValueError` if
the listener is `None`.

| method                 | dispatch       | once |
|------------------------|----------------|------|
| `subscribe_sync`       | synchronous    | no   |
| `subscribe_sync_once`  | synchronous    | yes  |
| `subscribe_async`      | thread pool    | no   |
| `subscribe_async_once` | thread pool    | yes  |

If a synchronous listener raises, the exception reaches the caller of
`on_event`. Asynchronous listeners run on a `concurrent.futures` executor, so
anything they raise stays inside the executor's future.

`close()` shuts down the worker pool and waits for queued deliveries to
finish. The bus is also a context manager that calls `close()` on exit.

## Deferred delivery

`make_event_bus()` builds a bus with its own `ThreadPoolExecutor` and a
`PendingEuroscopeEvents` queue. The queue is subscribed synchronously to
`EuroscopeTimerTickEvent`. The bus keeps that queue to itself. For
deferred listeners, build the parts yourself and add the subscription with
`subscribe`:

```python
from concurrent.futures import ThreadPoolExecutor

from flowevents.bus import InternalEventBus
from flowevents.dispatchers import EventDispatcherFactory
from flowevents.flags import EventDispatchMode, SubscriptionFlags
from flowevents.pending import EuroscopeTimerTickEvent, PendingEuroscopeEvents
from flowevents.stream import EventSubscription

executor = ThreadPoolExecutor()
pending = PendingEuroscopeEvents()
factory = EventDispatcherFactory(pending, executor)
bus = InternalEventBus(factory, executor)
bus.subscribe_sync(EuroscopeTimerTickEvent, pending)

listener = Printer()
bus.subscribe(
    MeasureActivated,
    EventSubscription(
        factory.create_dispatcher(listener, EventDispatchMode.EUROSCOPE),
        listener,
        None,
        SubscriptionFlags(EventDispatchMode.EUROSCOPE),
    ),
)

bus.on_event(MeasureActivated("EGTT01A"))   # queued; len(pending) == 1
bus.on_event(EuroscopeTimerTickEvent())     # printed now
bus.close()
```

Each tick runs the queued callbacks in the order they were added and then
empties the queue.

## Modules

- `flowevents.flags`: `EventDispatchMode` (`SYNC`, `ASYNC`, `EUROSCOPE`) and
  the frozen dataclass `SubscriptionFlags(dispatch_mode, once=False)`.
- `flowevents.pending`: `EuroscopeTimerTickEvent` and `PendingEuroscopeEvents`
  (`add_event(callback)`, `on_event(event)`, `len()`).
- `flowevents.dispatchers`: the abstract `EventDispatcher` and the
  `SynchronousEventDispatcher`, `AsynchronousEventDispatcher` and
  `EuroscopeEventDispatcher` classes. Also `EventDispatcherFactory`, whose
  `create_dispatcher(listener, mode)` picks one of the three.
- `flowevents.stream`: `EventSubscription` and `EventStream`, the list of
  subscriptions for one event type.
- `flowevents.bus`: `InternalEventBus` and `make_event_bus()`.

## Inspecting subscriptions

To check what is registered, for example in tests, use
`has_listener_for_subscription`. It returns `True` if a listener of the given
class is subscribed to the event type with the same mode and `once` flag:

```python
from flowevents.flags import EventDispatchMode, SubscriptionFlags

bus.has_listener_for_subscription(
    Printer, MeasureActivated, SubscriptionFlags(EventDispatchMode.SYNC, False)
)
```

`EventStream.has_listener_of_type(listener_type)`, reached through
`bus.stream(event_type)`, checks the listener class only.

## What it does not do

There is no way to unsubscribe, except that a "once" subscription removes
itself after its first delivery. Events stay inside one process and are not
stored anywhere. Nothing in the package raises timer ticks itself. The
application publishes `EuroscopeTimerTickEvent` when it wants deferred
callbacks to run.