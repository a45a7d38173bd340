import logging
from dataclasses import dataclass

from iCrop.crop.geometry import Rect
from iCrop.events import CropChangedEvent, Event, EventBus


@dataclass(kw_only=True)
class OtherEvent(Event):
    value: int = 0


def test_publish_reaches_subscribers_in_order():
    bus = EventBus()
    calls = []
    bus.subscribe(CropChangedEvent, lambda e: calls.append(("a", e.crop)))
    bus.subscribe(CropChangedEvent, lambda e: calls.append(("b", e.crop)))

    bus.publish(CropChangedEvent(crop=Rect.full()))
    assert calls == [("a", Rect.full()), ("b", Rect.full())]


def test_publish_only_matches_event_type():
    bus = EventBus()
    calls = []
    bus.subscribe(OtherEvent, calls.append)
    bus.publish(CropChangedEvent(crop=Rect.full()))
    assert calls == []


def test_unsubscribe_and_cancel():
    bus = EventBus()
    calls = []
    first = bus.subscribe(OtherEvent, calls.append)
    second = bus.subscribe(OtherEvent, calls.append)
    assert bus.subscriber_count(OtherEvent) == 2

    bus.unsubscribe(first)
    second.cancel()
    bus.publish(OtherEvent(value=1))
    assert calls == []
    assert bus.subscriber_count(OtherEvent) == 0
    # Unsubscribing twice is harmless
    bus.unsubscribe(first)


def test_failing_handler_is_logged(caplog):
    bus = EventBus(logging.getLogger("test.bus"))
    calls = []

    def broken(event):
        raise RuntimeError("boom")

    bus.subscribe(OtherEvent, broken)
    bus.subscribe(OtherEvent, calls.append)
    with caplog.at_level(logging.WARNING, logger="test.bus"):
        bus.publish(OtherEvent(value=2))

    assert len(calls) == 1
    assert "boom" in caplog.text


def test_handler_may_unsubscribe_during_publish():
    bus = EventBus()
    calls = []
    holder = {}

    def once(event):
        calls.append(event.value)
        bus.unsubscribe(holder["sub"])

    holder["sub"] = bus.subscribe(OtherEvent, once)
    bus.publish(OtherEvent(value=1))
    bus.publish(OtherEvent(value=2))
    assert calls == [1]


def test_clear_drops_everything():
    bus = EventBus()
    sub = bus.subscribe(OtherEvent, lambda e: None)
    bus.clear()
    assert not sub.active
    assert bus.subscriber_count(OtherEvent) == 0
