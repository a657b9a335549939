"""Tests for the event bus."""

from bouncestack.core.events import (
    Event,
    EventBus,
    EventType,
    accelerate_event,
    lock_event,
    tick_event,
)


def test_subscribe_and_emit(bus):
    received = []
    bus.subscribe(EventType.LOCK_TRIGGER, received.append)

    event = lock_event()
    bus.emit(event)
    bus.emit(accelerate_event(True))

    assert received == [event]


def test_unsubscribe(bus):
    received = []
    unsubscribe = bus.subscribe(EventType.LOCK_TRIGGER, received.append)

    unsubscribe()
    bus.emit(lock_event())

    assert received == []


def test_subscribe_all_sees_every_event(bus):
    received = []
    bus.subscribe_all(received.append)

    bus.emit(lock_event())
    bus.emit(tick_event(0, 1))

    assert [event.type for event in received] == [EventType.LOCK_TRIGGER, EventType.TICK]


def test_failing_handler_does_not_block_others(bus, caplog):
    received = []

    def broken(event):
        raise RuntimeError("boom")

    bus.subscribe(EventType.CAMERA_SHIFT, broken)
    bus.subscribe(EventType.CAMERA_SHIFT, received.append)

    bus.emit(Event(EventType.CAMERA_SHIFT, data={"offset": 50}))

    assert len(received) == 1
    assert "boom" in caplog.text


def test_custom_string_events(bus):
    received = []
    bus.subscribe("debug", received.append)

    bus.emit(Event("debug", data={"x": 1}))

    assert received[0].data == {"x": 1}


def test_history_is_bounded():
    bus = EventBus(history_limit=3)
    for frame in range(5):
        bus.emit(tick_event(frame, 1))

    history = bus.get_history(limit=10)
    assert [event.data["frame"] for event in history] == [2, 3, 4]

    bus.clear_history()
    assert bus.get_history() == []


def test_event_helpers():
    assert accelerate_event(True).type is EventType.ACCELERATE_PRESS
    assert accelerate_event(False).type is EventType.ACCELERATE_RELEASE
    assert lock_event(source="pad").source == "pad"
    assert tick_event(7, 2).data == {"frame": 7, "steps": 2}
