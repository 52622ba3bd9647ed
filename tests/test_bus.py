"""Tests for the event bus."""

import logging

from connect4web.core import Event, EventBus, EventType, get_event_bus, reset_event_bus


def test_subscribe_and_publish():
    bus = EventBus()
    received = []
    bus.subscribe(EventType.MOVE_MADE, received.append)

    bus.publish(Event(type=EventType.MOVE_MADE, data=1))
    bus.publish(Event(type=EventType.GAME_RESET))

    assert [e.data for e in received] == [1]


def test_unsubscribe():
    bus = EventBus()
    received = []
    bus.subscribe(EventType.MOVE_MADE, received.append)
    bus.unsubscribe(EventType.MOVE_MADE, received.append)
    bus.publish(Event(type=EventType.MOVE_MADE))
    assert received == []


def test_failing_handler_is_logged_and_others_still_run(caplog):
    bus = EventBus()
    received = []

    def boom(event):
        raise RuntimeError("boom")

    bus.subscribe(EventType.GAME_WON, boom)
    bus.subscribe_all(received.append)

    with caplog.at_level(logging.ERROR, logger="connect4web.core.bus"):
        bus.publish(Event(type=EventType.GAME_WON))

    assert len(received) == 1
    assert "GAME_WON" in caplog.text


def test_event_log_is_bounded():
    bus = EventBus(max_log_size=3)
    for i in range(5):
        bus.publish(Event(type=EventType.MOVE_MADE, data=i))
    assert [e.data for e in bus.get_event_log()] == [2, 3, 4]
    bus.clear_log()
    assert bus.get_event_log() == []


def test_singleton_reset():
    first = get_event_bus()
    assert get_event_bus() is first
    reset_event_bus()
    assert get_event_bus() is not first


def test_unsubscribe_all():
    bus = EventBus()
    received = []
    bus.subscribe_all(received.append)
    bus.publish(Event(type=EventType.GAME_STARTED))
    bus.unsubscribe_all(received.append)
    bus.publish(Event(type=EventType.GAME_RESET))
    assert [e.type for e in received] == [EventType.GAME_STARTED]


def test_event_str():
    event = Event(type=EventType.MOVE_MADE, data={"column": 3}, source="game_store")
    assert str(event) == "[game_store] MOVE_MADE: {'column': 3}"
