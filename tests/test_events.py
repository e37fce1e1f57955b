import asyncio

from flapcore.core.events import Event, EventBus, GameEventType, tick_event


def test_subscribe_and_emit(event_bus):
    received = []
    event_bus.subscribe(GameEventType.SCORED, received.append)

    event_bus.emit(Event(GameEventType.SCORED, data={"score": 1}))
    event_bus.emit(Event(GameEventType.JUMP))

    assert [e.type for e in received] == [GameEventType.SCORED]
    assert received[0].data == {"score": 1}


def test_unsubscribe(event_bus):
    received = []
    unsubscribe = event_bus.subscribe(GameEventType.JUMP, received.append)
    unsubscribe()

    event_bus.emit(Event(GameEventType.JUMP))
    assert received == []


def test_subscribe_all(event_bus):
    received = []
    event_bus.subscribe_all(received.append)

    event_bus.emit(Event(GameEventType.NEW_GAME))
    event_bus.emit(Event("custom"))

    assert [e.type for e in received] == [GameEventType.NEW_GAME, "custom"]


def test_failing_handler_does_not_stop_dispatch(event_bus):
    received = []

    def broken(event):
        raise ValueError("boom")

    event_bus.subscribe(GameEventType.GAME_OVER, broken)
    event_bus.subscribe(GameEventType.GAME_OVER, received.append)

    event_bus.emit(Event(GameEventType.GAME_OVER))
    assert len(received) == 1


def test_history_is_bounded():
    bus = EventBus(history_limit=3)
    for i in range(5):
        bus.emit(tick_event(0.016, i))

    history = bus.get_history(limit=10)
    assert [e.data["frame"] for e in history] == [2, 3, 4]

    bus.clear_history()
    assert bus.get_history() == []


def test_process_queue_runs_async_handlers(event_bus):
    received = []

    async def handler(event):
        received.append(event.type)

    event_bus.subscribe(GameEventType.TICK, handler)
    event_bus.queue_event(tick_event(0.016, 0))
    event_bus.queue_event(tick_event(0.016, 1))

    asyncio.run(event_bus.process_queue())
    assert received == [GameEventType.TICK, GameEventType.TICK]
