from tictactoe.app.event_bus import EventBus


def test_event_bus_publish_and_unsubscribe() -> None:
    bus = EventBus()
    received: list[tuple[str, object]] = []

    unsubscribe_a = bus.subscribe(lambda event: received.append(("a", event)))
    unsubscribe_b = bus.subscribe(lambda event: received.append(("b", event)))

    bus.publish("hello")
    assert received == [("a", "hello"), ("b", "hello")]

    received.clear()
    unsubscribe_a()
    bus.publish("world")
    assert received == [("b", "world")]

    received.clear()
    unsubscribe_b()
    bus.publish("ignored")
    assert received == []


def test_unsubscribe_twice_is_harmless() -> None:
    bus = EventBus()
    unsubscribe = bus.subscribe(lambda event: None)

    unsubscribe()
    unsubscribe()
    bus.publish("nothing")


def test_subscriber_can_unsubscribe_during_publish() -> None:
    bus = EventBus()
    received: list[str] = []
    unsubscribe_first = None

    def first(event: object) -> None:
        received.append("first")
        unsubscribe_first()

    unsubscribe_first = bus.subscribe(first)
    bus.subscribe(lambda event: received.append("second"))

    bus.publish("once")
    bus.publish("twice")

    assert received == ["first", "second", "second"]
