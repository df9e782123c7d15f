from shared.application.message_bus import MessageBus
from shared.domain.base import DomainEvent


class SomethingHappened(DomainEvent):
    pass


def test_handlers_receive_events_once():
    bus = MessageBus()
    seen = []
    bus.register_event_handler(SomethingHappened, seen.append)
    bus.register_event_handler(SomethingHappened, seen.append)

    event = SomethingHappened(aggregate_id=1)
    bus.publish_events([event])

    assert seen == [event]


def test_failing_handler_does_not_stop_others():
    bus = MessageBus()
    seen = []

    def broken(event):
        raise RuntimeError("boom")

    bus.register_event_handler(SomethingHappened, broken)
    bus.register_event_handler(SomethingHappened, seen.append)

    bus.publish_events([SomethingHappened()])

    assert len(seen) == 1


def test_event_to_dict():
    data = SomethingHappened(aggregate_id=5).to_dict()
    assert data["event_type"] == "SomethingHappened"
    assert data["aggregate_id"] == 5
