from typing import Any

from pattern_demos.core.event_broker import EventBroker
from pattern_demos.core.logging import get_logger


EVENT_OCCURRED = "event_occurred"

logger = get_logger()


class Subscriber:
    """Registers itself for EVENT_OCCURRED on construction."""

    def __init__(self, broker: EventBroker):
        self.broker = broker
        broker.subscribe(EVENT_OCCURRED, self.on_event_occurred)

    def on_event_occurred(self, payload: Any):
        logger.info("event_received", event_name=EVENT_OCCURRED, payload=payload)

    def detach(self):
        self.broker.unsubscribe(EVENT_OCCURRED, self.on_event_occurred)


class Publisher:
    def __init__(self, broker: EventBroker):
        self.broker = broker

    def publish_event(self, payload: Any):
        self.broker.publish(EVENT_OCCURRED, payload)
