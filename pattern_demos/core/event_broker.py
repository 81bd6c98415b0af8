import threading
from typing import Any, Callable, Dict, List

from pattern_demos.core.config import get_settings
from pattern_demos.core.logging import get_logger
from pattern_demos.core.singleton import singleton_for

Handler = Callable[[Any], None]

logger = get_logger()


class EventBroker:
    """
    Name-keyed callback registry with synchronous, in-order dispatch.

    With isolate_failures=True a raising handler is logged and the rest
    still run; with False the first exception propagates to the publisher.
    """

    def __init__(self, isolate_failures: bool = True):
        self.isolate_failures = isolate_failures
        self._subscribers: Dict[str, List[Handler]] = {}
        self._lock = threading.Lock()

    def subscribe(self, event_name: str, handler: Handler):
        with self._lock:
            self._subscribers.setdefault(event_name, []).append(handler)

    def unsubscribe(self, event_name: str, handler: Handler):
        # == rather than `is`: bound methods are rebuilt on each attribute access
        with self._lock:
            handlers = self._subscribers.get(event_name)
            if not handlers or handler not in handlers:
                return
            handlers.remove(handler)
            if not handlers:
                del self._subscribers[event_name]

    def subscriber_count(self, event_name: str) -> int:
        with self._lock:
            return len(self._subscribers.get(event_name, []))

    def publish(self, event_name: str, payload: Any):
        with self._lock:
            handlers = list(self._subscribers.get(event_name, []))

        if not handlers:
            return

        logger.debug("event_published", event_name=event_name, handlers=len(handlers))

        for handler in handlers:
            if not self.isolate_failures:
                handler(payload)
                continue
            try:
                handler(payload)
            except Exception:
                logger.exception(
                    "handler_failed",
                    event_name=event_name,
                    handler=getattr(handler, "__qualname__", repr(handler)),
                )


def _build_shared_broker() -> EventBroker:
    return EventBroker(isolate_failures=get_settings().broker_isolate_failures)


def get_event_broker() -> EventBroker:
    """Shared broker for the whole process, built on first use."""
    return singleton_for(EventBroker, _build_shared_broker).instance
