from collections import defaultdict
import logging
from typing import Callable, DefaultDict, Iterable, List, Type


Handler = Callable[[object], None]

logger = logging.getLogger(__name__)


class EventBus:
    """Synchronous publish/subscribe for domain events.

    Handlers run in (priority, subscription order). A failing handler is
    logged and recorded but never stops the others or the publisher.
    """

    def __init__(self) -> None:
        self._subscribers: DefaultDict[Type[object], List[tuple[int, int, Handler]]] = defaultdict(list)
        self._next_order = 0
        self._last_publish_errors: List[Exception] = []

    def subscribe(self, event_type: Type[object], handler: Handler, *, priority: int = 100) -> None:
        rows = self._subscribers[event_type]
        rows.append((int(priority), self._next_order, handler))
        rows.sort(key=lambda row: (row[0], row[1]))
        self._next_order += 1

    def subscriber_count(self, event_type: Type[object]) -> int:
        return len(self._subscribers.get(event_type, ()))

    def publish(self, event: object) -> None:
        self.publish_all((event,))

    def publish_all(self, events: Iterable[object]) -> None:
        """Dispatch events in order; errors are collected across the whole batch."""
        self._last_publish_errors = []
        for event in events:
            self._dispatch(event)

    def _dispatch(self, event: object) -> None:
        event_name = type(event).__name__
        for priority, _, handler in list(self._subscribers.get(type(event), ())):
            try:
                handler(event)
            except Exception as exc:
                self._last_publish_errors.append(exc)
                logger.exception(
                    "Handler %s failed on %s (priority %d); continuing",
                    getattr(handler, "__qualname__", repr(handler)),
                    event_name,
                    priority,
                )

    def last_publish_errors(self) -> List[Exception]:
        return list(self._last_publish_errors)
