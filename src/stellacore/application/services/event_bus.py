from collections import defaultdict
import logging
from typing import Callable, DefaultDict, List, Type


Handler = Callable[[object], None]


class EventBus:
    """Synchronous type-keyed dispatcher; handlers run in (priority, registration) order."""

    def __init__(self) -> None:
        self._subscribers: DefaultDict[Type[object], List[tuple[int, int, Handler]]] = defaultdict(list)
        self._next_order = 0
        self._journal: List[object] = []
        self._last_publish_errors: List[Exception] = []
        self._logger = logging.getLogger(__name__)

    def subscribe(self, event_type: Type[object], handler: Handler, *, priority: int = 100) -> None:
        rows = self._subscribers[event_type]
        rows.append((int(priority), self._next_order, handler))
        self._next_order += 1
        rows.sort(key=lambda row: (row[0], row[1]))

    def subscriber_count(self, event_type: Type[object]) -> int:
        return len(self._subscribers.get(event_type, ()))

    def publish(self, event: object) -> None:
        self._last_publish_errors = []
        self._journal.append(event)
        event_type = type(event)
        handlers = list(self._subscribers.get(event_type, ()))
        if not handlers:
            self._logger.debug("No subscriber for %s", event_type.__name__)
        for priority, _, handler in handlers:
            try:
                handler(event)
            except Exception as exc:
                self._last_publish_errors.append(exc)
                handler_name = getattr(handler, "__qualname__", getattr(handler, "__name__", repr(handler)))
                self._logger.exception(
                    "Event handler failed and was isolated",
                    extra={
                        "event_type": event_type.__name__,
                        "handler": handler_name,
                        "priority": priority,
                    },
                )

    def journal(self) -> List[object]:
        return list(self._journal)

    def last_publish_errors(self) -> List[Exception]:
        return list(self._last_publish_errors)
