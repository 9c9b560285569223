"""
In-memory event bus connecting model mutations to screen renderers.

The cart publishes events here, and screens (or any other observer) subscribe
to them. Neither side knows about the other.

Design decisions:
- Synchronous delivery in registration order
- Name-based channels (subscribe to an event name, receive its payload)
- The same callback may be registered more than once and is then called once
  per registration; unsubscribing removes every registration
- A failing subscriber is logged and skipped, the rest still run
- Subscribers are snapshotted before delivery, so callbacks that subscribe or
  unsubscribe during a publish only affect later publishes
- No global instance: the application root builds one bus and injects it
- The event log is bounded and keeps only the most recent events
"""

import logging
from collections import defaultdict, deque
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Callable

logger = logging.getLogger("event_bus")


# Type alias for subscriber callbacks
EventCallback = Callable[..., None]

DEFAULT_EVENT_LOG_SIZE = 1000


def _channel(event_name: str) -> str:
    """Normalize enum members to their raw string value."""
    if isinstance(event_name, Enum):
        return event_name.value
    return event_name


def _same_callback(registered: EventCallback, callback: EventCallback) -> bool:
    """Identity match, except bound methods match on the same object and function."""
    if registered is callback:
        return True
    registered_self = getattr(registered, "__self__", None)
    if registered_self is None or not hasattr(registered, "__func__"):
        return False
    return (
        registered_self is getattr(callback, "__self__", None)
        and registered.__func__ is getattr(callback, "__func__", None)
    )


@dataclass
class PublishedEvent:
    """
    Record of one publish call, kept in the bus's event log.

    Attributes:
        name: Event name the payload was published under
        payload: Positional arguments passed to the subscribers
        timestamp: When the event was published
    """
    name: str
    payload: tuple[Any, ...]
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __str__(self) -> str:
        return f"Event({self.name}, args={len(self.payload)})"


class EventBus:
    """
    Named-channel publish/subscribe hub.

    Example usage:
        bus = EventBus()

        def on_cart_updated(items):
            print(f"Cart now holds {len(items)} items")
        bus.subscribe(AppEvents.CART_UPDATED, on_cart_updated)

        bus.publish(AppEvents.CART_UPDATED, [product])
    """

    def __init__(self, event_log_size: int = DEFAULT_EVENT_LOG_SIZE):
        """
        Initialize the event bus with empty subscriber lists.

        Args:
            event_log_size: How many recent events the log keeps
        """
        # Map of event name -> list of callbacks
        self._subscribers: dict[str, list[EventCallback]] = defaultdict(list)

        self._event_log: deque[PublishedEvent] = deque(maxlen=event_log_size)
        self._log_events: bool = True

    def subscribe(self, event_name: str, callback: EventCallback) -> None:
        """
        Subscribe to events published under ``event_name``.

        Note: The same callback can be subscribed multiple times (will be called multiple times).
        """
        self._subscribers[_channel(event_name)].append(callback)
        logger.debug(f"Subscribed callback to '{event_name}' events")

    def unsubscribe(self, event_name: str, callback: EventCallback) -> int:
        """
        Remove every registration of ``callback`` for ``event_name``.

        Callbacks are compared by identity. Bound methods are the exception:
        they match when they wrap the same function on the same object, since
        every ``obj.method`` access builds a new method object. Unknown events and
        callbacks that were never registered are ignored.

        Returns:
            Number of registrations removed
        """
        event_name = _channel(event_name)
        callbacks = self._subscribers.get(event_name)
        if not callbacks:
            return 0

        remaining = [cb for cb in callbacks if not _same_callback(cb, callback)]
        removed = len(callbacks) - len(remaining)
        if removed:
            self._subscribers[event_name] = remaining
            logger.debug(f"Unsubscribed {removed} callback(s) from '{event_name}' events")
        return removed

    def publish(self, event_name: str, *payload: Any) -> int:
        """
        Deliver ``payload`` to every subscriber of ``event_name``.

        Returns:
            Number of callbacks invoked

        Note: Callbacks are called synchronously in the order they subscribed.
        If a callback raises an exception, it's logged but doesn't stop other callbacks.
        """
        event_name = _channel(event_name)
        event = PublishedEvent(name=event_name, payload=payload)
        if self._log_events:
            self._event_log.append(event)

        callbacks = list(self._subscribers.get(event_name, []))
        if not callbacks:
            logger.debug(f"No subscribers for '{event_name}'")
            return 0

        logger.info(f"Publishing: {event}")

        for callback in callbacks:
            try:
                callback(*payload)
            except Exception:
                logger.exception(f"Subscriber raised while handling {event}")

        return len(callbacks)

    def get_subscriber_count(self, event_name: str) -> int:
        """Get the number of registrations for an event name."""
        return len(self._subscribers.get(_channel(event_name), []))

    def get_event_log(self) -> list[PublishedEvent]:
        """Get the most recent published events, oldest first."""
        return list(self._event_log)

    def clear_event_log(self) -> None:
        self._event_log.clear()

    def clear_subscribers(self) -> None:
        """Remove all subscribers (useful for testing)."""
        self._subscribers.clear()

    def set_logging(self, enabled: bool) -> None:
        """Enable or disable the event log."""
        self._log_events = enabled
