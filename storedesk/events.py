"""In-process event sources consumed by the view models.

Two ports are defined here:

- ``NotificationCenter`` delivers app lifecycle events posted by the host
  (the UI toolkit's main loop or the app shell).
- ``ForegroundNotificationStream`` delivers push notifications that arrive
  while the app is in the foreground.

Delivery is synchronous, on the thread that posts, in registration order.
Every subscription returns an ``ObservationToken`` whose ``cancel()`` can be
called any number of times.
"""

from __future__ import annotations

from enum import Enum
from functools import lru_cache
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from pydantic import ValidationError

from storedesk.models.schemas import PushNotification
from storedesk.utils.logger import get_logger

logger = get_logger(__name__)


class LifecycleEvent(str, Enum):
    will_resign_active = "will_resign_active"
    did_become_active = "did_become_active"


class ObservationToken:
    """Handle for a single subscription."""

    def __init__(self, on_cancel: Callable[[], None]):
        self._on_cancel: Optional[Callable[[], None]] = on_cancel

    @property
    def is_cancelled(self) -> bool:
        return self._on_cancel is None

    def cancel(self) -> None:
        on_cancel, self._on_cancel = self._on_cancel, None
        if on_cancel is not None:
            on_cancel()


def _deliver(handlers: List[Callable[[Any], None]], payload: Any, source: str) -> int:
    delivered = 0
    # Handlers may cancel themselves while we iterate.
    for handler in list(handlers):
        try:
            handler(payload)
            delivered += 1
        except Exception:
            logger.exception("Handler %r failed while handling %s", handler, source)
    return delivered


class NotificationCenter:
    """Named lifecycle events, fanned out to registered observers."""

    def __init__(self):
        self._observers: Dict[LifecycleEvent, List[Callable[[LifecycleEvent], None]]] = {}

    def add_observer(
        self, event: LifecycleEvent, handler: Callable[[LifecycleEvent], None]
    ) -> ObservationToken:
        event = LifecycleEvent(event)
        self._observers.setdefault(event, []).append(handler)

        def _remove() -> None:
            handlers = self._observers.get(event, [])
            if handler in handlers:
                handlers.remove(handler)

        return ObservationToken(_remove)

    def observer_count(self, event: Optional[LifecycleEvent] = None) -> int:
        if event is not None:
            return len(self._observers.get(LifecycleEvent(event), []))
        return sum(len(h) for h in self._observers.values())

    def post(self, event: LifecycleEvent) -> int:
        """Deliver ``event`` to its observers. Returns how many handled it."""
        event = LifecycleEvent(event)
        logger.debug("Posting %s", event.value)
        return _deliver(self._observers.get(event, []), event, event.value)


class ForegroundNotificationStream:
    """Push notifications received while the app is active."""

    def __init__(self):
        self._subscribers: List[Callable[[PushNotification], None]] = []

    def subscribe(self, handler: Callable[[PushNotification], None]) -> ObservationToken:
        self._subscribers.append(handler)

        def _remove() -> None:
            if handler in self._subscribers:
                self._subscribers.remove(handler)

        return ObservationToken(_remove)

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def publish(self, notification: Union[PushNotification, Mapping[str, Any]]) -> int:
        """Validate and fan out a notification.

        Raw payloads that fail validation are dropped with a warning and
        reach no subscriber.
        """
        if not isinstance(notification, PushNotification):
            try:
                notification = PushNotification.model_validate(notification)
            except ValidationError as e:
                logger.warning("Dropping malformed push payload: %s", e)
                return 0
        return _deliver(self._subscribers, notification, f"note {notification.note_id}")


@lru_cache(maxsize=1)
def get_notification_center() -> NotificationCenter:
    return NotificationCenter()


@lru_cache(maxsize=1)
def get_foreground_notifications() -> ForegroundNotificationStream:
    return ForegroundNotificationStream()
