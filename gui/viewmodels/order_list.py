"""View model for the order list screen.

Decides *when* the list should be refreshed; performing the refresh belongs
to the owning view. Site identity is never stored here because the owning
screen can outlive a store switch, so callers pass ``site_id`` on every
``synchronization_action`` call.
"""

from __future__ import annotations

import weakref
from typing import Callable, List, Optional

from gui.utils.logging import logger
from storedesk.events import (
    ForegroundNotificationStream,
    LifecycleEvent,
    NotificationCenter,
    ObservationToken,
    get_foreground_notifications,
    get_notification_center,
)
from storedesk.models.schemas import NoteKind, OrderStatus, PushNotification
from storedesk.orders.sync import (
    OrderListFilter,
    OrderListSyncActionUseCase,
    SyncCompletion,
    SyncReason,
    SyncRequest,
)


class ResyncSignal:
    """Single-consumer "please resync" signal.

    Connecting a handler replaces the previous one. Emitting with nothing
    connected is a no-op.
    """

    def __init__(self):
        self._handler: Optional[Callable[[], None]] = None

    @property
    def is_connected(self) -> bool:
        return self._handler is not None

    def connect(self, handler: Callable[[], None]) -> None:
        self._handler = handler

    def disconnect(self) -> None:
        self._handler = None

    def emit(self) -> bool:
        if self._handler is None:
            return False
        self._handler()
        return True


def _weak(method: Callable[..., None]) -> Callable[..., None]:
    """Wrap a bound method so the event source does not keep its owner alive."""
    ref = weakref.WeakMethod(method)

    def _call(*args) -> None:
        target = ref()
        if target is not None:
            target(*args)

    return _call


class OrderListViewModel:
    def __init__(
        self,
        status_filter: Optional[OrderStatus],
        includes_future_orders: bool = True,
        *,
        notification_center: Optional[NotificationCenter] = None,
        push_notifications: Optional[ForegroundNotificationStream] = None,
    ):
        self.filter = OrderListFilter(
            status_filter=status_filter,
            includes_future_orders=includes_future_orders,
        )
        self._notification_center = notification_center or get_notification_center()
        self._push_notifications = push_notifications or get_foreground_notifications()

        # Fired when the first page should be fetched again, if the view is visible.
        self.on_should_resynchronize_if_view_is_visible = ResyncSignal()

        # Whether the app was active the last time we heard from the lifecycle.
        self.is_app_active = True

        self._tokens: List[ObservationToken] = []
        self._activated = False

    @property
    def status_filter(self) -> Optional[OrderStatus]:
        return self.filter.status_filter

    @property
    def includes_future_orders(self) -> bool:
        return self.filter.includes_future_orders

    @property
    def is_activated(self) -> bool:
        return self._activated

    def activate(self) -> None:
        """Start observing app lifecycle and foreground push notifications.

        Call once, when the owning view has loaded. Later calls are ignored.
        """
        if self._activated:
            logger.warning("OrderListViewModel.activate() called twice; ignoring")
            return
        self._activated = True

        center = self._notification_center
        self._tokens.append(
            center.add_observer(LifecycleEvent.will_resign_active, _weak(self._handle_app_deactivation))
        )
        self._tokens.append(
            center.add_observer(LifecycleEvent.did_become_active, _weak(self._handle_app_activation))
        )
        self._tokens.append(
            self._push_notifications.subscribe(_weak(self._handle_foreground_notification))
        )

    def close(self) -> None:
        """Release every subscription. Safe to call repeatedly."""
        tokens, self._tokens = self._tokens, []
        for token in tokens:
            token.cancel()

    def __enter__(self) -> "OrderListViewModel":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __del__(self):
        if hasattr(self, "_tokens"):
            self.close()

    def synchronization_action(
        self,
        site_id: int,
        page_number: int,
        page_size: int,
        reason: Optional[SyncReason],
        completion: SyncCompletion,
    ) -> SyncRequest:
        """Return the request that should be executed to sync one page."""
        use_case = OrderListSyncActionUseCase(site_id=site_id, list_filter=self.filter)
        return use_case.action_for(
            page_number=page_number,
            page_size=page_size,
            reason=reason,
            completion=completion,
        )

    # Lifecycle observation

    def _handle_app_deactivation(self, _event: LifecycleEvent) -> None:
        self.is_app_active = False

    def _handle_app_activation(self, _event: LifecycleEvent) -> None:
        # Only a background -> foreground edge requests a resync.
        if self.is_app_active:
            return
        self.is_app_active = True
        logger.debug("App returned to foreground; requesting order list resync")
        self.on_should_resynchronize_if_view_is_visible.emit()

    # Remote notifications observation

    def _handle_foreground_notification(self, notification: PushNotification) -> None:
        if notification.kind != NoteKind.store_order:
            return
        logger.debug("New order notification %s; requesting resync", notification.note_id)
        self.on_should_resynchronize_if_view_is_visible.emit()
