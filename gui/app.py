"""Main GUI application object.

Toolkit bindings drive this shell: they forward the host's lifecycle
callbacks here and ask it for views.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional

from gui.state import AppState
from gui.utils.logging import logger
from gui.viewmodels.order_list import OrderListViewModel
from gui.views.base import BaseView
from gui.views.orders import OrdersView, SyncExecutor
from gui.views.product_settings import ProductSettingsView
from storedesk.config import Settings, get_settings
from storedesk.events import (
    ForegroundNotificationStream,
    LifecycleEvent,
    NotificationCenter,
    get_foreground_notifications,
    get_notification_center,
)


@dataclass
class StoreDeskApp:
    """App shell holding the views and the lifecycle notification center."""

    state: AppState = field(default_factory=AppState)
    settings: Settings = field(default_factory=get_settings)
    notification_center: NotificationCenter = field(default_factory=get_notification_center)
    push_notifications: ForegroundNotificationStream = field(default_factory=get_foreground_notifications)
    executor: Optional[SyncExecutor] = None
    views: Dict[str, BaseView] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.state.site_id is None:
            self.state.site_id = self.settings.site_id

    def run(self) -> None:
        """Run the app.

        In the real app this would start the UI event loop. Here it loads the
        initial view.
        """
        self.switch_view(self.state.current_view)

    def orders_view(self) -> OrdersView:
        view = self.views.get("orders")
        if view is None:
            view_model = OrderListViewModel(
                status_filter=None,
                notification_center=self.notification_center,
                push_notifications=self.push_notifications,
            )
            view = OrdersView(
                view_model=view_model,
                executor=self.executor,
                site_id=self.state.site_id,
                page_size=self.settings.orders_page_size,
            )
            view.view_did_load()
            self.views["orders"] = view
        return view

    def product_settings_view(self) -> ProductSettingsView:
        view = self.views.get("product_settings")
        if view is None:
            view = ProductSettingsView(
                is_edit_products_release5_enabled=self.settings.edit_products_release_5,
            )
            self.views["product_settings"] = view
        return view

    def switch_view(self, view_name: str) -> None:
        """Switch the active view."""
        factories = {
            "orders": self.orders_view,
            "product_settings": self.product_settings_view,
        }
        if view_name not in factories:
            logger.warning("Unknown view %r", view_name)
            return
        current = self.views.get(self.state.current_view)
        if current is not None and self.state.current_view != view_name:
            current.view_did_disappear()
        self.state.current_view = view_name
        factories[view_name]().view_will_appear()

    # Host lifecycle callbacks

    def app_will_resign_active(self) -> None:
        self.state.is_app_active = False
        self.notification_center.post(LifecycleEvent.will_resign_active)

    def app_did_become_active(self) -> None:
        self.state.is_app_active = True
        self.notification_center.post(LifecycleEvent.did_become_active)

    def shutdown(self) -> None:
        orders = self.views.get("orders")
        if isinstance(orders, OrdersView):
            orders.close()
