"""Order list view.

Owns an ``OrderListViewModel`` and applies the visibility policy to its
resync requests: a hidden list defers the resync until it appears again.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Optional

from gui.utils.logging import logger
from gui.viewmodels.order_list import OrderListViewModel
from gui.views.base import BaseView
from storedesk.orders.sync import FIRST_PAGE, SyncReason, SyncRequest

SyncExecutor = Callable[[SyncRequest], None]


@dataclass
class OrdersView(BaseView):
    name: str = "orders"
    view_model: Optional[OrderListViewModel] = None
    executor: Optional[SyncExecutor] = None
    site_id: Optional[int] = None
    page_size: int = 25
    pending_resync: bool = False
    sync_errors: List[Exception] = field(default_factory=list)

    def view_did_load(self) -> None:
        if self.view_model is None:
            self.view_model = OrderListViewModel(status_filter=None)
        self.view_model.on_should_resynchronize_if_view_is_visible.connect(
            self._resynchronize_if_visible
        )
        self.view_model.activate()

    def view_will_appear(self) -> None:
        super().view_will_appear()
        if self.pending_resync:
            self.pending_resync = False
            self.sync_first_page(SyncReason.view_will_appear)

    def close(self) -> None:
        if self.view_model is not None:
            self.view_model.on_should_resynchronize_if_view_is_visible.disconnect()
            self.view_model.close()

    def sync_first_page(self, reason: Optional[SyncReason]) -> Optional[SyncRequest]:
        if self.view_model is None or self.executor is None or self.site_id is None:
            logger.debug("Order list sync skipped: view not wired to a store")
            return None
        request = self.view_model.synchronization_action(
            site_id=self.site_id,
            page_number=FIRST_PAGE,
            page_size=self.page_size,
            reason=reason,
            completion=self._sync_finished,
        )
        self.executor(request)
        return request

    def _resynchronize_if_visible(self) -> None:
        if not self.is_visible:
            self.pending_resync = True
            return
        self.sync_first_page(None)

    def _sync_finished(self, error: Optional[Exception]) -> None:
        if error is not None:
            logger.error("Order list sync failed: %s", error)
            self.sync_errors.append(error)
