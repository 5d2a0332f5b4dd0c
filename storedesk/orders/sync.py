"""Order list synchronization requests.

Builds the request descriptor the order list hands to whatever executes
remote sync actions. Nothing here talks to the network.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Callable, Optional

from storedesk.models.schemas import OrderStatus

FIRST_PAGE = 1

SyncCompletion = Callable[[Optional[Exception]], None]


class SyncReason(str, Enum):
    pull_to_refresh = "pull_to_refresh"
    view_will_appear = "view_will_appear"
    new_filters_applied = "new_filters_applied"


@dataclass(frozen=True)
class OrderListFilter:
    status_filter: Optional[OrderStatus] = None
    includes_future_orders: bool = True


@dataclass(frozen=True)
class SyncRequest:
    site_id: int
    page_number: int
    page_size: int
    reason: Optional[SyncReason]
    completion: SyncCompletion
    filter: OrderListFilter = OrderListFilter()
    # Upper bound on order creation time, or None to include future orders.
    before: Optional[datetime] = None

    @property
    def status_key(self) -> Optional[str]:
        status = self.filter.status_filter
        return status.value if status is not None else None

    @property
    def is_first_page(self) -> bool:
        return self.page_number == FIRST_PAGE

    @property
    def deletes_all_before_saving(self) -> bool:
        return self.is_first_page and self.reason == SyncReason.pull_to_refresh


class OrderListSyncActionUseCase:
    """Combines a fixed list filter with per-call paging parameters."""

    def __init__(self, site_id: int, list_filter: OrderListFilter):
        self.site_id = site_id
        self.filter = list_filter

    def _before(self) -> Optional[datetime]:
        if self.filter.includes_future_orders:
            return None
        return datetime.now().replace(hour=0, minute=0, second=0, microsecond=0)

    def action_for(
        self,
        page_number: int,
        page_size: int,
        reason: Optional[SyncReason],
        completion: SyncCompletion,
    ) -> SyncRequest:
        return SyncRequest(
            site_id=self.site_id,
            page_number=page_number,
            page_size=page_size,
            reason=reason,
            completion=completion,
            filter=self.filter,
            before=self._before(),
        )
