"""Order list domain helpers."""
from .sync import FIRST_PAGE, OrderListFilter, OrderListSyncActionUseCase, SyncReason, SyncRequest

__all__ = [
    "FIRST_PAGE",
    "OrderListFilter",
    "OrderListSyncActionUseCase",
    "SyncReason",
    "SyncRequest",
]
