"""Data schemas and validation."""
from .schemas import NoteKind, OrderStatus, ProductSettings, ProductType, PushNotification

__all__ = [
    "NoteKind",
    "OrderStatus",
    "ProductSettings",
    "ProductType",
    "PushNotification",
]
