import pytest
from storedesk.models.schemas import (
    NoteKind,
    OrderStatus,
    ProductSettings,
    ProductType,
    PushNotification,
)


def test_push_notification_known_kind():
    note = PushNotification(note_id=7, kind="store_order", title="New order")
    assert note.kind is NoteKind.store_order


def test_push_notification_unknown_kind_maps_to_unknown():
    note = PushNotification(note_id=7, kind="something_new")
    assert note.kind is NoteKind.unknown


def test_push_notification_missing_kind_is_unknown():
    note = PushNotification(note_id=1, kind=None)
    assert note.kind is NoteKind.unknown


def test_push_notification_rejects_negative_id():
    with pytest.raises(ValueError):
        PushNotification(note_id=-1, kind="store_order")


def test_product_type_unknown_value_is_custom():
    assert ProductType("bundle") is ProductType.custom
    assert ProductType("external") is ProductType.affiliate


def test_order_status_values():
    assert OrderStatus("on-hold") is OrderStatus.on_hold


def test_product_settings_defaults_and_slug_strip():
    settings = ProductSettings(slug="  blue-shirt ")
    assert settings.slug == "blue-shirt"
    assert settings.status == "publish"
    assert settings.reviews_allowed is True


def test_product_settings_is_frozen():
    settings = ProductSettings()
    with pytest.raises(ValueError):
        settings.slug = "other"
