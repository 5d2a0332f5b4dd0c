import gc
from unittest.mock import Mock

import pytest

from gui.viewmodels.order_list import OrderListViewModel, ResyncSignal
from storedesk.events import ForegroundNotificationStream, LifecycleEvent, NotificationCenter
from storedesk.models.schemas import NoteKind, OrderStatus, PushNotification
from storedesk.orders.sync import SyncReason, SyncRequest


RESIGN = LifecycleEvent.will_resign_active
BECOME = LifecycleEvent.did_become_active


@pytest.fixture
def center():
    return NotificationCenter()


@pytest.fixture
def stream():
    return ForegroundNotificationStream()


@pytest.fixture
def make_vm(center, stream):
    created = []

    def _make(status_filter=None, includes_future_orders=True):
        vm = OrderListViewModel(
            status_filter,
            includes_future_orders,
            notification_center=center,
            push_notifications=stream,
        )
        created.append(vm)
        return vm

    yield _make
    for vm in created:
        vm.close()


def _activated(make_vm):
    vm = make_vm()
    callback = Mock()
    vm.on_should_resynchronize_if_view_is_visible.connect(callback)
    vm.activate()
    return vm, callback


def test_initial_state_is_active(make_vm):
    vm = make_vm()
    assert vm.is_app_active is True
    assert vm.is_activated is False


def test_resign_then_become_active_resyncs_once(make_vm, center):
    vm, callback = _activated(make_vm)

    center.post(RESIGN)
    assert vm.is_app_active is False
    center.post(BECOME)

    assert vm.is_app_active is True
    assert callback.call_count == 1


def test_become_active_without_prior_resign_does_not_resync(make_vm, center):
    _, callback = _activated(make_vm)

    center.post(BECOME)
    center.post(BECOME)
    center.post(BECOME)

    callback.assert_not_called()


@pytest.mark.parametrize(
    "events, expected",
    [
        ([], 0),
        ([RESIGN], 0),
        ([RESIGN, RESIGN, BECOME], 1),
        ([RESIGN, BECOME, BECOME], 1),
        ([RESIGN, BECOME, RESIGN, BECOME], 2),
        ([BECOME, RESIGN, RESIGN, BECOME, BECOME, RESIGN], 1),
    ],
)
def test_resync_fires_once_per_background_to_foreground_edge(make_vm, center, events, expected):
    _, callback = _activated(make_vm)

    for event in events:
        center.post(event)

    assert callback.call_count == expected


def test_lifecycle_events_before_activate_are_ignored(make_vm, center):
    vm = make_vm()
    callback = Mock()
    vm.on_should_resynchronize_if_view_is_visible.connect(callback)

    center.post(RESIGN)
    assert vm.is_app_active is True
    center.post(BECOME)
    callback.assert_not_called()


def test_store_order_push_resyncs_regardless_of_state(make_vm, stream):
    vm, callback = _activated(make_vm)

    stream.publish(PushNotification(note_id=1, kind=NoteKind.store_order))
    assert vm.is_app_active is True
    assert callback.call_count == 1

    stream.publish({"note_id": 2, "kind": "store_order"})
    assert callback.call_count == 2


def test_other_push_kinds_are_ignored(make_vm, stream):
    _, callback = _activated(make_vm)

    stream.publish(PushNotification(note_id=1, kind=NoteKind.comment))
    stream.publish({"note_id": 2, "kind": "store_review"})
    stream.publish({"note_id": 3, "kind": "brand_new_kind"})

    callback.assert_not_called()


def test_double_activate_does_not_double_register(make_vm, center, stream):
    vm, callback = _activated(make_vm)
    vm.activate()

    assert center.observer_count(RESIGN) == 1
    assert center.observer_count(BECOME) == 1
    assert stream.subscriber_count == 1

    center.post(RESIGN)
    center.post(BECOME)
    stream.publish({"note_id": 9, "kind": "store_order"})
    assert callback.call_count == 2


def test_close_releases_all_subscriptions(make_vm, center, stream):
    vm, callback = _activated(make_vm)

    vm.close()

    assert center.observer_count() == 0
    assert stream.subscriber_count == 0
    center.post(RESIGN)
    center.post(BECOME)
    stream.publish({"note_id": 1, "kind": "store_order"})
    callback.assert_not_called()


def test_close_twice_is_safe(make_vm, center, stream):
    vm, _ = _activated(make_vm)

    vm.close()
    vm.close()

    assert center.observer_count() == 0
    assert stream.subscriber_count == 0


def test_context_manager_closes_on_exit(center, stream):
    with OrderListViewModel(None, notification_center=center, push_notifications=stream) as vm:
        vm.activate()
        assert center.observer_count() == 2
    assert center.observer_count() == 0
    assert stream.subscriber_count == 0


def test_discarded_view_model_unsubscribes(center, stream):
    vm = OrderListViewModel(None, notification_center=center, push_notifications=stream)
    vm.activate()
    del vm
    gc.collect()

    assert center.observer_count() == 0
    assert stream.subscriber_count == 0
    # Posting into a discarded view model must not blow up.
    center.post(RESIGN)
    stream.publish({"note_id": 1, "kind": "store_order"})


def test_synchronization_action_carries_all_fields(make_vm):
    vm = make_vm(status_filter=OrderStatus.processing, includes_future_orders=False)
    completion = Mock()

    request = vm.synchronization_action(
        site_id=123,
        page_number=2,
        page_size=25,
        reason=SyncReason.pull_to_refresh,
        completion=completion,
    )

    assert isinstance(request, SyncRequest)
    assert request.site_id == 123
    assert request.page_number == 2
    assert request.page_size == 25
    assert request.reason is SyncReason.pull_to_refresh
    assert request.completion is completion
    assert request.filter.status_filter is OrderStatus.processing
    assert request.filter.includes_future_orders is False
    assert vm.status_filter is OrderStatus.processing
    assert vm.includes_future_orders is False


def test_synchronization_action_has_no_side_effects(make_vm):
    vm, callback = _activated(make_vm)
    completion = Mock()

    vm.synchronization_action(site_id=1, page_number=1, page_size=10, reason=None, completion=completion)

    completion.assert_not_called()
    callback.assert_not_called()


def test_resync_signal_single_consumer():
    signal = ResyncSignal()
    assert signal.emit() is False

    first, second = Mock(), Mock()
    signal.connect(first)
    signal.connect(second)
    assert signal.emit() is True

    first.assert_not_called()
    second.assert_called_once_with()

    signal.disconnect()
    assert signal.is_connected is False
    assert signal.emit() is False
