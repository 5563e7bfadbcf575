"""Tests for the QSettings-backed store and its subscriptions."""

from DcDimmingSettings.core.settings_store import SettingsStore


def test_values_persist_across_instances(store, tmp_path):
    store.put_int("auto_mode", 2)
    store.put_bool("state", True)

    reopened = SettingsStore(str(tmp_path / "dc_dimming.ini"))
    assert reopened.get_int("auto_mode") == 2
    assert reopened.get_bool("state") is True
    assert reopened.contains("auto_mode")


def test_defaults_for_missing_keys(store):
    assert store.get_int("brightness", 128) == 128
    assert store.get_bool("state") is False
    assert store.get_bool("state", True) is True
    assert not store.contains("state")


def test_changed_emitted_on_every_put(store):
    seen = []
    store.changed.connect(seen.append)

    store.put_int("auto_mode", 1)
    store.put_int("auto_mode", 1)
    store.put_bool("state", False)

    assert seen == ["auto_mode", "auto_mode", "state"]


def test_subscription_filters_keys(store):
    calls = []
    sub = store.subscribe({"auto_mode", "state"}, lambda: calls.append(1))

    store.put_int("auto_mode", 3)
    store.put_int("brightness", 40)
    store.put_bool("state", True)

    assert len(calls) == 2, f"Expected 2 notifications, got {len(calls)}"
    assert sub.active
    sub.close()


def test_subscription_close_stops_notifications(store):
    calls = []
    sub = store.subscribe(["state"], lambda: calls.append(1))
    sub.close()
    sub.close()

    store.put_bool("state", True)

    assert calls == []
    assert not sub.active


def test_subscription_as_context_manager(store):
    calls = []
    with store.subscribe(["state"], lambda: calls.append(1)) as sub:
        store.put_bool("state", True)
    store.put_bool("state", False)

    assert calls == [1]
    assert not sub.active
