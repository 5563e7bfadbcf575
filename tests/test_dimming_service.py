"""Tests for the reference dimming service and availability checks."""

import pytest

from DcDimmingSettings.core.constants import (
    DC_DIM_SERVICE,
    DEFAULT_BRIGHTNESS_THRESHOLD,
    MODE_AUTO_BRIGHTNESS,
    MODE_AUTO_OFF,
    MODE_AUTO_TIME,
    POWER_SERVICE,
    SETTINGS_SERVICE,
)
from DcDimmingSettings.core.service import (
    Available,
    DcDimmingManager,
    PowerManager,
    ServiceRegistry,
    Unavailable,
    check_availability,
    is_page_enabled,
)


def test_defaults(manager):
    assert manager.is_available()
    assert manager.is_dc_dimming_on() is False
    assert manager.get_auto_mode() == MODE_AUTO_OFF
    assert manager.get_brightness_threshold() == DEFAULT_BRIGHTNESS_THRESHOLD
    assert manager.is_forcing() is False


def test_manual_toggle_without_schedule_does_not_force(manager):
    manager.set_dc_dimming(True)
    assert manager.is_dc_dimming_on()
    assert not manager.is_forcing()


def test_manual_toggle_with_schedule_forces(manager):
    manager.set_auto_mode(MODE_AUTO_TIME)
    manager.set_dc_dimming(True)
    assert manager.is_forcing()

    manager.set_auto_mode(MODE_AUTO_BRIGHTNESS)
    assert not manager.is_forcing()


def test_restore_clears_force_and_notifies_mode(manager, store):
    manager.set_auto_mode(MODE_AUTO_BRIGHTNESS)
    manager.force_dc_dimming(True)
    assert manager.is_forcing()

    seen = []
    store.changed.connect(seen.append)
    manager.restore_auto_mode()

    assert not manager.is_forcing()
    assert manager.get_auto_mode() == MODE_AUTO_BRIGHTNESS
    assert seen == ["auto_mode"]


def test_unknown_auto_mode_rejected(manager):
    with pytest.raises(ValueError):
        manager.set_auto_mode(7)


def test_threshold_is_clamped_to_power_range(manager):
    manager.set_brightness_threshold(300)
    assert manager.get_brightness_threshold() == 255
    manager.set_brightness_threshold(-5)
    assert manager.get_brightness_threshold() == 0
    manager.set_brightness_threshold(42)
    assert manager.get_brightness_threshold() == 42


def test_invalid_power_range():
    with pytest.raises(ValueError):
        PowerManager(255, 0)


def test_check_availability(registry, manager):
    result = check_availability(registry)
    assert isinstance(result, Available)
    assert result.manager is manager
    assert is_page_enabled(registry)


def test_check_availability_missing_services(store, power):
    assert isinstance(check_availability(ServiceRegistry()), Unavailable)

    manager = DcDimmingManager(store, power)
    only_dimming = ServiceRegistry({DC_DIM_SERVICE: manager})
    assert isinstance(check_availability(only_dimming), Unavailable)

    only_dimming.register(POWER_SERVICE, power)
    assert isinstance(check_availability(only_dimming), Unavailable)

    only_dimming.register(SETTINGS_SERVICE, store)
    assert isinstance(check_availability(only_dimming), Available)


def test_check_availability_reported_unavailable(store, power):
    manager = DcDimmingManager(store, power, available=False)
    registry = ServiceRegistry({DC_DIM_SERVICE: manager, POWER_SERVICE: power, SETTINGS_SERVICE: store})
    result = check_availability(registry)
    assert isinstance(result, Unavailable)
    assert "not available" in result.reason
    assert not is_page_enabled(registry)
