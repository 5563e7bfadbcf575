"""Reference platform services for the DC dimming settings screen.

- DcDimmingManager: dimming service backed by a SettingsStore
- PowerManager: fixed backlight range provider
- ServiceRegistry: name -> service lookup with an explicit availability check

The dimming algorithm itself is not modelled; the manager only keeps the
state the settings screen reads and writes, plus the forced-override flag.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Optional, Union

from .constants import (
    AUTO_MODES,
    DC_DIM_SERVICE,
    DEFAULT_BRIGHTNESS_THRESHOLD,
    DEFAULT_MAX_BACKLIGHT,
    DEFAULT_MIN_BACKLIGHT,
    KEY_SETTING_AUTO_MODE,
    KEY_SETTING_BRIGHTNESS,
    KEY_SETTING_STATE,
    MODE_AUTO_OFF,
    POWER_SERVICE,
    SETTINGS_SERVICE,
)
from .settings_store import SettingsStore

logger = logging.getLogger(__name__)


class PowerManager:
    """Provides the screen backlight range."""

    def __init__(self, minimum: int = DEFAULT_MIN_BACKLIGHT, maximum: int = DEFAULT_MAX_BACKLIGHT):
        if maximum <= minimum:
            raise ValueError(f"Invalid backlight range [{minimum}, {maximum}]")
        self._minimum = minimum
        self._maximum = maximum

    def get_minimum_screen_brightness_setting(self) -> int:
        return self._minimum

    def get_maximum_screen_brightness_setting(self) -> int:
        return self._maximum


class DcDimmingManager:
    """DC dimming service state.

    Enabled state and auto mode live in the store under ``state`` and
    ``auto_mode`` so that other writers are visible to observers. A manual
    on/off while an auto mode is active sets the forced override; choosing an
    auto mode or restoring clears it.
    """

    def __init__(self, store: SettingsStore, power: PowerManager, available: bool = True):
        self._store = store
        self._power = power
        self._available = available
        self._force = False

    def is_available(self) -> bool:
        return self._available

    def is_dc_dimming_on(self) -> bool:
        return self._store.get_bool(KEY_SETTING_STATE, False)

    def set_dc_dimming(self, enable: bool) -> None:
        logger.debug("set_dc_dimming(%s)", enable)
        if self.get_auto_mode() != MODE_AUTO_OFF:
            self._force = True
        self._store.put_bool(KEY_SETTING_STATE, enable)

    def get_auto_mode(self) -> int:
        return self._store.get_int(KEY_SETTING_AUTO_MODE, MODE_AUTO_OFF)

    def set_auto_mode(self, mode: int) -> None:
        if mode not in AUTO_MODES:
            raise ValueError(f"Unknown auto mode: {mode!r}")
        logger.debug("set_auto_mode(%d)", mode)
        self._force = False
        self._store.put_int(KEY_SETTING_AUTO_MODE, mode)

    def get_brightness_threshold(self) -> int:
        return self._store.get_int(KEY_SETTING_BRIGHTNESS, DEFAULT_BRIGHTNESS_THRESHOLD)

    def set_brightness_threshold(self, value: int) -> None:
        lo = self._power.get_minimum_screen_brightness_setting()
        hi = self._power.get_maximum_screen_brightness_setting()
        value = max(lo, min(hi, int(value)))
        logger.debug("set_brightness_threshold(%d)", value)
        self._store.put_int(KEY_SETTING_BRIGHTNESS, value)

    def is_forcing(self) -> bool:
        return self._force

    def force_dc_dimming(self, enable: bool) -> None:
        """Override the auto mode decision, as the service does on its own."""
        logger.info("Forcing DC dimming %s", "on" if enable else "off")
        self._force = True
        self._store.put_bool(KEY_SETTING_STATE, enable)

    def restore_auto_mode(self) -> None:
        logger.debug("restore_auto_mode()")
        self._force = False
        # Re-announce the mode so observers re-derive
        self._store.put_int(KEY_SETTING_AUTO_MODE, self.get_auto_mode())


@dataclass(frozen=True)
class Available:
    manager: DcDimmingManager
    power: PowerManager
    store: SettingsStore


@dataclass(frozen=True)
class Unavailable:
    reason: str


ServiceAvailability = Union[Available, Unavailable]


class ServiceRegistry:
    """Looks up platform services by name."""

    def __init__(self, services: Optional[Dict[str, object]] = None):
        self._services = dict(services or {})

    def register(self, name: str, service) -> None:
        self._services[name] = service

    def get_service(self, name: str):
        return self._services.get(name)


def check_availability(registry: ServiceRegistry) -> ServiceAvailability:
    """Resolve the dimming service once.

    Returns:
        Available(manager, power, store) when every service exists and the
        dimming service reports available,
        Unavailable(reason) otherwise
    """
    manager = registry.get_service(DC_DIM_SERVICE)
    if manager is None:
        return Unavailable("service not registered")
    if not manager.is_available():
        return Unavailable("service reports not available")
    power = registry.get_service(POWER_SERVICE)
    if power is None:
        return Unavailable("power service not registered")
    store = registry.get_service(SETTINGS_SERVICE)
    if store is None:
        return Unavailable("settings store not registered")
    return Available(manager, power, store)


def is_page_enabled(registry: ServiceRegistry) -> bool:
    """Whether the DC dimming settings page should be offered at all."""
    return isinstance(check_availability(registry), Available)
