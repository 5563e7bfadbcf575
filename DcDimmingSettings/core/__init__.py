"""Core services and utilities (Qt widgets independent).

This module provides the brightness conversion curve, the settings store and
the reference dimming/power services.
"""

from .brightness_utils import GAMMA_SPACE_MAX, convert_gamma_to_linear, convert_linear_to_gamma
from .settings_store import SettingsStore, Subscription
from .service import (
    Available,
    DcDimmingManager,
    PowerManager,
    ServiceRegistry,
    Unavailable,
    check_availability,
    is_page_enabled,
)
from .log import configure_logging

__all__ = [
    "GAMMA_SPACE_MAX",
    "convert_gamma_to_linear",
    "convert_linear_to_gamma",
    "SettingsStore",
    "Subscription",
    "Available",
    "DcDimmingManager",
    "PowerManager",
    "ServiceRegistry",
    "Unavailable",
    "check_availability",
    "is_page_enabled",
    "configure_logging",
]
