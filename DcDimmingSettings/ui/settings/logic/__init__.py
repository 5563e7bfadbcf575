"""Logic and utilities for the DC dimming panel."""

from .brightness_percent import (
    AUTO_MODE_ENTRIES,
    BRIGHTNESS_DISABLED_LABEL,
    format_brightness_label,
    gamma_to_percent,
    is_brightness_enabled,
    linear_to_percent,
    percent_to_gamma,
    percent_to_linear,
)
from .panel_builder import DcDimmingUIBuilder

__all__ = [
    "AUTO_MODE_ENTRIES",
    "BRIGHTNESS_DISABLED_LABEL",
    "format_brightness_label",
    "gamma_to_percent",
    "is_brightness_enabled",
    "linear_to_percent",
    "percent_to_gamma",
    "percent_to_linear",
    "DcDimmingUIBuilder",
]
