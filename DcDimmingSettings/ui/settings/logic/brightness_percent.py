"""Percentage <-> backlight conversions and labels for the brightness control."""

from ....core.brightness_utils import (
    GAMMA_SPACE_MAX,
    round_half_up,
    convert_gamma_to_linear,
    convert_linear_to_gamma,
)
from ....core.constants import (
    MODE_AUTO_BRIGHTNESS,
    MODE_AUTO_FULL,
    MODE_AUTO_OFF,
    MODE_AUTO_TIME,
)

BRIGHTNESS_DISABLED_LABEL = "Disabled"

# (label, code) in display order
AUTO_MODE_ENTRIES = (
    ("Never", MODE_AUTO_OFF),
    ("Sunset to sunrise", MODE_AUTO_TIME),
    ("Based on brightness", MODE_AUTO_BRIGHTNESS),
    ("Sunset to sunrise & brightness", MODE_AUTO_FULL),
)


def gamma_to_percent(gamma):
    """Convert a gamma-space value to a 0-100 slider position."""
    return int(round_half_up(gamma * 100.0 / GAMMA_SPACE_MAX))


def percent_to_gamma(percent):
    """Convert a 0-100 slider position to a gamma-space value."""
    return int(round_half_up(percent / 100.0 * GAMMA_SPACE_MAX))


def linear_to_percent(linear, min_val, max_val):
    """Slider position for a linear backlight threshold."""
    return gamma_to_percent(convert_linear_to_gamma(linear, min_val, max_val))


def percent_to_linear(percent, min_val, max_val):
    """Linear backlight threshold for a slider position."""
    return convert_gamma_to_linear(percent_to_gamma(percent), min_val, max_val)


def format_brightness_label(percent):
    """Format the slider value; 0 means the threshold is disabled.

    Args:
        percent: Slider position (0-100)

    Returns:
        Display string
    """
    if percent == 0:
        return BRIGHTNESS_DISABLED_LABEL
    return f"{percent}%"


def is_brightness_enabled(mode, is_forcing):
    """Whether the threshold control is meaningful for ``mode``."""
    return mode >= MODE_AUTO_BRIGHTNESS and not is_forcing
