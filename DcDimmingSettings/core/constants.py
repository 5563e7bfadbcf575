"""Application-wide constants for DcDimmingSettings.

This module contains shared constants used across the application.
"""

# Service registry names
DC_DIM_SERVICE = "dc_dim"
POWER_SERVICE = "power"
SETTINGS_SERVICE = "settings"

# Settings store keys (watched for change notification)
KEY_SETTING_AUTO_MODE = "auto_mode"
KEY_SETTING_STATE = "state"
# Not watched by the panel
KEY_SETTING_BRIGHTNESS = "brightness"

# Auto modes (ordinal order matters)
MODE_AUTO_OFF = 0
MODE_AUTO_TIME = 1
MODE_AUTO_BRIGHTNESS = 2
MODE_AUTO_FULL = 3
AUTO_MODES = (MODE_AUTO_OFF, MODE_AUTO_TIME, MODE_AUTO_BRIGHTNESS, MODE_AUTO_FULL)

# Panel control keys
KEY_MAIN_SWITCH = "dc_dimming_activated"
KEY_BRIGHTNESS = "dc_dimming_brightness"
KEY_RESTORE_BUTTON = "dc_dimming_restore_button"
KEY_AUTO_MODE = "dc_dimming_auto_mode"

# Default backlight range (8-bit panel)
DEFAULT_MIN_BACKLIGHT = 0
DEFAULT_MAX_BACKLIGHT = 255
DEFAULT_BRIGHTNESS_THRESHOLD = 128
