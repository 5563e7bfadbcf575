"""DC dimming settings panel.

Binds a main switch, an auto mode drop down, a brightness threshold slider
and a restore button to the DC dimming service:

- activate(): resolve services, populate controls, subscribe to the store
- on_control_changed(key, value): write an edit through to the service
- update_state(): re-derive restore visibility and slider enabled state
- deactivate(): release the store subscription

Store notifications only re-derive the restore/slider state. They do not
reload the switch, drop down or slider values.
"""

import logging

from PySide6.QtWidgets import QVBoxLayout, QWidget

from ...core.constants import (
    KEY_AUTO_MODE,
    KEY_BRIGHTNESS,
    KEY_MAIN_SWITCH,
    KEY_RESTORE_BUTTON,
    KEY_SETTING_AUTO_MODE,
    KEY_SETTING_STATE,
)
from ...core.service import Unavailable, check_availability
from .logic import (
    DcDimmingUIBuilder,
    format_brightness_label,
    is_brightness_enabled,
    linear_to_percent,
    percent_to_linear,
)

logger = logging.getLogger("DcDimmingSettings")


class DcDimmingPanel(QWidget):
    """Settings page for DC dimming."""

    TITLE = "DC Dimming"

    def __init__(self, registry, parent=None):
        """Initialize the panel. Controls stay unbound until activate().

        Args:
            registry: ServiceRegistry providing the dimming, power and settings services
            parent: Parent widget
        """
        super().__init__(parent)
        self.registry = registry

        self._manager = None
        self._subscription = None
        self.minimum_backlight = 0
        self.maximum_backlight = 0

        self._build_ui()

    # ------------------------ UI building ------------------------
    def _build_ui(self):
        main_layout = QVBoxLayout(self)
        main_layout.setSpacing(12)
        main_layout.setContentsMargins(25, 25, 25, 25)

        builder = DcDimmingUIBuilder()
        self.main_switch = builder.build_main_switch(
            main_layout, lambda checked: self.on_control_changed(KEY_MAIN_SWITCH, checked)
        )
        self.auto_mode_combo = builder.build_auto_mode_selector(
            main_layout, lambda code: self.on_control_changed(KEY_AUTO_MODE, code)
        )
        self.brightness_value_label, self.brightness_slider = builder.build_brightness_controls(
            main_layout, lambda percent: self.on_control_changed(KEY_BRIGHTNESS, percent)
        )
        self.brightness_slider.sliderMoved.connect(self._update_brightness_label)
        self.restore_row, self.restore_button = builder.build_restore_button(
            main_layout, lambda: self.on_control_changed(KEY_RESTORE_BUTTON, None)
        )
        self.footer = builder.build_footer(main_layout)

    # ------------------------ Lifecycle ------------------------
    @property
    def is_bound(self):
        return self._manager is not None

    def activate(self):
        """Read current state into the controls and start observing the store.

        Returns:
            bool: False if the dimming service is unavailable (panel stays unbound)
        """
        self.deactivate()
        availability = check_availability(self.registry)
        if isinstance(availability, Unavailable):
            logger.info("DC dimming unavailable: %s", availability.reason)
            self._manager = None
            return False

        manager = availability.manager
        self._manager = manager
        self.minimum_backlight = availability.power.get_minimum_screen_brightness_setting()
        self.maximum_backlight = availability.power.get_maximum_screen_brightness_setting()

        self._subscription = availability.store.subscribe(
            (KEY_SETTING_AUTO_MODE, KEY_SETTING_STATE), lambda: self.update_state()
        )

        self.main_switch.update_status(manager.is_dc_dimming_on())

        percent = linear_to_percent(
            manager.get_brightness_threshold(), self.minimum_backlight, self.maximum_backlight
        )
        self.brightness_slider.blockSignals(True)
        self.brightness_slider.setValue(percent)
        self.brightness_slider.blockSignals(False)
        # setValue clamps a threshold outside the current backlight range
        percent = self.brightness_slider.value()
        self._update_brightness_label(percent)

        self.auto_mode_combo.blockSignals(True)
        self.auto_mode_combo.setCurrentIndex(self.auto_mode_combo.findData(str(manager.get_auto_mode())))
        self.auto_mode_combo.blockSignals(False)

        self.update_state()
        logger.info(
            "Activated (backlight range %d..%d, threshold %d%%)",
            self.minimum_backlight,
            self.maximum_backlight,
            percent,
        )
        return True

    def deactivate(self):
        """Stop observing the store. Safe to call more than once."""
        if self._subscription is not None:
            self._subscription.close()
            self._subscription = None

    # ------------------------ Slot handlers ------------------------
    def on_control_changed(self, key, value):
        """Write a control edit through to the service, then re-derive state.

        Args:
            key: One of the KEY_* control keys
            value: New control value (bool, code string, percentage or None)

        Returns:
            bool: True if the edit was applied
        """
        if self._manager is None:
            return False

        if key == KEY_MAIN_SWITCH:
            self._manager.set_dc_dimming(bool(value))
        elif key == KEY_AUTO_MODE:
            self._manager.set_auto_mode(int(value))
        elif key == KEY_BRIGHTNESS:
            percent = int(value)
            linear = percent_to_linear(percent, self.minimum_backlight, self.maximum_backlight)
            self._manager.set_brightness_threshold(linear)
            self._update_brightness_label(percent)
        elif key == KEY_RESTORE_BUTTON:
            self._manager.restore_auto_mode()
        else:
            raise ValueError(f"Unknown control key: {key!r}")

        self.update_state()
        return True

    # ------------------------ State management ------------------------
    def update_state(self):
        """Re-derive restore visibility and brightness enabled state from the service."""
        if self._manager is None:
            return

        mode = self._manager.get_auto_mode()
        is_forcing = self._manager.is_forcing()

        self.restore_row.setVisible(is_forcing)
        enabled = is_brightness_enabled(mode, is_forcing)
        self.brightness_slider.setEnabled(enabled)
        self.brightness_value_label.setEnabled(enabled)

    def _update_brightness_label(self, percent):
        self.brightness_value_label.setText(format_brightness_label(percent))

    # ------------------------ Public API ------------------------
    def is_restore_visible(self):
        """Restore row visibility as set by update_state (independent of window shown state)."""
        return not self.restore_row.isHidden()

    def get_values(self):
        """Get displayed control values.

        Returns:
            tuple: (switch_checked, auto_mode_code, brightness_percent)
        """
        return (
            self.main_switch.is_checked(),
            int(self.auto_mode_combo.currentData()),
            self.brightness_slider.value(),
        )
