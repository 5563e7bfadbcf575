"""UI builder for DcDimmingPanel - handles all widget creation and layout."""

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QComboBox,
    QFrame,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSlider,
    QVBoxLayout,
)

from ..components import MainSwitchBar
from .brightness_percent import AUTO_MODE_ENTRIES, format_brightness_label


class DcDimmingUIBuilder:
    """Responsible for building all UI components for DcDimmingPanel."""

    SLIDER_STYLESHEET = """
        QSlider::groove:horizontal { background: #ddd; height: 6px; border-radius: 3px; }
        QSlider::handle:horizontal { background: #666; width: 16px; margin: -5px 0; border-radius: 8px; }
        QSlider::handle:horizontal:hover { background: #444; }
        QSlider::handle:horizontal:disabled { background: #bbb; }
    """

    TITLE_STYLESHEET = "font-weight: bold; font-size: 10pt;"
    SUMMARY_STYLESHEET = "color: #666; font-size: 9pt;"

    def build_main_switch(self, layout, on_switch_changed_callback):
        """Build the main on/off switch bar.

        Args:
            layout: QVBoxLayout to add to
            on_switch_changed_callback: Callback receiving the new bool
        """
        main_switch = MainSwitchBar("Use DC dimming")
        main_switch.switch_changed.connect(on_switch_changed_callback)
        layout.addWidget(main_switch)
        layout.addSpacing(10)
        return main_switch

    def build_auto_mode_selector(self, layout, on_auto_mode_changed_callback):
        """Build the auto mode drop down.

        Entries carry their integer code as a string in item data.

        Args:
            layout: QVBoxLayout to add to
            on_auto_mode_changed_callback: Callback receiving the code string
        """
        title = QLabel("Schedule")
        title.setStyleSheet(self.TITLE_STYLESHEET)
        layout.addWidget(title)

        combo = QComboBox()
        for label, code in AUTO_MODE_ENTRIES:
            combo.addItem(label, str(code))
        combo.currentIndexChanged.connect(lambda index: on_auto_mode_changed_callback(combo.itemData(index)))
        layout.addWidget(combo)
        layout.addSpacing(10)
        return combo

    def build_brightness_controls(self, layout, on_brightness_changed_callback):
        """Build brightness title, value label and slider.

        Args:
            layout: QVBoxLayout to add to
            on_brightness_changed_callback: Callback receiving the slider position

        Returns:
            tuple: (value_label, slider)
        """
        header = QHBoxLayout()
        title = QLabel("Brightness threshold")
        title.setStyleSheet(self.TITLE_STYLESHEET)
        value_label = QLabel(format_brightness_label(0))
        value_label.setStyleSheet(self.SUMMARY_STYLESHEET)
        header.addWidget(title)
        header.addStretch()
        header.addWidget(value_label)
        layout.addLayout(header)

        summary = QLabel("Turn on automatically when screen brightness is below this level")
        summary.setStyleSheet(self.SUMMARY_STYLESHEET)
        summary.setWordWrap(True)
        layout.addWidget(summary)

        slider = QSlider(Qt.Horizontal)
        slider.setRange(0, 100)
        slider.setStyleSheet(self.SLIDER_STYLESHEET)
        # Commit on release, not on every drag step
        slider.setTracking(False)
        slider.valueChanged.connect(on_brightness_changed_callback)
        layout.addWidget(slider)
        layout.addSpacing(10)
        return value_label, slider

    def build_restore_button(self, layout, on_restore_clicked_callback):
        """Build the restore-auto-mode row; hidden until the service forces a mode.

        Returns:
            tuple: (row_frame, button)
        """
        row = QFrame()
        row_layout = QHBoxLayout(row)
        row_layout.setContentsMargins(0, 0, 0, 0)

        note = QLabel("DC dimming was changed manually. Automatic schedule is paused.")
        note.setStyleSheet(self.SUMMARY_STYLESHEET)
        note.setWordWrap(True)

        button = QPushButton("Restore schedule")
        button.clicked.connect(on_restore_clicked_callback)

        row_layout.addWidget(note, 1)
        row_layout.addWidget(button)
        row.setVisible(False)
        layout.addWidget(row)
        return row, button

    def build_footer(self, layout):
        """Build the explanatory footer text."""
        layout.addStretch()
        footer = QLabel(
            "DC dimming lowers screen brightness by reducing the panel's supply voltage "
            "instead of pulsing the backlight, which reduces flicker at low brightness. "
            "Colors may look less accurate while it is on."
        )
        footer.setStyleSheet(self.SUMMARY_STYLESHEET)
        footer.setWordWrap(True)
        layout.addWidget(footer)
        return footer
