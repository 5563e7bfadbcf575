"""Main on/off switch bar shown at the top of a settings page."""

from PySide6.QtCore import Signal
from PySide6.QtWidgets import QCheckBox, QFrame, QHBoxLayout, QLabel


class MainSwitchBar(QFrame):
    """Highlighted bar with a title and a checkable switch.

    Signals:
        switch_changed(bool): Emitted when the user toggles the switch
    """

    switch_changed = Signal(bool)

    STYLESHEET = """
        MainSwitchBar { background-color: #e3ecfa; border-radius: 14px; }
        MainSwitchBar[checked="true"] { background-color: #c7dafb; }
    """

    def __init__(self, title, parent=None):
        super().__init__(parent)
        self.setStyleSheet(self.STYLESHEET)

        self.title_label = QLabel(title)
        self.title_label.setStyleSheet("font-weight: bold; font-size: 11pt;")

        self.switch = QCheckBox()
        self.switch.toggled.connect(self._on_toggled)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(18, 12, 18, 12)
        layout.addWidget(self.title_label)
        layout.addStretch()
        layout.addWidget(self.switch)

    def _on_toggled(self, checked):
        self._update_style(checked)
        self.switch_changed.emit(checked)

    def _update_style(self, checked):
        self.setProperty("checked", "true" if checked else "false")
        self.style().unpolish(self)
        self.style().polish(self)

    def update_status(self, checked):
        """Set the switch state without emitting ``switch_changed``."""
        self.switch.blockSignals(True)
        self.switch.setChecked(checked)
        self.switch.blockSignals(False)
        self._update_style(checked)

    def is_checked(self):
        return self.switch.isChecked()
