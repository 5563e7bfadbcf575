"""Top-level window hosting the DC dimming settings page."""

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QLabel, QMainWindow

from ..core.service import is_page_enabled
from .settings import DcDimmingPanel


class SettingsWindow(QMainWindow):
    """Main window; shows the panel, or a note when DC dimming is unavailable."""

    def __init__(self, registry, parent=None):
        super().__init__(parent)
        self.setWindowTitle(DcDimmingPanel.TITLE)
        self.resize(460, 520)
        self.setStyleSheet("QMainWindow { background-color: #fafafa; }")

        self.panel = None
        if is_page_enabled(registry):
            self.panel = DcDimmingPanel(registry, self)
            self.panel.activate()
            self.setCentralWidget(self.panel)
        else:
            note = QLabel("DC dimming is not supported on this device.")
            note.setAlignment(Qt.AlignCenter)
            self.setCentralWidget(note)

    def closeEvent(self, event):
        if self.panel is not None:
            self.panel.deactivate()
        super().closeEvent(event)
