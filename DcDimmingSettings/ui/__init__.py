"""UI components package."""

from .settings import DcDimmingPanel
from .window import SettingsWindow

__all__ = ["DcDimmingPanel", "SettingsWindow"]
