"""Reusable widgets for settings pages."""

from .main_switch import MainSwitchBar

__all__ = ["MainSwitchBar"]
