"""DcDimmingSettings - settings screen for DC (flicker-free) display dimming.

This package provides a Qt settings page that binds UI controls to a
display-dimming service:

Controls:
    - Main switch: turn DC dimming on or off
    - Schedule: never / sunset to sunrise / based on brightness / both
    - Brightness threshold: percentage of gamma space, 0 = disabled
    - Restore button: shown while the service overrides the schedule

Package Structure:
    - core/: Qt-widget-independent services (conversion curve, settings
      store, reference dimming and power services)
    - ui/: Settings window and page
    - ui/settings/: Page controller, builder, components and helpers

Quick Start:
    from DcDimmingSettings import main
    main()

Dependencies:
    - PySide6: Qt for Python
    - numpy: Brightness curve computation
"""

from .app import main
from .ui import DcDimmingPanel, SettingsWindow
from .core import (
    DcDimmingManager,
    PowerManager,
    ServiceRegistry,
    SettingsStore,
    convert_gamma_to_linear,
    convert_linear_to_gamma,
)

__version__ = "0.1.0"
__all__ = [
    "main",
    "DcDimmingPanel",
    "SettingsWindow",
    "DcDimmingManager",
    "PowerManager",
    "ServiceRegistry",
    "SettingsStore",
    "convert_gamma_to_linear",
    "convert_linear_to_gamma",
]
