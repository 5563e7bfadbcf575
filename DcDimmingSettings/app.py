"""Application entry point.

This module provides the main() function that wires the reference platform
services together and displays the settings window.

Usage:
    python -m DcDimmingSettings.app --settings-file dc_dimming.ini

    # Or from Python:
    from DcDimmingSettings import main
    main()
"""

import argparse
import logging
import sys

from PySide6.QtWidgets import QApplication

from .core.constants import (
    DC_DIM_SERVICE,
    DEFAULT_MAX_BACKLIGHT,
    DEFAULT_MIN_BACKLIGHT,
    POWER_SERVICE,
    SETTINGS_SERVICE,
)
from .core.log import configure_logging
from .core.service import DcDimmingManager, PowerManager, ServiceRegistry
from .core.settings_store import SettingsStore
from .ui import SettingsWindow


def build_parser():
    p = argparse.ArgumentParser(prog="dc-dimming-settings", description="DC dimming settings")
    p.add_argument("--settings-file", default=None, help="INI file backing the settings store")
    p.add_argument("--min-backlight", type=int, default=DEFAULT_MIN_BACKLIGHT, help="Minimum backlight value")
    p.add_argument("--max-backlight", type=int, default=DEFAULT_MAX_BACKLIGHT, help="Maximum backlight value")
    p.add_argument("--unavailable", action="store_true", help="Report the dimming service as unavailable")
    p.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p


def build_registry(args, store):
    """Create the service registry for parsed command-line ``args``."""
    power = PowerManager(args.min_backlight, args.max_backlight)
    manager = DcDimmingManager(store, power, available=not args.unavailable)
    return ServiceRegistry(
        {
            DC_DIM_SERVICE: manager,
            POWER_SERVICE: power,
            SETTINGS_SERVICE: store,
        }
    )


def main(argv=None):
    """Run the settings application.

    Args:
        argv: Command-line arguments (defaults to sys.argv)

    Returns:
        Exit code from QApplication.exec()
    """
    if argv is None:
        argv = sys.argv
    args = build_parser().parse_args(argv[1:])
    configure_logging(getattr(logging, args.log_level))

    app = QApplication(argv[:1])
    app.setOrganizationName("DcDimmingSettings")
    app.setApplicationName("DcDimmingSettings")

    store = SettingsStore(args.settings_file)
    w = SettingsWindow(build_registry(args, store))
    w.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
