"""Shared fixtures: offscreen QApplication and a wired service registry."""

import os
import sys
from pathlib import Path

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Add parent directory to path to import DcDimmingSettings module
sys.path.insert(0, str(Path(__file__).parent.parent))

from PySide6.QtWidgets import QApplication

from DcDimmingSettings.core.constants import DC_DIM_SERVICE, POWER_SERVICE, SETTINGS_SERVICE
from DcDimmingSettings.core.service import DcDimmingManager, PowerManager, ServiceRegistry
from DcDimmingSettings.core.settings_store import SettingsStore


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def store(qapp, tmp_path):
    return SettingsStore(str(tmp_path / "dc_dimming.ini"))


@pytest.fixture
def power():
    return PowerManager(0, 255)


@pytest.fixture
def manager(store, power):
    return DcDimmingManager(store, power)


@pytest.fixture
def registry(manager, power, store):
    return ServiceRegistry({DC_DIM_SERVICE: manager, POWER_SERVICE: power, SETTINGS_SERVICE: store})
