"""Durable key-value settings store with per-key change notification.

Values are persisted through ``QSettings``. Every write emits ``changed`` with
the written key, whether or not the value differs, so observers behave like a
content observer on the key's URI.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Optional

from PySide6.QtCore import QObject, QSettings, Signal

logger = logging.getLogger(__name__)


class Subscription:
    """Handle for a store subscription; ``close()`` stops notifications."""

    def __init__(self, store: "SettingsStore", keys: frozenset, slot: Callable[[str], None]):
        self._store = store
        self._slot = slot
        self.keys = keys

    @property
    def active(self) -> bool:
        return self._slot is not None

    def close(self) -> None:
        if self._slot is None:
            return
        self._store.changed.disconnect(self._slot)
        self._slot = None
        logger.debug("Released subscription on %s", sorted(self.keys))

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()


class SettingsStore(QObject):
    """Settings store backed by ``QSettings``.

    Signals:
        changed(str): Emitted with the key after every put
    """

    changed = Signal(str)

    def __init__(self, path: Optional[str] = None, parent=None):
        """Initialize the store.

        Args:
            path: INI file to persist to. When omitted the application's
                native settings scope is used.
            parent: Parent QObject
        """
        super().__init__(parent)
        if path:
            self._settings = QSettings(str(path), QSettings.IniFormat)
        else:
            self._settings = QSettings()

    def get_int(self, key: str, default: int = 0) -> int:
        return int(self._settings.value(key, default, type=int))

    def put_int(self, key: str, value: int) -> None:
        self._settings.setValue(key, int(value))
        self._settings.sync()
        self.changed.emit(key)

    def get_bool(self, key: str, default: bool = False) -> bool:
        # Stored as 0/1 so INI files stay readable and type-stable
        return bool(self.get_int(key, 1 if default else 0))

    def put_bool(self, key: str, value: bool) -> None:
        self.put_int(key, 1 if value else 0)

    def contains(self, key: str) -> bool:
        return self._settings.contains(key)

    def subscribe(self, keys: Iterable[str], handler: Callable[[], None]) -> Subscription:
        """Call ``handler`` whenever one of ``keys`` is written.

        The handler receives no arguments; callers re-read whatever they need.

        Returns:
            Subscription that must be closed to stop notifications
        """
        watched = frozenset(keys)

        def _on_changed(key):
            if key in watched:
                handler()

        self.changed.connect(_on_changed)
        logger.debug("Subscribed to %s", sorted(watched))
        return Subscription(self, watched, _on_changed)
