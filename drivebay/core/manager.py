"""StorageManager — named disks behind one entry point.

Example::

    manager = StorageManager(DriveConfig.for_root("/srv/files"))
    await manager.put("avatars/1.png", data)          # default disk
    await manager.disk("backups").copy("a", "b")      # named disk

Remote backends plug in with ``extend``; they must implement the
StorageDriver protocol and raise the shared error taxonomy.
"""
from __future__ import annotations

import logging
from typing import Any, Callable

from drivebay.core.config import DriveConfig
from drivebay.core.storage.base import StorageDriver
from drivebay.core.storage.errors import DriverNotSupported, InvalidConfig
from drivebay.core.storage.local import LocalStorageDriver

logger = logging.getLogger(__name__)

DriverFactory = Callable[[dict[str, Any]], StorageDriver]

_OPERATIONS = frozenset(
    {"exists", "get", "put", "prepend", "append", "delete", "move", "copy"}
)


class StorageManager:
    """Builds and caches one driver per configured disk."""

    def __init__(self, config: DriveConfig) -> None:
        self.config = config
        self._disks: dict[str, StorageDriver] = {}
        self._factories: dict[str, DriverFactory] = {"local": LocalStorageDriver.from_config}

    def extend(self, name: str, factory: DriverFactory) -> None:
        """Register a custom driver factory under ``name``."""
        self._factories[name] = factory

    def disk(self, name: str | None = None) -> StorageDriver:
        """Return the driver for ``name`` (default disk when omitted)."""
        name = name or self.config.default
        if not name:
            raise InvalidConfig.missing_disk_name()

        if name in self._disks:
            return self._disks[name]

        disk_config = self.config.disks.get(name)
        if disk_config is None:
            raise InvalidConfig.missing_disk_config(name)
        driver_name = disk_config.get("driver")
        if not driver_name:
            raise InvalidConfig.missing_disk_driver(name)
        factory = self._factories.get(driver_name)
        if factory is None:
            raise DriverNotSupported.driver_name(driver_name)
        errors = self.config.disk_errors(name, set(self._factories))
        if errors:
            raise InvalidConfig("; ".join(errors))

        driver = factory(disk_config)
        logger.debug("Built %r for disk %s", driver, name)
        self._disks[name] = driver
        return driver

    def __getattr__(self, name: str) -> Any:
        # Operations on the manager itself go to the default disk.
        if name in _OPERATIONS:
            return getattr(self.disk(), name)
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

    def __repr__(self) -> str:
        return f"StorageManager(default={self.config.default!r}, disks={sorted(self.config.disks)!r})"
