"""drivebay core — storage drivers and the disk manager.

Public API::

    from drivebay.core import DriveConfig, StorageManager
    from drivebay.core.storage import StorageDriver, LocalStorageDriver

    manager = StorageManager(DriveConfig.for_root("/srv/files"))
    await manager.put("reports/q1.txt", "hello")
    data = await manager.get("reports/q1.txt")
"""
from __future__ import annotations

from drivebay.core.config import DriveConfig, DriveConfigError
from drivebay.core.manager import StorageManager
from drivebay.core.storage import LocalStorageDriver, StorageDriver

__all__ = [
    "DriveConfig",
    "DriveConfigError",
    "LocalStorageDriver",
    "StorageDriver",
    "StorageManager",
]
