"""Storage drivers for drivebay.

Public API::

    from drivebay.core.storage import StorageDriver, LocalStorageDriver
    from drivebay.core.storage import FileNotFound, StorageError
"""
from __future__ import annotations

from drivebay.core.storage.base import Content, StorageDriver
from drivebay.core.storage.errors import (
    DriverNotSupported,
    ErrorKind,
    FileNotFound,
    InvalidConfig,
    PathTraversal,
    StorageError,
    classify_error,
)
from drivebay.core.storage.local import LocalStorageDriver

__all__ = [
    "Content",
    "DriverNotSupported",
    "ErrorKind",
    "FileNotFound",
    "InvalidConfig",
    "LocalStorageDriver",
    "PathTraversal",
    "StorageDriver",
    "StorageError",
    "classify_error",
]
