"""Storage error taxonomy shared by every driver.

Drivers translate raw OS / client errors through ``classify_error`` and then
decide, per operation, which kinds they recover from, which they normalize
into a domain error, and which they let through untouched.
"""
from __future__ import annotations

import errno
import os
from enum import Enum


class StorageError(Exception):
    """Base class for all domain-level storage errors."""


class FileNotFound(StorageError):
    """The requested file does not exist.

    ``path`` is the path the caller asked for, not the resolved one.
    """

    def __init__(self, message: str, path: str = "") -> None:
        super().__init__(message)
        self.path = path

    @classmethod
    def file(cls, path: str) -> FileNotFound:
        return cls(f"The file {path} doesn't exist", path=path)


class PathTraversal(StorageError, ValueError):
    """A relative path resolves outside the driver's root."""

    def __init__(self, path: str, root: str) -> None:
        super().__init__(f"Path traversal detected: {path} escapes {root}")
        self.path = path
        self.root = root


class InvalidConfig(StorageError):
    """A disk is missing or misconfigured."""

    @classmethod
    def missing_disk_name(cls) -> InvalidConfig:
        return cls("Make sure to define a default disk name inside config")

    @classmethod
    def missing_disk_config(cls, name: str) -> InvalidConfig:
        return cls(f"Make sure to define config for {name} disk")

    @classmethod
    def missing_disk_driver(cls, name: str) -> InvalidConfig:
        return cls(f"Make sure to define driver for {name} disk")


class DriverNotSupported(StorageError):
    """No driver factory is registered under the requested name."""

    def __init__(self, message: str, driver: str = "") -> None:
        super().__init__(message)
        self.driver = driver

    @classmethod
    def driver_name(cls, name: str) -> DriverNotSupported:
        return cls(f"Driver {name} is not supported", driver=name)


class ErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    MISSING_PARENT = "missing_parent"
    FATAL = "fatal"


def classify_error(
    error: BaseException,
    target: str | None = None,
    source: str | None = None,
) -> ErrorKind:
    """Classify an underlying error into the storage taxonomy.

    Args:
        error: The exception raised by the filesystem call.
        target: Resolved path being written to, when the operation creates
            an entry. A "not found" while writing it means its parent
            directory is missing (or was missing when the call ran).
        source: Resolved path being read from, for operations that also
            create ``target`` (rename). A "not found" with an absent source
            is the source's fault, not the target directory's.

    Returns:
        ``MISSING_PARENT``, ``NOT_FOUND`` or ``FATAL``.
    """
    if not isinstance(error, OSError) or error.errno != errno.ENOENT:
        return ErrorKind.FATAL
    if target is None:
        return ErrorKind.NOT_FOUND
    if source is not None and not os.path.lexists(source):
        return ErrorKind.NOT_FOUND
    return ErrorKind.MISSING_PARENT
