"""StorageDriver protocol — the operation set every disk driver exposes.

Implementations:
- LocalStorageDriver (always available)
- custom drivers registered through ``StorageManager.extend``

All paths are relative (e.g. "avatars/1.png"). The driver resolves them
against its own root (directory, bucket prefix, etc.). Every driver must
raise the errors from ``drivebay.core.storage.errors`` so callers can swap
backends without changing their error handling.
"""
from __future__ import annotations

from typing import Protocol, Union, runtime_checkable

Content = Union[bytes, str]


@runtime_checkable
class StorageDriver(Protocol):
    """Uniform file operations over a rooted storage location."""

    async def exists(self, path: str) -> bool:
        """Check if an entry exists. Never raises for "not found"."""
        ...

    async def get(self, path: str) -> bytes:
        """Read a file's content. Raises FileNotFound if missing."""
        ...

    async def put(self, target: str, content: Content) -> bool:
        """Write content to a file, creating a missing parent directory."""
        ...

    async def prepend(self, path: str, content: Content) -> bool:
        """Write content before the existing content (or create the file)."""
        ...

    async def append(self, path: str, content: Content) -> bool:
        """Append content to a file (creates if missing)."""
        ...

    async def delete(self, path: str) -> bool:
        """Delete a file. Errors propagate unchanged."""
        ...

    async def move(self, old_path: str, target: str) -> bool:
        """Move a file, creating a missing target parent directory."""
        ...

    async def copy(self, path: str, target: str) -> bool:
        """Copy a file. Returns once the copy is complete."""
        ...
