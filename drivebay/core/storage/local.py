"""Local filesystem storage driver.

Maps relative paths to a root directory on the local filesystem.
Always available (no extra dependencies).

Blocking filesystem calls run in a worker thread via asyncio.to_thread(),
so concurrent operations on the same event loop do not stall each other.
"""
from __future__ import annotations

import asyncio
import logging
import os
import shutil
from functools import partial
from pathlib import Path
from typing import Any, Callable

from drivebay.core.storage.base import Content
from drivebay.core.storage.errors import (
    ErrorKind,
    FileNotFound,
    InvalidConfig,
    PathTraversal,
    classify_error,
)

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 64 * 1024


class LocalStorageDriver:
    """Local filesystem storage driver.

    Args:
        root: Base directory. All paths are resolved relative to this.
        encoding: Encoding applied to ``str`` content before writing.
        confine: Reject paths that resolve outside ``root``.
        chunk_size: Buffer size used by ``copy``.
    """

    def __init__(
        self,
        root: str | os.PathLike[str],
        encoding: str = "utf-8",
        confine: bool = True,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ) -> None:
        self.root = os.fspath(root)
        self.encoding = encoding
        self.confine = confine
        self.chunk_size = chunk_size

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> LocalStorageDriver:
        """Build a driver from a disk config dict (``root`` is required)."""
        if not config.get("root"):
            raise InvalidConfig("Make sure to define root for local disk")
        return cls(
            root=config["root"],
            encoding=config.get("encoding", "utf-8"),
            confine=config.get("confine", True),
            chunk_size=config.get("chunk_size", DEFAULT_CHUNK_SIZE),
        )

    def _full_path(self, relative_path: str) -> str:
        """Join a relative path onto root.

        Leading separators are dropped so "/a.txt" lands under root
        instead of replacing it.
        """
        separators = os.sep + (os.altsep or "")
        full = os.path.join(self.root, relative_path.lstrip(separators))
        if self.confine:
            # Lexical check only: no symlink resolution, no filesystem access.
            root = os.path.abspath(self.root)
            resolved = os.path.abspath(full)
            if resolved != root and not resolved.startswith(root.rstrip(os.sep) + os.sep):
                raise PathTraversal(relative_path, self.root)
        return full

    def _encode(self, content: Content) -> bytes:
        if isinstance(content, str):
            return content.encode(self.encoding)
        return bytes(content)

    # --- Sync implementations (run in thread pool) ---

    @staticmethod
    def _write_sync(full: str, data: bytes) -> bool:
        Path(full).write_bytes(data)
        return True

    @staticmethod
    def _append_sync(full: str, data: bytes) -> bool:
        with open(full, "ab") as f:
            f.write(data)
        return True

    @staticmethod
    def _rename_sync(source: str, target: str) -> bool:
        os.rename(source, target)
        return True

    def _copy_sync(self, source: str, target: str) -> bool:
        # Opening the target truncates it, which would empty a self-copy.
        if os.path.exists(target) and os.path.samefile(source, target):
            raise shutil.SameFileError(f"{source!r} and {target!r} are the same file")
        with open(source, "rb") as reader, open(target, "wb") as writer:
            shutil.copyfileobj(reader, writer, self.chunk_size)
        return True

    @staticmethod
    def _make_directory_sync(path: str) -> None:
        try:
            os.mkdir(path)
        except FileExistsError:
            # Another operation created it between our failure and now.
            if not os.path.isdir(path):
                raise

    async def _with_parent_recovery(
        self,
        target: str,
        operation: Callable[[], bool],
        source: str | None = None,
    ) -> bool:
        """Run ``operation``; on a missing parent, mkdir once and retry once.

        The parent may already exist by the time the mkdir runs when a
        concurrent operation created it; the retry still happens. The
        retry's own result (or error) is returned, not the original error.
        """
        try:
            return await asyncio.to_thread(operation)
        except OSError as e:
            kind = await asyncio.to_thread(classify_error, e, target, source)
            if kind is not ErrorKind.MISSING_PARENT:
                raise

        parent = os.path.dirname(target)
        logger.debug("Creating missing directory %s for %s", parent, target)
        await asyncio.to_thread(self._make_directory_sync, parent)
        return await asyncio.to_thread(operation)

    # --- Async API ---

    async def exists(self, path: str) -> bool:
        """Check if a file or directory exists."""
        try:
            await asyncio.to_thread(os.stat, self._full_path(path))
            return True
        except OSError as e:
            if classify_error(e) is ErrorKind.NOT_FOUND:
                return False
            raise

    async def get(self, path: str) -> bytes:
        """Read a file's raw content."""
        full = self._full_path(path)
        try:
            return await asyncio.to_thread(Path(full).read_bytes)
        except OSError as e:
            if classify_error(e) is ErrorKind.NOT_FOUND:
                raise FileNotFound.file(path) from e
            raise

    async def put(self, target: str, content: Content) -> bool:
        """Write content to a file, truncating or creating it."""
        full = self._full_path(target)
        data = self._encode(content)
        return await self._with_parent_recovery(full, partial(self._write_sync, full, data))

    async def prepend(self, path: str, content: Content) -> bool:
        """Write content before the file's current content."""
        if await self.exists(path):
            existing = await self.get(path)
            return await self.put(path, self._encode(content) + existing)
        return await self.put(path, content)

    async def append(self, path: str, content: Content) -> bool:
        """Append content to a file. A missing parent directory is not created."""
        full = self._full_path(path)
        return await asyncio.to_thread(self._append_sync, full, self._encode(content))

    async def delete(self, path: str) -> bool:
        """Delete a file. A missing file raises the underlying OS error."""
        await asyncio.to_thread(os.unlink, self._full_path(path))
        return True

    async def move(self, old_path: str, target: str) -> bool:
        """Move a file to a new location."""
        source = self._full_path(old_path)
        full = self._full_path(target)
        return await self._with_parent_recovery(
            full, partial(self._rename_sync, source, full), source=source
        )

    async def copy(self, path: str, target: str) -> bool:
        """Copy a file. Returns only after the whole content is written."""
        source = self._full_path(path)
        full = self._full_path(target)
        return await asyncio.to_thread(self._copy_sync, source, full)

    def __repr__(self) -> str:
        return f"LocalStorageDriver(root={self.root!r})"
