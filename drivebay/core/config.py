"""DriveConfig — storage configuration dataclass.

This is the pure-data configuration for drivebay. No env vars, no dotenv,
no side effects at import time. The CLI layer (drivebay.config) reads the
environment and builds a DriveConfig from it.

Services embedding drivebay construct DriveConfig directly.
"""
from __future__ import annotations

import codecs
from dataclasses import dataclass, field
from typing import Any

BUILTIN_DRIVERS = {"local"}


class DriveConfigError(ValueError):
    """Raised when DriveConfig validation fails."""


@dataclass
class DriveConfig:
    """Disk configuration.

    ``disks`` maps a disk name to its settings::

        {"local": {"driver": "local", "root": "/srv/files"}}

    Local disk keys: driver, root, encoding, confine, chunk_size.
    """

    default: str = "local"
    disks: dict[str, dict[str, Any]] = field(default_factory=dict)

    @classmethod
    def for_root(cls, root: str, **options: Any) -> DriveConfig:
        """Single local disk rooted at ``root``."""
        return cls(default="local", disks={"local": {"driver": "local", "root": root, **options}})

    def validate(self, extra_drivers: set[str] | None = None) -> None:
        """Validate configuration. Raises DriveConfigError on problems.

        ``extra_drivers`` names custom drivers registered on a manager.
        """
        errors: list[str] = []

        if not self.default:
            errors.append("default disk name is required")
        elif self.default not in self.disks:
            errors.append(f"default disk '{self.default}' has no entry in disks")

        for name in self.disks:
            errors.extend(self.disk_errors(name, extra_drivers))

        if errors:
            raise DriveConfigError(
                f"DriveConfig validation failed ({len(errors)} error(s)):\n"
                + "\n".join(f"  - {e}" for e in errors)
            )

    def disk_errors(self, name: str, extra_drivers: set[str] | None = None) -> list[str]:
        """Return the problems with one disk entry (empty when it is usable)."""
        disk = self.disks.get(name)
        if disk is None:
            return [f"disk '{name}' has no entry in disks"]
        driver = disk.get("driver")
        if not driver:
            return [f"disk '{name}' requires 'driver'"]

        errors: list[str] = []
        known = BUILTIN_DRIVERS | (extra_drivers or set())
        if driver not in known:
            errors.append(
                f"disk '{name}': driver '{driver}' not recognized. "
                f"Valid: {', '.join(sorted(known))}"
            )
        if driver == "local":
            if not disk.get("root"):
                errors.append(f"local disk '{name}' requires 'root'")
            encoding = disk.get("encoding")
            if encoding is not None:
                try:
                    codecs.lookup(encoding)
                except LookupError:
                    errors.append(f"disk '{name}': unknown encoding '{encoding}'")
            chunk_size = disk.get("chunk_size")
            if chunk_size is not None and chunk_size <= 0:
                errors.append(f"disk '{name}': chunk_size must be positive")
        return errors
