"""Configuration — loads .env and builds the DriveConfig used by the CLI."""
from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

from drivebay.core.config import DriveConfig

# Project-local .env first; variables already set in the environment win.
load_dotenv(Path.cwd() / ".env")

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value.strip().lower() in _TRUTHY


def build_config(root: str | None = None, disk: str | None = None) -> DriveConfig:
    """Build a validated DriveConfig from the environment.

    Explicit ``root``/``disk`` arguments (CLI options) override the
    ``DRIVEBAY_*`` variables.
    """
    disk_name = disk or os.getenv("DRIVEBAY_DISK", "local")
    config = DriveConfig(
        default=disk_name,
        disks={
            disk_name: {
                "driver": "local",
                "root": root or os.getenv("DRIVEBAY_ROOT", "./storage"),
                "encoding": os.getenv("DRIVEBAY_ENCODING", "utf-8"),
                "confine": _env_flag("DRIVEBAY_CONFINE", True),
            }
        },
    )
    config.validate()
    return config
