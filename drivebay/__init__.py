"""drivebay — uniform async file operations over pluggable storage disks."""
from __future__ import annotations

__version__ = "0.1.0"
