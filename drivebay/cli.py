"""CLI entry point — Click group over the storage operations."""
from __future__ import annotations

import asyncio
import logging
from typing import Any

import click

from drivebay import ui
from drivebay.config import build_config
from drivebay.core.config import DriveConfigError
from drivebay.core.manager import StorageManager
from drivebay.core.storage.errors import StorageError

logger = logging.getLogger(__name__)


def _run(ctx: click.Context, operation: str, *args: Any) -> Any:
    """Run one storage operation on the selected disk, exiting 1 on failure."""
    manager: StorageManager = ctx.obj["manager"]
    try:
        driver = manager.disk(ctx.obj["disk"])
        return asyncio.run(getattr(driver, operation)(*args))
    except (StorageError, OSError, UnicodeError) as exc:
        ui.print_error(str(exc))
        raise SystemExit(1) from exc


def _read_content(content: str | None, file: Any) -> bytes | str:
    if file is not None:
        return file.read()
    if content is not None:
        return content
    return click.get_binary_stream("stdin").read()


@click.group()
@click.option("--root", default=None, help="Root directory (overrides DRIVEBAY_ROOT)")
@click.option("--disk", default=None, help="Disk name (overrides DRIVEBAY_DISK)")
@click.option("--debug", is_flag=True, help="Debug logging")
@click.pass_context
def main(ctx: click.Context, root: str | None, disk: str | None, debug: bool) -> None:
    """drivebay — file operations on a storage disk."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(name)s: %(message)s",
    )
    try:
        config = build_config(root=root, disk=disk)
    except DriveConfigError as exc:
        ui.print_error(str(exc))
        raise SystemExit(1) from exc
    logger.debug("Using disk %s", config.default)
    ctx.obj = {"manager": StorageManager(config), "disk": config.default}


@main.command()
@click.argument("path")
@click.pass_context
def exists(ctx: click.Context, path: str) -> None:
    """Print true if PATH exists, false otherwise."""
    click.echo("true" if _run(ctx, "exists", path) else "false")


@main.command()
@click.argument("path")
@click.pass_context
def get(ctx: click.Context, path: str) -> None:
    """Write the raw content of PATH to stdout."""
    data = _run(ctx, "get", path)
    stdout = click.get_binary_stream("stdout")
    stdout.write(data)
    stdout.flush()


@main.command()
@click.argument("target")
@click.argument("content", required=False)
@click.option("--file", "file", type=click.File("rb"), default=None, help="Read content from a file")
@click.pass_context
def put(ctx: click.Context, target: str, content: str | None, file: Any) -> None:
    """Write CONTENT (or --file, or stdin) to TARGET."""
    _run(ctx, "put", target, _read_content(content, file))
    ui.print_status(f"Wrote {target}")


@main.command()
@click.argument("path")
@click.argument("content")
@click.pass_context
def prepend(ctx: click.Context, path: str, content: str) -> None:
    """Insert CONTENT at the start of PATH."""
    _run(ctx, "prepend", path, content)
    ui.print_status(f"Prepended to {path}")


@main.command()
@click.argument("path")
@click.argument("content")
@click.pass_context
def append(ctx: click.Context, path: str, content: str) -> None:
    """Add CONTENT at the end of PATH."""
    _run(ctx, "append", path, content)
    ui.print_status(f"Appended to {path}")


@main.command()
@click.argument("path")
@click.pass_context
def delete(ctx: click.Context, path: str) -> None:
    """Delete PATH."""
    _run(ctx, "delete", path)
    ui.print_status(f"Deleted {path}", style="yellow")


@main.command()
@click.argument("old_path")
@click.argument("target")
@click.pass_context
def move(ctx: click.Context, old_path: str, target: str) -> None:
    """Move OLD_PATH to TARGET."""
    _run(ctx, "move", old_path, target)
    ui.print_status(f"Moved {old_path} -> {target}")


@main.command()
@click.argument("path")
@click.argument("target")
@click.pass_context
def copy(ctx: click.Context, path: str, target: str) -> None:
    """Copy PATH to TARGET."""
    _run(ctx, "copy", path, target)
    ui.print_status(f"Copied {path} -> {target}")
