#!/usr/bin/env python3
"""
podproxy CLI - Main entry point.

Usage:
    podproxy [OPTIONS] COMMAND [ARGS]...

Query podman through its JSON output.
"""

import json
import logging
import os
from typing import Any, Optional

import typer
from rich.logging import RichHandler
from rich.table import Table

from .. import __version__
from ..errors import PodmanError
from .client import configure, get_config, get_proxy
from .decorators import require_podman
from .output import out


# Create the main Typer app
app = typer.Typer(
    name="podproxy",
    help="Query podman containers and images as JSON",
    add_completion=True,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        out.info(f"podproxy version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Log level passed to podman (panic, fatal, error, warning, info, debug, trace)",
    ),
    podman: Optional[str] = typer.Option(
        None,
        "--podman",
        help="podman executable to run (default: from config)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show the podman commands being run.",
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """
    podproxy - a thin wrapper around podman's JSON output.
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=out.err_console, show_path=False)],
        )

    try:
        configure(podman=podman, log_level=log_level)
    except (PodmanError, ValueError) as e:
        out.error(str(e))
        raise typer.Exit(1)


def _short_id(record: dict[str, Any]) -> str:
    value = record.get("Id") or record.get("ID") or ""
    return str(value)[:12]


def _names(value: Any) -> str:
    if isinstance(value, list):
        return ", ".join(str(v) for v in value)
    return str(value or "")


def _size(value: Any) -> str:
    if not isinstance(value, (int, float)):
        return str(value or "")
    size = float(value)
    for unit in ("B", "kB", "MB", "GB", "TB"):
        if size < 1000 or unit == "TB":
            return f"{size:.0f} {unit}" if unit == "B" else f"{size:.1f} {unit}"
        size /= 1000
    return str(value)


@app.command(
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True}
)
@require_podman
def ps(ctx: typer.Context) -> None:
    """List containers.

    Extra arguments are passed to podman ps:

        podproxy ps -a --filter name=web
    """
    containers = get_proxy().list_containers(*ctx.args)

    if not containers:
        out.dim("No containers found.")
        return

    table = Table(title="Containers")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Names", style="green")
    table.add_column("Image", style="yellow")
    table.add_column("State", style="magenta")

    for container in containers:
        table.add_row(
            _short_id(container),
            _names(container.get("Names")),
            str(container.get("Image", "")),
            str(container.get("State", "")),
        )

    out.console.print(table)


@app.command(
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True}
)
@require_podman
def images(ctx: typer.Context) -> None:
    """List images.

    Extra arguments are passed to podman images.
    """
    records = get_proxy().list_images(*ctx.args)

    if not records:
        out.dim("No images found.")
        return

    table = Table(title="Images")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Names", style="green")
    table.add_column("Size", style="yellow", justify="right")

    for image in records:
        table.add_row(
            _short_id(image),
            _names(image.get("Names")),
            _size(image.get("Size")),
        )

    out.console.print(table)


@app.command()
@require_podman
def version() -> None:
    """Show the podman client version."""
    out.info(get_proxy().get_version())


@app.command(name="check-version")
def check_version(
    required: str = typer.Argument(..., help="Minimum podman version, e.g. 4.0.0"),
) -> None:
    """Exit 0 if podman is at least REQUIRED, 1 otherwise."""
    if get_proxy().check_version(required):
        out.success(f"podman satisfies {required}")
        return

    out.error(f"podman is older than {required} or not available")
    raise typer.Exit(1)


@app.command()
@require_podman
def inspect(
    kind: str = typer.Argument(..., help="Object type: container or image"),
    target: str = typer.Argument(..., help="Name or ID to inspect"),
) -> None:
    """Inspect a container or image."""
    try:
        record = get_proxy().inspect(kind, target)
    except ValueError as e:
        out.error(str(e))
        raise typer.Exit(1)

    out.console.print_json(json.dumps(record))


@app.command()
@require_podman
def migrate(
    new_runtime: str = typer.Option(
        "",
        "--new-runtime",
        help="Switch every container to this OCI runtime",
    ),
) -> None:
    """Run podman system migrate."""
    get_proxy().system_migrate(new_runtime)
    out.success("Migration finished")


@app.command(name="config")
def config_cmd(
    key: Optional[str] = typer.Argument(
        None, help="Config key to display (podman, log_level)"
    ),
) -> None:
    """View podproxy configuration.

    Configuration is read from (highest to lowest priority):
      1. ~/.config/podproxy/podproxy.conf  (user)
      2. /etc/podproxy/podproxy.conf       (system)
      3. /usr/lib/podproxy/podproxy.conf   (package defaults)

    Command line options override the files.
    """
    config = get_config()
    values = {
        "podman": config.podman,
        "log_level": str(config.log_level),
    }

    if key is None:
        table = Table(show_header=True)
        table.add_column("Setting", style="cyan")
        table.add_column("Value", style="green")
        for name, value in values.items():
            table.add_row(name, value)
        out.console.print(table)
        return

    if key not in values:
        out.error(f"Unknown config key: {key}")
        out.hint(f"Valid keys: {', '.join(values)}")
        raise typer.Exit(1)

    out.info(f"{key} = {values[key]}")


def cli() -> None:
    """CLI entry point for setuptools."""
    prog_name = os.environ.get("PODPROXY_PROG_NAME", "podproxy")
    app(prog_name=prog_name)


if __name__ == "__main__":
    cli()
