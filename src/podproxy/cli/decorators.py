"""Decorators for CLI commands."""

import shutil
from functools import wraps
from typing import Callable, TypeVar

import typer

from ..errors import PodmanError
from .client import get_proxy
from .output import out

R = TypeVar("R")


def require_podman(func: Callable[..., R]) -> Callable[..., R]:
    """Decorator that checks podman is installed and handles PodmanError."""
    @wraps(func)
    def wrapper(*args: object, **kwargs: object) -> R:
        proxy = get_proxy()
        if shutil.which(proxy.executable) is None:
            out.error(f"{proxy.executable} is not available.")
            out.hint("Install podman or set [bold]podman = /path/to/podman[/bold] in podproxy.conf")
            raise typer.Exit(1)

        try:
            return func(*args, **kwargs)
        except PodmanError as e:
            out.error(str(e))
            raise typer.Exit(1)
    return wrapper
