# SPDX-FileCopyrightText: 2026 KDE Community
#
# SPDX-License-Identifier: GPL-3.0-or-later

"""Wrappers around the podman command line.

Every call runs ``podman --log-level <level> <subcommand> --format json``,
decodes standard output and hands back plain ``dict``/``list`` values.
Nothing is cached and nothing is retried.

The functions at the bottom of this module operate on a shared default
:class:`PodmanProxy`; create your own instance to use a different
executable or log level.
"""

from __future__ import annotations

import json
import logging
import threading
from typing import Any

from .config import ProxyConfig, load_config
from .errors import DecodeError, EmptyResultError, PodmanError, ProcessError
from .log_level import DEFAULT_LOG_LEVEL, LogLevel
from .records import Record, get_mapping, get_str
from .shell import Invocation, Runner, run
from .version import compare, parse

logger = logging.getLogger(__name__)

INSPECT_TYPES = ("container", "image")


class PodmanProxy:
    """Runs podman and decodes its JSON output."""

    def __init__(
        self,
        executable: str = "podman",
        log_level: LogLevel | str = DEFAULT_LOG_LEVEL,
        runner: Runner = run,
    ):
        """Initialize the proxy.

        Args:
            executable: podman binary, looked up on PATH unless absolute.
            log_level: Initial value for ``--log-level``.
            runner: Function executing an Invocation, see :func:`podproxy.shell.run`.
        """
        self.executable = executable
        self._runner = runner
        self._lock = threading.Lock()
        self._log_level = LogLevel.parse(log_level)

    @classmethod
    def from_config(cls, config: ProxyConfig | None = None, runner: Runner = run) -> "PodmanProxy":
        """Build a proxy from the config files (or a given config)."""
        if config is None:
            config = load_config()
        return cls(executable=config.podman, log_level=config.log_level, runner=runner)

    # -------------------------------------------------------------------------
    # Log level
    # -------------------------------------------------------------------------

    def set_log_level(self, level: LogLevel | str) -> None:
        """Set the log level passed to subsequent podman invocations."""
        level = LogLevel.parse(level)
        with self._lock:
            self._log_level = level

    def get_log_level(self) -> LogLevel:
        with self._lock:
            return self._log_level

    # -------------------------------------------------------------------------
    # Plumbing
    # -------------------------------------------------------------------------

    def command(self, *args: str) -> Invocation:
        """Build the invocation for ``podman <args>`` with the current log level."""
        level = self.get_log_level()
        return Invocation(self.executable, ("--log-level", str(level), *args))

    def _run(self, *args: str, capture_stdout: bool = True) -> bytes:
        return self._runner(self.command(*args), capture_stdout=capture_stdout)

    def _run_json(self, *args: str) -> Any:
        output = self._run(*args)
        try:
            return json.loads(output)
        except ValueError as e:
            text = output.decode(errors="replace")
            raise DecodeError(f"podman {args[0]} returned invalid JSON: {e}", text) from e

    def _run_json_list(self, *args: str) -> list[Record]:
        data = self._run_json(*args)
        # Some podman releases print "null" instead of "[]" for no results
        if data is None:
            return []
        if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
            raise DecodeError(
                f"podman {args[0]} returned {type(data).__name__}, expected an array of objects",
                json.dumps(data),
            )
        return data

    def _exists(self, *args: str) -> bool:
        try:
            self._run(*args)
        except ProcessError as e:
            # "exists" subcommands report a miss with status 1
            if e.returncode == 1:
                return False
            raise
        return True

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------

    def list_containers(self, *args: str) -> list[Record]:
        """Wrap ``podman ps --format json``.

        Args:
            *args: Extra arguments for ``podman ps`` (e.g. ``"-a", "--filter", "id=123"``).

        Returns:
            One dict per container, exactly as podman printed it.
        """
        return self._run_json_list("ps", "--format", "json", *args)

    def list_images(self, *args: str) -> list[Record]:
        """Wrap ``podman images --format json``.

        Args:
            *args: Extra arguments for ``podman images``.

        Returns:
            One dict per image, exactly as podman printed it.
        """
        return self._run_json_list("images", "--format", "json", *args)

    def get_version(self) -> str:
        """Return the podman client version.

        Newer podman nests the version under ``Client``; older releases
        only have a top-level ``Version``.

        Raises:
            FieldError: the version is missing or not a string.
        """
        data = self._run_json("version", "--format", "json")
        if not isinstance(data, dict):
            raise DecodeError(
                f"podman version returned {type(data).__name__}, expected an object",
                json.dumps(data),
            )

        if data.get("Client") is not None:
            return get_str(get_mapping(data, "Client"), "Version")
        return get_str(data, "Version")

    def check_version(self, required_version: str) -> bool:
        """Return True if podman is at least *required_version*.

        If podman cannot be queried its version counts as lower than any
        requirement. An unrecognisable requirement is never met.
        """
        if required_version.strip():
            try:
                parse(required_version)
            except ValueError:
                logger.debug("Unrecognised version requirement %r", required_version)
                return False

        try:
            current = self.get_version()
        except PodmanError as e:
            logger.debug("Failed to get podman version: %s", e)
            current = ""

        return compare(current, required_version) >= 0

    def inspect(self, kind: str, target: str) -> Record:
        """Wrap ``podman inspect --type <kind> <target>``.

        Args:
            kind: ``"container"`` or ``"image"``.
            target: Name or ID of the object.

        Raises:
            EmptyResultError: podman returned no objects.
        """
        if kind not in INSPECT_TYPES:
            raise ValueError(f"Cannot inspect {kind!r}, expected one of {INSPECT_TYPES}")

        info = self._run_json_list("inspect", "--format", "json", "--type", kind, target)
        if not info:
            raise EmptyResultError(f"No {kind} matches '{target}'", target)
        return info[0]

    def system_migrate(self, new_runtime: str = "") -> None:
        """Wrap ``podman system migrate``.

        Args:
            new_runtime: If given, passed as ``--new-runtime`` to switch
                every container to that OCI runtime.
        """
        args = ["system", "migrate"]
        if new_runtime:
            args.extend(["--new-runtime", new_runtime])
        self._run(*args, capture_stdout=False)

    def container_exists(self, name: str) -> bool:
        """Wrap ``podman container exists``."""
        return self._exists("container", "exists", name)

    def image_exists(self, name: str) -> bool:
        """Wrap ``podman image exists``."""
        return self._exists("image", "exists", name)


# -----------------------------------------------------------------------------
# Module-level API backed by a shared proxy
# -----------------------------------------------------------------------------

_default_proxy = PodmanProxy()


def set_log_level(level: LogLevel | str) -> None:
    _default_proxy.set_log_level(level)


def get_log_level() -> LogLevel:
    return _default_proxy.get_log_level()


def list_containers(*args: str) -> list[Record]:
    return _default_proxy.list_containers(*args)


def list_images(*args: str) -> list[Record]:
    return _default_proxy.list_images(*args)


def get_version() -> str:
    return _default_proxy.get_version()


def check_version(required_version: str) -> bool:
    return _default_proxy.check_version(required_version)


def inspect(kind: str, target: str) -> Record:
    return _default_proxy.inspect(kind, target)


def system_migrate(new_runtime: str = "") -> None:
    _default_proxy.system_migrate(new_runtime)


def container_exists(name: str) -> bool:
    return _default_proxy.container_exists(name)


def image_exists(name: str) -> bool:
    return _default_proxy.image_exists(name)


__all__ = [
    "INSPECT_TYPES",
    "PodmanProxy",
    "check_version",
    "container_exists",
    "get_log_level",
    "get_version",
    "image_exists",
    "inspect",
    "list_containers",
    "list_images",
    "set_log_level",
    "system_migrate",
]
