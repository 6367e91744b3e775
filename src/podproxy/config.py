# SPDX-FileCopyrightText: 2026 KDE Community
#
# SPDX-License-Identifier: GPL-3.0-or-later

"""podproxy configuration.

Configuration is read from INI files, lowest to highest priority:

  1. /usr/lib/podproxy/podproxy.conf              (package defaults)
  2. /etc/podproxy/podproxy.conf                  (system)
  3. $XDG_CONFIG_HOME/podproxy/podproxy.conf      (user)

Each file may set any key of the ``[podproxy]`` section::

    [podproxy]
    podman = /usr/bin/podman
    log_level = warning
"""

from __future__ import annotations

import configparser
import logging
import os
from pathlib import Path

from pydantic import BaseModel, ValidationError, field_validator

from .errors import ConfigError
from .log_level import DEFAULT_LOG_LEVEL, LogLevel

logger = logging.getLogger(__name__)

CONFIG_SECTION = "podproxy"
CONFIG_FILENAME = "podproxy.conf"

PACKAGE_CONFIG_PATH = Path("/usr/lib/podproxy") / CONFIG_FILENAME
SYSTEM_CONFIG_PATH = Path("/etc/podproxy") / CONFIG_FILENAME


class ProxyConfig(BaseModel):
    """Effective podproxy settings."""

    podman: str = "podman"
    log_level: LogLevel = DEFAULT_LOG_LEVEL

    @field_validator("podman")
    @classmethod
    def _podman_not_empty(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("podman executable must not be empty")
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def _parse_log_level(cls, value: object) -> LogLevel:
        if isinstance(value, (LogLevel, str)):
            return LogLevel.parse(value)
        raise ValueError(f"invalid log level {value!r}")


def user_config_path() -> Path:
    """Path of the per-user config file."""
    config_home = os.environ.get("XDG_CONFIG_HOME") or os.path.expanduser("~/.config")
    return Path(config_home) / "podproxy" / CONFIG_FILENAME


def config_paths() -> list[Path]:
    """Config files in increasing priority order."""
    return [PACKAGE_CONFIG_PATH, SYSTEM_CONFIG_PATH, user_config_path()]


def load_config(paths: list[Path] | None = None) -> ProxyConfig:
    """Merge the config files and validate the result.

    Missing files are skipped.  Later files override earlier ones key by key.

    Raises:
        ConfigError: a file cannot be parsed or holds an invalid value.
    """
    if paths is None:
        paths = config_paths()

    values: dict[str, str] = {}
    for path in paths:
        if not path.is_file():
            continue
        parser = configparser.ConfigParser()
        try:
            parser.read(path)
        except configparser.Error as e:
            raise ConfigError(f"Failed to parse {path}: {e}") from e
        if parser.has_section(CONFIG_SECTION):
            logger.debug("Loaded config from %s", path)
            values.update(parser.items(CONFIG_SECTION))

    try:
        return ProxyConfig.model_validate(values)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e
