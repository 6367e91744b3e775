# SPDX-FileCopyrightText: 2026 KDE Community
#
# SPDX-License-Identifier: GPL-3.0-or-later

"""podproxy - run podman and decode its JSON output."""

from .errors import (
    ConfigError,
    DecodeError,
    EmptyResultError,
    FieldError,
    PodmanError,
    ProcessError,
)
from .log_level import LogLevel
from .podman import (
    PodmanProxy,
    check_version,
    container_exists,
    get_log_level,
    get_version,
    image_exists,
    inspect,
    list_containers,
    list_images,
    set_log_level,
    system_migrate,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "DecodeError",
    "EmptyResultError",
    "FieldError",
    "LogLevel",
    "PodmanError",
    "PodmanProxy",
    "ProcessError",
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
