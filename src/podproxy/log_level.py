# SPDX-FileCopyrightText: 2026 KDE Community
#
# SPDX-License-Identifier: GPL-3.0-or-later

"""Severity levels accepted by ``podman --log-level``."""

from __future__ import annotations

import enum


class LogLevel(enum.Enum):
    """podman log levels, most to least severe."""

    PANIC = "panic"
    FATAL = "fatal"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"
    DEBUG = "debug"
    TRACE = "trace"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: "LogLevel | str") -> "LogLevel":
        """Turn a level or its name into a LogLevel.

        Matching is case-insensitive and ``warn`` is accepted as an alias
        for ``warning``.

        Raises:
            ValueError: if the name is not a known level.
        """
        if isinstance(value, cls):
            return value
        name = str(value).strip().lower()
        if name == "warn":
            name = "warning"
        try:
            return cls(name)
        except ValueError:
            valid = ", ".join(level.value for level in cls)
            raise ValueError(f"Unknown log level {value!r} (expected one of: {valid})") from None


DEFAULT_LOG_LEVEL = LogLevel.ERROR
