# SPDX-FileCopyrightText: 2026 KDE Community
#
# SPDX-License-Identifier: GPL-3.0-or-later

"""Exceptions raised by podproxy."""

from __future__ import annotations

from collections.abc import Sequence


class PodmanError(Exception):
    """Base class for every error raised while talking to podman."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ProcessError(PodmanError):
    """podman could not be launched or exited with a non-zero status."""

    def __init__(
        self,
        message: str,
        argv: Sequence[str] = (),
        returncode: int | None = None,
        stderr: str = "",
    ):
        super().__init__(message)
        self.argv = list(argv)
        self.returncode = returncode
        self.stderr = stderr


class DecodeError(PodmanError):
    """podman output was not JSON, or not the JSON shape we expected."""

    def __init__(self, message: str, output: str = ""):
        super().__init__(message)
        self.output = output


class FieldError(PodmanError):
    """A field in a decoded record is missing or has the wrong type."""

    def __init__(self, message: str, path: str = ""):
        super().__init__(message)
        self.path = path


class EmptyResultError(PodmanError, IndexError):
    """podman inspect matched nothing."""

    def __init__(self, message: str, target: str = ""):
        super().__init__(message)
        self.target = target


class ConfigError(PodmanError):
    """The podproxy configuration files hold an invalid value."""
