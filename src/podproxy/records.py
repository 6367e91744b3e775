# SPDX-FileCopyrightText: 2026 KDE Community
#
# SPDX-License-Identifier: GPL-3.0-or-later

"""Checked access to fields of decoded podman JSON records.

Records are left as the plain ``dict`` objects produced by :mod:`json`.
These helpers walk a key path and raise :class:`FieldError` instead of
``KeyError``/``TypeError`` when the record does not look as expected.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .errors import FieldError

Record = dict[str, Any]


def get_field(record: Mapping[str, Any], *path: str) -> Any:
    """Return the value at *path* inside *record*.

    Raises:
        FieldError: if a key is missing or an intermediate value is not a mapping.
    """
    if not path:
        raise ValueError("get_field() needs at least one key")

    value: Any = record
    for depth, key in enumerate(path):
        if not isinstance(value, Mapping):
            parent = ".".join(path[:depth])
            raise FieldError(f"Field '{parent}' is not an object", ".".join(path))
        if key not in value:
            dotted = ".".join(path[: depth + 1])
            raise FieldError(f"Field '{dotted}' is missing", ".".join(path))
        value = value[key]
    return value


def get_str(record: Mapping[str, Any], *path: str) -> str:
    """Return the string at *path*, or raise :class:`FieldError`."""
    value = get_field(record, *path)
    if not isinstance(value, str):
        dotted = ".".join(path)
        raise FieldError(
            f"Field '{dotted}' is {type(value).__name__}, expected string", dotted,
        )
    return value


def get_mapping(record: Mapping[str, Any], *path: str) -> Record:
    """Return the object at *path*, or raise :class:`FieldError`."""
    value = get_field(record, *path)
    if not isinstance(value, dict):
        dotted = ".".join(path)
        raise FieldError(
            f"Field '{dotted}' is {type(value).__name__}, expected object", dotted,
        )
    return value
