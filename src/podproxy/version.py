# SPDX-FileCopyrightText: 2026 KDE Community
#
# SPDX-License-Identifier: GPL-3.0-or-later

"""Version string normalization and comparison.

Versions are read as up to four dot-separated numbers followed by an
optional stability tag::

    1.0            -> 1.0.0.0
    v2.5.1-dev     -> 2.5.1.0-dev
    3.0.0-rc2      -> 3.0.0.0-RC2
    1.9.3.beta     -> 1.9.3.0-beta
    4.9.4-rhel     -> 4.9.4.0

Stability orders ``dev < alpha < beta < RC < release < patch``.  Any other
suffix introduced by ``-`` or ``+`` is treated as build metadata and ignored.
"""

from __future__ import annotations

from dataclasses import dataclass
import enum
import re

_COMPONENTS = 4

_VERSION_RE = re.compile(
    r"""
    ^v?
    (?P<numbers>\d+(?:\.\d+){0,3})
    (?:
        [._-]?
        (?P<tag>dev|alpha|a|beta|b|rc|c|patch|pl|p|stable)
        [._-]?
        (?P<tag_number>\d+)?
    )?
    (?:[-+].*)?
    $
    """,
    re.IGNORECASE | re.VERBOSE,
)


class Stability(enum.IntEnum):
    DEV = 0
    ALPHA = 1
    BETA = 2
    RC = 3
    STABLE = 4
    PATCH = 5


_TAG_ALIASES = {
    "dev": Stability.DEV,
    "alpha": Stability.ALPHA,
    "a": Stability.ALPHA,
    "beta": Stability.BETA,
    "b": Stability.BETA,
    "rc": Stability.RC,
    "c": Stability.RC,
    "stable": Stability.STABLE,
    "patch": Stability.PATCH,
    "pl": Stability.PATCH,
    "p": Stability.PATCH,
}

_TAG_LABELS = {
    Stability.DEV: "dev",
    Stability.ALPHA: "alpha",
    Stability.BETA: "beta",
    Stability.RC: "RC",
    Stability.PATCH: "patch",
}


@dataclass(frozen=True, order=True)
class Version:
    """A parsed, comparable version."""

    release: tuple[int, ...]
    stability: Stability = Stability.STABLE
    tag_number: int = 0

    def __str__(self) -> str:
        text = ".".join(str(n) for n in self.release)
        label = _TAG_LABELS.get(self.stability)
        if label:
            text += f"-{label}"
            if self.tag_number:
                text += str(self.tag_number)
        return text


def parse(version: str) -> Version:
    """Parse *version* into a :class:`Version`.

    Raises:
        ValueError: if the string is not a recognisable version.
    """
    match = _VERSION_RE.match(version.strip())
    if match is None:
        raise ValueError(f"Invalid version string: {version!r}")

    numbers = [int(n) for n in match.group("numbers").split(".")]
    numbers += [0] * (_COMPONENTS - len(numbers))

    tag = match.group("tag")
    stability = _TAG_ALIASES[tag.lower()] if tag else Stability.STABLE
    # "stable" carries no meaningful number
    tag_number = int(match.group("tag_number") or 0) if stability is not Stability.STABLE else 0

    return Version(tuple(numbers), stability, tag_number)


def normalize(version: str) -> str:
    """Return the canonical spelling of *version*.

    An empty string normalizes to an empty string.

    Raises:
        ValueError: if the string is not a recognisable version.
    """
    if not version.strip():
        return ""
    return str(parse(version))


def _parse_or_none(version: str) -> Version | None:
    if not version.strip():
        return None
    try:
        return parse(version)
    except ValueError:
        return None


def compare(a: str, b: str) -> int:
    """Compare two version strings.

    Returns -1, 0 or 1 as *a* is lower than, equal to or higher than *b*.
    Empty or unparsable versions sort below every valid version and equal
    to each other.
    """
    left = _parse_or_none(a)
    right = _parse_or_none(b)

    if left is None or right is None:
        if left is None and right is None:
            return 0
        return -1 if left is None else 1

    if left < right:
        return -1
    if left > right:
        return 1
    return 0
