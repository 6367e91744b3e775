# SPDX-FileCopyrightText: 2026 KDE Community
#
# SPDX-License-Identifier: GPL-3.0-or-later

from __future__ import annotations

import pytest

from podproxy.version import Stability, Version, compare, normalize, parse


@pytest.mark.parametrize("raw,expected", [
    ("1.0", "1.0.0.0"),
    ("1.0.0", "1.0.0.0"),
    ("v2.5.1-dev", "2.5.1.0-dev"),
    ("3.0.0-rc2", "3.0.0.0-RC2"),
    ("3.0.0-RC", "3.0.0.0-RC"),
    ("1.9.3.beta", "1.9.3.0-beta"),
    ("2.0.0alpha1", "2.0.0.0-alpha1"),
    ("1.2.3-p4", "1.2.3.0-patch4"),
    ("1.2.3.4", "1.2.3.4"),
    ("4.9.4-rhel", "4.9.4.0"),
    ("5.0.0-dev+abc123", "5.0.0.0-dev"),
    ("  1.1 ", "1.1.0.0"),
    ("", ""),
])
def test_normalize(raw, expected):
    assert normalize(raw) == expected


@pytest.mark.parametrize("raw", ["abc", "1..0", "1.2.3.4.5", "version 1"])
def test_normalize_rejects_garbage(raw):
    with pytest.raises(ValueError):
        normalize(raw)


def test_parse():
    assert parse("2.1.0-rc3") == Version((2, 1, 0, 0), Stability.RC, 3)


@pytest.mark.parametrize("lower,higher", [
    ("1.0.0-dev", "1.0.0-alpha"),
    ("1.0.0-alpha", "1.0.0-beta"),
    ("1.0.0-beta", "1.0.0-rc1"),
    ("1.0.0-rc1", "1.0.0-rc2"),
    ("1.0.0-rc2", "1.0.0"),
    ("1.0.0", "1.0.0-patch1"),
    ("1.9.0", "1.10.0"),
    ("0.9.9", "1.0.0"),
    ("1.0.0", "1.0.0.1"),
    ("", "0.0.1"),
    ("not-a-version", "0.0.1"),
])
def test_compare_ordering(lower, higher):
    assert compare(lower, higher) == -1
    assert compare(higher, lower) == 1


@pytest.mark.parametrize("a,b", [
    ("1.0", "1.0.0"),
    ("v1.0.0", "1.0.0.0"),
    ("1.0.0-RC1", "1.0.0rc1"),
    ("1.0.0-pl", "1.0.0-patch"),
    ("4.9.4-rhel", "4.9.4"),
    ("", ""),
])
def test_compare_equal(a, b):
    assert compare(a, b) == 0


def test_stable_tag_number_ignored():
    assert normalize("1.0-stable3") == normalize("1.0") == "1.0.0.0"
    assert compare("1.0-stable3", "1.0") == 0
