# SPDX-FileCopyrightText: 2026 KDE Community
#
# SPDX-License-Identifier: GPL-3.0-or-later

import pytest

from podproxy.log_level import DEFAULT_LOG_LEVEL, LogLevel


def test_default_is_error():
    assert DEFAULT_LOG_LEVEL is LogLevel.ERROR
    assert str(DEFAULT_LOG_LEVEL) == "error"


@pytest.mark.parametrize("name,expected", [
    ("debug", LogLevel.DEBUG),
    ("DEBUG", LogLevel.DEBUG),
    ("warn", LogLevel.WARNING),
    ("Warning", LogLevel.WARNING),
    (LogLevel.PANIC, LogLevel.PANIC),
])
def test_parse(name, expected):
    assert LogLevel.parse(name) is expected


def test_parse_unknown():
    with pytest.raises(ValueError, match="expected one of"):
        LogLevel.parse("verbose")
