# SPDX-FileCopyrightText: 2026 KDE Community
#
# SPDX-License-Identifier: GPL-3.0-or-later

"""Pytest configuration for podproxy integration tests.

These tests run the real podman binary and are skipped when it is not
installed.  Set PODPROXY_TEST_PODMAN to use a different executable.
"""

from __future__ import annotations

import os
import shutil

import pytest

from podproxy.podman import PodmanProxy

TEST_PODMAN = os.environ.get("PODPROXY_TEST_PODMAN", "podman")


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )


@pytest.fixture
def live_proxy() -> PodmanProxy:
    if shutil.which(TEST_PODMAN) is None:
        pytest.skip(f"{TEST_PODMAN} is not installed")
    return PodmanProxy(executable=TEST_PODMAN)
