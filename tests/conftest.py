# SPDX-FileCopyrightText: 2026 KDE Community
#
# SPDX-License-Identifier: GPL-3.0-or-later

"""Shared fixtures for podproxy tests."""

from __future__ import annotations

import json
from typing import Any

import pytest

from podproxy.errors import ProcessError
from podproxy.podman import PodmanProxy
from podproxy.shell import Invocation


class FakeRunner:
    """Stands in for podproxy.shell.run and records every invocation."""

    def __init__(self) -> None:
        self.calls: list[Invocation] = []
        self.capture: list[bool] = []
        self._results: list[bytes | Exception] = []

    def returns(self, stdout: bytes | str | Any = b"") -> "FakeRunner":
        if isinstance(stdout, str):
            stdout = stdout.encode()
        elif not isinstance(stdout, bytes):
            stdout = json.dumps(stdout).encode()
        self._results.append(stdout)
        return self

    def fails(self, returncode: int | None = 125, stderr: str = "boom") -> "FakeRunner":
        self._results.append(
            ProcessError(f"podman exited with status {returncode}", returncode=returncode, stderr=stderr)
        )
        return self

    def __call__(self, invocation: Invocation, capture_stdout: bool = True) -> bytes:
        self.calls.append(invocation)
        self.capture.append(capture_stdout)
        result = self._results.pop(0) if self._results else b""
        if isinstance(result, Exception):
            result.argv = invocation.argv
            raise result
        return result

    @property
    def argv(self) -> list[str]:
        """argv of the most recent call."""
        return self.calls[-1].argv


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def proxy(fake_runner: FakeRunner) -> PodmanProxy:
    return PodmanProxy(runner=fake_runner)
