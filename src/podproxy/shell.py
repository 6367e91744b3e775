# SPDX-FileCopyrightText: 2026 KDE Community
#
# SPDX-License-Identifier: GPL-3.0-or-later

"""Run an external program and collect its output."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import subprocess
from typing import Callable

from .errors import ProcessError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Invocation:
    """One run of an external program."""

    program: str
    args: tuple[str, ...] = ()

    @property
    def argv(self) -> list[str]:
        return [self.program, *self.args]

    def __str__(self) -> str:
        return " ".join(self.argv)


Runner = Callable[..., bytes]


def run(invocation: Invocation, capture_stdout: bool = True) -> bytes:
    """Run *invocation* to completion.

    Args:
        invocation: Program and arguments to run.
        capture_stdout: If False, stdout is inherited from the caller and
            an empty bytes object is returned.

    Returns:
        The captured standard output.

    Raises:
        ProcessError: The program could not be started or exited non-zero.
    """
    argv = invocation.argv
    logger.debug("Running %s", invocation)

    try:
        result = subprocess.run(
            argv,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE if capture_stdout else None,
            stderr=subprocess.PIPE,
        )
    except OSError as e:
        logger.debug("Failed to start %s: %s", invocation.program, e)
        raise ProcessError(
            f"Failed to run {invocation.program}: {e}", argv=argv,
        ) from e

    stderr = (result.stderr or b"").decode(errors="replace").strip()
    if result.returncode != 0:
        logger.debug("%s exited with status %d: %s", invocation, result.returncode, stderr)
        message = f"{invocation.program} exited with status {result.returncode}"
        if stderr:
            message += f": {stderr}"
        raise ProcessError(
            message, argv=argv, returncode=result.returncode, stderr=stderr,
        )

    return result.stdout or b""
