"""Thin launcher that proxies to ``go run ./cmd/gifgrep`` and keeps its exit code."""

from __future__ import annotations

import logging
import subprocess
import sys
from typing import Final, Sequence

from .config import DEFAULT_TARGET, TargetConfig

logger: Final[logging.Logger] = logging.getLogger(__name__)

SEPARATOR: Final[str] = "--"
FALLBACK_STATUS: Final[int] = 1


def strip_separator(argv: Sequence[str]) -> list[str]:
    """Drop a single leading ``--``; any later separator is forwarded."""
    args = list(argv)
    if args and args[0] == SEPARATOR:
        return args[1:]
    return args


def exit_status(returncode: int | None) -> int:
    """Map a child's return code onto this process's exit status.

    Negative codes mean the child was killed by a signal; like a missing
    code they collapse to ``FALLBACK_STATUS``.
    """
    if returncode is None or returncode < 0:
        return FALLBACK_STATUS
    return returncode


def _wait(proc: subprocess.Popen) -> int:
    # Ctrl-C also reaches the child through the shared process group; the
    # wait only ends when the child does.
    while True:
        try:
            return proc.wait()
        except KeyboardInterrupt:
            logger.debug("Interrupted; still waiting for pid %s", proc.pid)


def launch(command: Sequence[str]) -> int:
    """Run ``command`` with inherited streams and wait for it to finish.

    ``command`` must hold at least the program to run.
    """
    argv = list(command)
    if not argv:
        raise ValueError("launch() requires a non-empty command")
    logger.debug("Launching %s", argv)
    try:
        proc = subprocess.Popen(argv)
    except OSError as exc:
        logger.debug("Unable to launch %s: %s", argv[0], exc)
        return FALLBACK_STATUS
    returncode = _wait(proc)
    logger.debug("%s exited with %s", argv[0], returncode)
    return exit_status(returncode)


def run(argv: Sequence[str], target: TargetConfig = DEFAULT_TARGET) -> int:
    """Forward ``argv`` to ``target`` and return the status to exit with."""
    return launch(target.command(strip_separator(argv)))


def main() -> int:
    return run(sys.argv[1:])


if __name__ == "__main__":
    raise SystemExit(main())
