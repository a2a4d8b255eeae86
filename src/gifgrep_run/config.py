"""The command the launcher delegates to.

The target is the gifgrep Go command, run from source the same way the
project's development script does (``go run ./cmd/gifgrep``). The
``./cmd/gifgrep`` path is resolved by ``go`` against the caller's working
directory.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Iterable

DEFAULT_PROGRAM: Final[str] = "go"
DEFAULT_PREFIX: Final[tuple[str, ...]] = ("run", "./cmd/gifgrep")


@dataclass(frozen=True, slots=True)
class TargetConfig:
    """A program plus the fixed arguments placed before forwarded ones."""

    program: str
    prefix: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.program:
            raise ValueError("Target requires a non-empty 'program'.")

    def command(self, args: Iterable[str] = ()) -> list[str]:
        """Return the argv for the child: program, prefix, then ``args``."""
        return [self.program, *self.prefix, *args]


DEFAULT_TARGET: Final[TargetConfig] = TargetConfig(DEFAULT_PROGRAM, DEFAULT_PREFIX)
