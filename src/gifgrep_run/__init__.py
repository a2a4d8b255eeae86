"""Delegating launcher for the gifgrep Go command."""

from __future__ import annotations

from .config import DEFAULT_TARGET, TargetConfig
from .launcher import FALLBACK_STATUS, SEPARATOR, exit_status, launch, main, run, strip_separator

__all__ = [
    "DEFAULT_TARGET",
    "FALLBACK_STATUS",
    "SEPARATOR",
    "TargetConfig",
    "exit_status",
    "launch",
    "main",
    "run",
    "strip_separator",
]
