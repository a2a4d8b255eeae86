"""Tests for gifgrep_run.config."""

from __future__ import annotations

import dataclasses

import pytest

from gifgrep_run.config import DEFAULT_TARGET, TargetConfig


def test_default_target_runs_gifgrep_from_source() -> None:
    assert DEFAULT_TARGET.program == "go"
    assert DEFAULT_TARGET.prefix == ("run", "./cmd/gifgrep")
    assert DEFAULT_TARGET.command(["foo"]) == ["go", "run", "./cmd/gifgrep", "foo"]


def test_target_is_immutable() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_TARGET.program = "python"  # type: ignore[misc]


def test_command_does_not_share_state_between_calls() -> None:
    first = DEFAULT_TARGET.command(["a"])
    first.append("b")

    assert DEFAULT_TARGET.command(["a"]) == ["go", "run", "./cmd/gifgrep", "a"]


def test_prefix_is_optional() -> None:
    target = TargetConfig("gifgrep")

    assert target.command() == ["gifgrep"]
    assert target.command(["--help"]) == ["gifgrep", "--help"]


def test_target_requires_program() -> None:
    with pytest.raises(ValueError):
        TargetConfig("")
