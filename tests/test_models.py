"""Tests for command models (core/models.py).

Coverage:
* Name derivation from the usage line.
* Runnable vs. documentation-only commands.
* Immutability of command and config values.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Sequence

import pytest

from gpm.core.models import Command, CommandContext, GpmConfig, RunnableCommand, derive_name


class _Echo(RunnableCommand):
    def run(self, ctx: CommandContext, args: Sequence[str]) -> None:
        pass


# ---------------------------------------------------------------------------
# derive_name
# ---------------------------------------------------------------------------

class TestDeriveName:
    def test_first_word(self) -> None:
        assert derive_name("build [flags] <pkg>") == "build"

    def test_single_word(self) -> None:
        assert derive_name("foo") == "foo"

    def test_empty(self) -> None:
        assert derive_name("") == ""

    def test_idempotent(self) -> None:
        once = derive_name("install [-v] pkg")
        assert derive_name(once) == once

    def test_no_normalization(self) -> None:
        assert derive_name("Build x") == "Build"
        assert derive_name(" build") == ""


# ---------------------------------------------------------------------------
# Command
# ---------------------------------------------------------------------------

class TestCommand:
    def test_name_property(self) -> None:
        assert Command(usage_line="config topic").name == "config"

    def test_topic_is_not_runnable(self) -> None:
        assert Command(usage_line="config").runnable is False

    def test_runnable_subclass(self) -> None:
        assert _Echo(usage_line="echo [args]").runnable is True

    def test_base_run_not_implemented(self) -> None:
        cmd = RunnableCommand(usage_line="x")
        with pytest.raises(NotImplementedError):
            cmd.run(None, [])  # type: ignore[arg-type]

    def test_defaults(self) -> None:
        cmd = Command(usage_line="x")
        assert cmd.short == ""
        assert cmd.long == ""
        assert dict(cmd.flags) == {}

    def test_is_frozen(self) -> None:
        cmd = Command(usage_line="x")
        with pytest.raises(dataclasses.FrozenInstanceError):
            cmd.usage_line = "y"  # type: ignore[misc]

    def test_replace_keeps_subclass(self) -> None:
        cmd = _Echo(usage_line="echo", flags={"-n": False})
        replaced = dataclasses.replace(cmd, short="print arguments")
        assert isinstance(replaced, _Echo)
        assert replaced.short == "print arguments"
        assert replaced.flags == {"-n": False}


# ---------------------------------------------------------------------------
# GpmConfig
# ---------------------------------------------------------------------------

class TestGpmConfig:
    def test_default_language(self) -> None:
        assert GpmConfig().lang == "en-US"

    def test_is_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            GpmConfig().lang = "zh-CN"  # type: ignore[misc]
