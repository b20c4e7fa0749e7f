"""Smoke tests — verify package wiring.

These tests prove that:
* The CLI entry point is importable and callable.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined.
"""

from __future__ import annotations

import pytest

from gpm import __version__
from gpm.cli import exit_codes
from gpm.cli.app import cli, main
from gpm.exceptions import (
    AppPathError,
    ConfigError,
    GpmError,
    InitializationError,
    LifecycleError,
    LocaleError,
    SpawnError,
    TemplateRenderError,
    UsageError,
)


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_string(self) -> None:
        assert isinstance(__version__, str)

    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [
            InitializationError,
            UsageError,
            SpawnError,
            TemplateRenderError,
            LifecycleError,
        ],
    )
    def test_all_exceptions_inherit_from_base(self, exc_class: type[GpmError]) -> None:
        assert issubclass(exc_class, GpmError)

    @pytest.mark.parametrize("exc_class", [AppPathError, ConfigError, LocaleError])
    def test_startup_errors_are_initialization_errors(
        self, exc_class: type[GpmError]
    ) -> None:
        assert issubclass(exc_class, InitializationError)

    def test_hint_is_stored(self) -> None:
        err = GpmError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        assert GpmError("boom").hint is None


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_success_is_zero(self) -> None:
        assert exit_codes.SUCCESS == 0

    def test_general_error_is_one(self) -> None:
        assert exit_codes.GENERAL_ERROR == 1

    def test_usage_error_is_two(self) -> None:
        assert exit_codes.USAGE_ERROR == 2

    def test_keyboard_interrupt_is_130(self) -> None:
        assert exit_codes.KEYBOARD_INTERRUPT == 130


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------

class TestEntryPoints:
    def test_version_flag(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--version"]) == exit_codes.SUCCESS
        assert capsys.readouterr().out == f"gpm {__version__}\n"

    def test_cli_exits_through_system_exit(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setattr("sys.argv", ["gpm", "-V"])
        with pytest.raises(SystemExit) as exc_info:
            cli()
        assert exc_info.value.code == exit_codes.SUCCESS
