"""Shared pytest fixtures and configuration for the gpm test suite.

Guidelines
----------
* No internet access in any test.
* The Go toolchain is never required: the process relay is faked at the
  ``ProcessRelay`` boundary, and relay tests spawn ``sys.executable``.
* Filesystem writes go to ``tmp_path`` only (``GPM_HOME`` is redirected).
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from pathlib import Path

import pytest

import gpm
from gpm.cli.bootstrap import Application, initialize
from gpm.core.models import GpmConfig
from gpm.core.registry import CommandRegistry


class FakeRelay:
    """Records invocations and returns a canned exit code."""

    def __init__(self, returncode: int | None = 0) -> None:
        self.returncode = returncode
        self.calls: list[tuple[str, list[str]]] = []

    def run(self, name: str, args: Sequence[str]) -> int | None:
        self.calls.append((name, list(args)))
        return self.returncode


@pytest.fixture
def package_dir() -> Path:
    """Installed package directory holding the default ``conf`` and ``i18n``."""
    return Path(gpm.__file__).resolve().parent


@pytest.fixture(autouse=True)
def _isolated_home(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.delenv("GPM_HOME", raising=False)
    monkeypatch.delenv("GPM_LOG_LEVEL", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))


@pytest.fixture(autouse=True)
def _reset_gpm_logger() -> Iterator[None]:
    """Drop handlers bound to a previous test's captured stderr."""
    yield
    logger = logging.getLogger("gpm")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def app(package_dir: Path, tmp_path: Path) -> Application:
    """Application initialized from the packaged assets."""
    return initialize(app_path=package_dir, workspace=tmp_path / "workspace")


@pytest.fixture
def fake_relay() -> FakeRelay:
    return FakeRelay()


def make_app(registry: CommandRegistry, usage_template: str | None = None) -> Application:
    """Build an :class:`Application` around an arbitrary registry."""
    if usage_template is None:
        usage_template = "Commands:\n{% for c in commands %}  {{ c.name }}\n{% endfor %}"
    return Application(
        registry=registry,
        usage_template=usage_template,
        config=GpmConfig(),
        app_path=Path("."),
    )
