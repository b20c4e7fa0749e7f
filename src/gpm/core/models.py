"""Domain models for gpm.

Commands and configuration are **frozen** dataclasses — immutable
values built once at startup.  Localizing a command produces a new
value rather than mutating the registered one.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gpm.core.lifecycle import Lifecycle
    from gpm.core.protocols import ProcessRelay


def derive_name(usage_line: str) -> str:
    """Return the command name: the text before the first space.

    >>> derive_name("build [flags] <pkg>")
    'build'
    >>> derive_name("foo")
    'foo'
    """
    name, _, _ = usage_line.partition(" ")
    return name


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Command:
    """A registered command or help topic.

    A plain :class:`Command` is documentation only (``gpm help <name>``
    renders it, but it cannot be run).  Runnable commands subclass
    :class:`RunnableCommand`.
    """

    usage_line: str
    """One-line usage; its first word is the command name."""

    short: str = ""
    """Short description shown in the ``gpm help`` listing."""

    long: str = ""
    """Long description shown by ``gpm help <name>``."""

    flags: Mapping[str, bool] = field(default_factory=dict)
    """Command-specific flags and their default state."""

    @property
    def name(self) -> str:
        return derive_name(self.usage_line)

    @property
    def runnable(self) -> bool:
        """Whether the command can be executed (vs. a help topic)."""
        return False


class RunnableCommand(Command):
    """A command with an executable handler."""

    @property
    def runnable(self) -> bool:
        return True

    def run(self, ctx: CommandContext, args: Sequence[str]) -> None:
        """Execute the command with the arguments following its name.

        Failures are reported by raising the exit status on
        ``ctx.lifecycle`` or by raising a :class:`~gpm.exceptions.GpmError`.
        """
        raise NotImplementedError


# ---------------------------------------------------------------------------
# Localized command text
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CommandText:
    """Short and long descriptions loaded for one command."""

    short: str
    long: str


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class GpmConfig:
    """Settings read from ``conf/gpm.toml``."""

    title: str = "gpm"
    version: str = ""
    username: str = ""
    password: str = ""
    lang: str = "en-US"
    """Locale directory name under ``i18n/`` (TOML key ``user_language``)."""


# ---------------------------------------------------------------------------
# Per-dispatch context
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CommandContext:
    """Collaborators handed to a running command."""

    lifecycle: Lifecycle
    relay: ProcessRelay
    config: GpmConfig
