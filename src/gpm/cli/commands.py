"""Built-in commands and help topics.

The order of :func:`default_commands` is the order in which
``gpm help`` lists them.  Command text is replaced at startup by the
localized descriptions from ``i18n/<lang>/usage_<name>.txt``.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from gpm.cli import exit_codes
from gpm.cli.console import console, escape
from gpm.core.models import Command, CommandContext, RunnableCommand
from gpm.core.registry import CommandRegistry
from gpm.exceptions import UsageError
from gpm.infra.toolchain import detect_toolchain

logger = logging.getLogger(__name__)

GO: str = "go"


def parse_flags(command: Command, args: Sequence[str]) -> tuple[dict[str, bool], list[str]]:
    """Switch on the registered flags found at the front of *args*.

    Returns the resulting flag states and the remaining arguments.
    Parsing stops at the first argument that does not start with ``-``,
    or at ``--``, which is left in the remaining arguments.

    Raises
    ------
    UsageError
        For a leading flag the command does not register.
    """
    flags = dict(command.flags)
    rest = list(args)
    while rest and rest[0].startswith("-") and rest[0] != "--":
        arg = rest.pop(0)
        if arg not in flags:
            raise UsageError(
                f"Unknown flag {arg!r} for '{command.name}'.",
                hint=f"Run 'gpm help {command.name}' for usage.",
            )
        flags[arg] = True
    return flags, rest


def run_go(ctx: CommandContext, go_args: Sequence[str]) -> int | None:
    """Relay ``go <go_args>`` and fold its outcome into the exit status."""
    code = ctx.relay.run(GO, go_args)

    if code is None:
        status = detect_toolchain(GO)
        if not status.found and status.install_commands:
            console.print("[yellow]The Go toolchain is not installed.[/yellow]")
            console.print("Install it using one of the following commands:\n")
            for cmd in status.install_commands:
                console.print(f"  [bold]{escape(cmd)}[/bold]")
        ctx.lifecycle.raise_status(exit_codes.GENERAL_ERROR)
    elif code > 0:
        ctx.lifecycle.raise_status(code)
    elif code < 0:
        # Terminated by a signal.
        ctx.lifecycle.raise_status(exit_codes.GENERAL_ERROR)
    return code


class GoToolCommand(RunnableCommand):
    """Run the ``go`` subcommand of the same name with the given flags."""

    def run(self, ctx: CommandContext, args: Sequence[str]) -> None:
        flags, rest = parse_flags(self, args)
        go_args = [self.name]
        go_args.extend(flag for flag, enabled in flags.items() if enabled)
        go_args.extend(rest)
        logger.info("running go %s", " ".join(go_args))
        run_go(ctx, go_args)


def default_commands() -> list[Command]:
    return [
        GoToolCommand(
            usage_line="build [-v] [-x] [packages]",
            short="compile packages and dependencies",
            flags={"-v": False, "-x": False},
        ),
        GoToolCommand(
            usage_line="install [-v] [-x] [packages]",
            short="compile and install packages and dependencies",
            flags={"-v": False, "-x": False},
        ),
        Command(
            usage_line="config",
            short="configuration file",
        ),
    ]


def default_registry() -> CommandRegistry:
    return CommandRegistry(default_commands())
