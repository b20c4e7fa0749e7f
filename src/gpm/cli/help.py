"""``gpm help`` and top-level usage rendering."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import TYPE_CHECKING, TextIO

from gpm.cli import exit_codes
from gpm.cli.console import console, escape
from gpm.core.lifecycle import Lifecycle
from gpm.core.models import Command
from gpm.core.templates import HELP_TEMPLATE, render

if TYPE_CHECKING:
    from gpm.cli.bootstrap import Application


def print_usage(app: Application, stream: TextIO) -> None:
    """Write the top-level command listing to *stream*."""
    text = render(app.usage_template, {"commands": app.registry.commands})
    stream.write(text)
    stream.flush()


def print_command_help(command: Command, stream: TextIO) -> None:
    stream.write(render(HELP_TEMPLATE, {"command": command}))
    stream.flush()


def run_help(app: Application, lifecycle: Lifecycle, args: Sequence[str]) -> None:
    """Implement ``gpm help [topic]``."""
    if not args:
        # Not a usage error: the user asked for it.
        print_usage(app, sys.stdout)
        return

    if len(args) != 1:
        console.print("usage: gpm help command\n\nToo many arguments given.")
        lifecycle.raise_status(exit_codes.USAGE_ERROR)
        return

    topic = args[0]
    command = app.registry.lookup(topic)
    if command is None:
        console.print(f"Unknown help topic `{escape(topic)}`.  Run 'gpm help'.")
        lifecycle.raise_status(exit_codes.USAGE_ERROR)
        return

    print_command_help(command, sys.stdout)
