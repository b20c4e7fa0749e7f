"""CLI application entry point and command dispatch for gpm.

This module is the **sole error boundary** for the entire application.
It catches :class:`~gpm.exceptions.GpmError`, ``KeyboardInterrupt`` and
any unexpected ``Exception``, renders a user-friendly message and folds
the outcome into the :class:`~gpm.core.lifecycle.Lifecycle` exit status.

Every path — success, usage error, unknown command, initialization
failure — ends in exactly one ``Lifecycle.finalize()`` (in-process
:func:`main`) or ``Lifecycle.shutdown()`` (console script :func:`cli`),
so registered cleanups always run once.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TYPE_CHECKING, NoReturn

from gpm.cli import exit_codes
from gpm.cli.console import console, escape, report_error
from gpm.core.lifecycle import Lifecycle
from gpm.core.models import CommandContext, RunnableCommand
from gpm.exceptions import GpmError, TemplateRenderError, UsageError
from gpm.logging_config import configure_logging, level_from_verbosity
from gpm.version import __version__

if TYPE_CHECKING:
    from gpm.cli.bootstrap import Application

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

class _ArgumentParser(argparse.ArgumentParser):
    """Parser that reports problems as :class:`UsageError` instead of exiting."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message, hint="Run 'gpm help' for usage.")


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Only global options are parsed here; everything after the command
    name is handed to the command untouched.
    """
    parser = _ArgumentParser(
        prog="gpm",
        description="Go package manager.",
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument(
        "-V",
        "--version",
        action="store_true",
        help="Print the gpm version and exit.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log progress to stderr (repeat for debug output).",
    )
    return parser


def _split_argv(argv: list[str]) -> tuple[list[str], str | None, list[str]]:
    """Split *argv* into global options, the command name and its arguments.

    The command is the first argument not starting with ``-``; the
    arguments after it are returned exactly as given.
    """
    for index, arg in enumerate(argv):
        if not arg.startswith("-"):
            return argv[:index], arg, argv[index + 1 :]
    return list(argv), None, []


def _flush_standard_streams() -> None:
    sys.stdout.flush()
    sys.stderr.flush()


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _dispatch(argv: list[str] | None, lifecycle: Lifecycle, app: Application | None) -> None:
    """Select a command from *argv* and run it."""
    if argv is None:
        argv = sys.argv[1:]
    global_args, name, args = _split_argv(list(argv))
    options = _build_parser().parse_args(global_args)
    configure_logging(level_from_verbosity(options.verbose))
    lifecycle.register_cleanup(_flush_standard_streams)

    if options.version:
        sys.stdout.write(f"gpm {__version__}\n")
        return

    if app is None:
        from gpm.cli.bootstrap import initialize

        app = initialize()

    from gpm.cli.help import print_usage, run_help

    if name is None:
        print_usage(app, sys.stderr)
        lifecycle.raise_status(exit_codes.USAGE_ERROR)
        return

    if name == "help":
        run_help(app, lifecycle, args)
        return

    command = app.registry.lookup(name)
    if not isinstance(command, RunnableCommand):
        console.print(
            f"gpm: unknown subcommand {escape(repr(name))}\n"
            "Run 'gpm help' for usage."
        )
        lifecycle.raise_status(exit_codes.USAGE_ERROR)
        return

    from gpm.infra.relay import SubprocessRelay

    ctx = CommandContext(
        lifecycle=lifecycle,
        relay=SubprocessRelay(report=report_error),
        config=app.config,
    )
    logger.debug("dispatching %s %s", name, args)
    command.run(ctx, args)


# ---------------------------------------------------------------------------
# Error boundary
# ---------------------------------------------------------------------------

def _run_guarded(argv: list[str] | None, lifecycle: Lifecycle, app: Application | None) -> None:
    """Run :func:`_dispatch`, converting every failure into an exit status."""
    try:
        _dispatch(argv, lifecycle, app)
    except UsageError as exc:
        report_error(exc)
        lifecycle.raise_status(exit_codes.USAGE_ERROR)
    except TemplateRenderError as exc:
        console.print(
            "[bold red]Internal error.[/bold red] "
            "Please report this issue.\n"
            f"  {escape(str(exc))}"
        )
        lifecycle.raise_status(exit_codes.UNEXPECTED_ERROR)
    except GpmError as exc:
        report_error(exc)
        lifecycle.raise_status(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        lifecycle.raise_status(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        logger.debug("unexpected error", exc_info=True)
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        lifecycle.raise_status(exit_codes.UNEXPECTED_ERROR)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    argv: list[str] | None = None,
    *,
    lifecycle: Lifecycle | None = None,
    app: Application | None = None,
) -> int:
    """Run the gpm CLI in-process.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.
    lifecycle:
        Coordinator to use; a fresh one is created when omitted.
    app:
        Pre-initialized application state.  When ``None`` it is loaded
        from the installation directory.

    Returns
    -------
    int
        OS process exit code, after all cleanups have run.
    """
    if lifecycle is None:
        lifecycle = Lifecycle()
    _run_guarded(argv, lifecycle, app)
    return lifecycle.finalize()


def cli() -> None:
    """Console-script entry point; never returns."""
    lifecycle = Lifecycle()
    _run_guarded(None, lifecycle, None)
    lifecycle.shutdown()
