"""Allow ``python -m gpm`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m gpm`` behaves identically to the ``gpm`` console
script.
"""

from __future__ import annotations

from gpm.cli.app import cli

if __name__ == "__main__":
    cli()
