"""gpm — Go package manager front-end.

Dispatches named subcommands and relays the Go toolchain's output live.
"""

from gpm.version import __version__

__all__: list[str] = ["__version__"]
