"""Infrastructure layer — external system integration.

This layer wraps all interaction with the operating system: child
processes, configuration and text files, and PATH lookups.  Every raw
OS or parser exception is caught here and re-raised as a
:class:`~gpm.exceptions.GpmError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from gpm.infra.config import load_config
from gpm.infra.usage_text import LocaleBundle, load_locale
from gpm.infra.paths import prepare_workspace, resolve_app_path, resolve_workspace_path
from gpm.infra.relay import SubprocessRelay
from gpm.infra.toolchain import ToolchainStatus, detect_toolchain

__all__: list[str] = [
    "LocaleBundle",
    "SubprocessRelay",
    "ToolchainStatus",
    "detect_toolchain",
    "load_config",
    "load_locale",
    "prepare_workspace",
    "resolve_app_path",
    "resolve_workspace_path",
]
