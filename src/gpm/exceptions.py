"""Custom exception hierarchy for gpm.

All exceptions that cross layer boundaries must inherit from
:class:`GpmError`.  Raw OS and third-party exceptions (``OSError``,
TOML decode errors, Jinja errors) must never propagate beyond the layer
that triggered them — they are caught and re-raised as a typed subclass
defined here.

Hierarchy
---------
GpmError
├── InitializationError
│   ├── AppPathError
│   ├── ConfigError
│   └── LocaleError
├── UsageError
├── SpawnError
├── TemplateRenderError
└── LifecycleError
"""

from __future__ import annotations


class GpmError(Exception):
    """Base exception for all gpm errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Startup ---------------------------------------------------------------

class InitializationError(GpmError):
    """Raised when gpm cannot be set up before dispatching a command."""


class AppPathError(InitializationError):
    """Raised when the installation directory cannot be resolved."""


class ConfigError(InitializationError):
    """Raised when ``gpm.toml`` is missing, unreadable or malformed."""


class LocaleError(InitializationError):
    """Raised when localized usage text is missing or malformed."""


# --- Dispatch --------------------------------------------------------------

class UsageError(GpmError):
    """Raised when the command line cannot be honoured as given."""


# --- External process ------------------------------------------------------

class SpawnError(GpmError):
    """Describes an external process that could not be started."""


# --- Rendering -------------------------------------------------------------

class TemplateRenderError(GpmError):
    """Raised when a usage/help template fails to compile or execute."""


# --- Process lifecycle -----------------------------------------------------

class LifecycleError(GpmError):
    """Raised on misuse of the lifecycle coordinator after shutdown began."""
