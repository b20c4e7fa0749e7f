"""Core layer — command models, registry, lifecycle and templates.

Rules
-----
* No ``print()`` calls and no writes to the standard streams.
* No filesystem or subprocess I/O.
* No imports from ``cli`` or ``infra``.
"""

from gpm.core.lifecycle import Lifecycle, LifecycleState
from gpm.core.models import (
    Command,
    CommandContext,
    CommandText,
    GpmConfig,
    RunnableCommand,
    derive_name,
)
from gpm.core.protocols import ProcessRelay
from gpm.core.registry import CommandRegistry
from gpm.core.templates import HELP_TEMPLATE, TemplateEngine, capitalize, render, trim

__all__: list[str] = [
    "HELP_TEMPLATE",
    "Command",
    "CommandContext",
    "CommandRegistry",
    "CommandText",
    "GpmConfig",
    "Lifecycle",
    "LifecycleState",
    "ProcessRelay",
    "RunnableCommand",
    "TemplateEngine",
    "capitalize",
    "derive_name",
    "render",
    "trim",
]
