"""Startup: everything that must succeed before a command is dispatched."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from gpm.cli.commands import default_registry
from gpm.core.models import GpmConfig
from gpm.core.registry import CommandRegistry
from gpm.infra.config import load_config
from gpm.infra.paths import prepare_workspace, resolve_app_path, resolve_workspace_path
from gpm.infra.usage_text import load_locale

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Application:
    """Initialized state shared by every dispatch path."""

    registry: CommandRegistry
    usage_template: str
    config: GpmConfig
    app_path: Path


def initialize(
    app_path: Path | None = None,
    workspace: Path | None = None,
    registry: CommandRegistry | None = None,
) -> Application:
    """Resolve paths, load configuration and localized text.

    Raises
    ------
    InitializationError
        (or a subclass) when any asset is missing or malformed.
    """
    if app_path is None:
        app_path = resolve_app_path()
    if registry is None:
        registry = default_registry()

    config = load_config(app_path)
    bundle = load_locale(app_path, config.lang, registry.names())
    prepare_workspace(workspace if workspace is not None else resolve_workspace_path())

    logger.debug("initialized from %s", app_path)
    return Application(
        registry=registry.localized(bundle.texts),
        usage_template=bundle.usage_template,
        config=config,
        app_path=app_path,
    )
