"""Installation and workspace directory resolution."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from gpm.exceptions import AppPathError, InitializationError

logger = logging.getLogger(__name__)

HOME_ENV: str = "GPM_HOME"
WORKSPACE_DIRS: tuple[str, ...] = ("bundles", "snapshots")


def resolve_app_path() -> Path:
    """Return the directory holding ``conf/`` and ``i18n/``.

    ``$GPM_HOME`` wins when set; otherwise the installed package
    directory, which ships default assets as package data.
    """
    override = os.environ.get(HOME_ENV)
    if override:
        path = Path(override).expanduser()
        if not path.is_dir():
            raise AppPathError(
                f"{HOME_ENV} does not point to a directory: {path}",
            )
        return path.resolve()
    return Path(__file__).resolve().parent.parent


def resolve_workspace_path() -> Path:
    """Return the root for gpm's working directories."""
    override = os.environ.get(HOME_ENV)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".gpm"


def prepare_workspace(root: Path) -> tuple[Path, ...]:
    """Create the bundle and snapshot directories below *root*."""
    created: list[Path] = []
    for name in WORKSPACE_DIRS:
        path = root / name
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise InitializationError(f"Cannot create {path}: {exc}") from exc
        created.append(path)
    logger.debug("workspace ready at %s", root)
    return tuple(created)
