"""TOML configuration loading for gpm.

Reads ``<app_path>/conf/gpm.toml`` into a :class:`~gpm.core.models.GpmConfig`.
Every failure mode is mapped to :class:`~gpm.exceptions.ConfigError`.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any

from gpm.core.models import GpmConfig
from gpm.exceptions import ConfigError

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

logger = logging.getLogger(__name__)

CONFIG_RELATIVE_PATH = Path("conf") / "gpm.toml"

# TOML key -> GpmConfig field
_KEY_MAP: dict[str, str] = {
    "title": "title",
    "version": "version",
    "username": "username",
    "password": "password",
    "user_language": "lang",
}


def config_path(app_path: Path) -> Path:
    return app_path / CONFIG_RELATIVE_PATH


def parse_config(data: dict[str, Any], *, source: str = "<config>") -> GpmConfig:
    """Build a :class:`GpmConfig` from already decoded TOML *data*.

    Unknown keys are ignored with a debug log line; known keys must hold
    strings.
    """
    values: dict[str, str] = {}
    for key, value in data.items():
        field_name = _KEY_MAP.get(key)
        if field_name is None:
            logger.debug("%s: ignoring unknown key %r", source, key)
            continue
        if not isinstance(value, str):
            raise ConfigError(
                f"{source}: '{key}' must be a string, got {type(value).__name__}.",
            )
        values[field_name] = value

    if "lang" in values and not values["lang"].strip():
        raise ConfigError(f"{source}: 'user_language' must not be empty.")
    return GpmConfig(**values)


def load_config(app_path: Path) -> GpmConfig:
    """Load ``conf/gpm.toml`` below *app_path*.

    Raises
    ------
    ConfigError
        If the file is missing, unreadable, not valid TOML or holds
        values of the wrong type.
    """
    path = config_path(app_path)
    try:
        with path.open("rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError as exc:
        raise ConfigError(
            f"Configuration file not found: {path}",
            hint="Set GPM_HOME to a directory containing conf/gpm.toml.",
        ) from exc
    except OSError as exc:
        raise ConfigError(f"Cannot read configuration file {path}: {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc

    config = parse_config(data, source=str(path))
    logger.debug("loaded config from %s (lang=%s)", path, config.lang)
    return config
