"""Localized usage text loading.

Layout below the installation directory::

    i18n/<lang>/usage.tpl            top-level usage template
    i18n/<lang>/usage_<name>.txt     "<short>|||<long>" for each command
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from gpm.core.models import CommandText
from gpm.exceptions import LocaleError

logger = logging.getLogger(__name__)

USAGE_DELIMITER: str = "|||"


@dataclass(frozen=True, slots=True)
class LocaleBundle:
    """Text assets for one language."""

    lang: str
    usage_template: str
    texts: dict[str, CommandText] = field(default_factory=dict)


def locale_dir(app_path: Path, lang: str) -> Path:
    return app_path / "i18n" / lang


def split_usage_text(name: str, blob: str) -> CommandText:
    """Split a command's text file into short and long descriptions.

    Raises
    ------
    LocaleError
        If *blob* does not contain the ``|||`` delimiter.
    """
    parts = blob.split(USAGE_DELIMITER)
    if len(parts) < 2:
        raise LocaleError(
            f"Unacceptable usage file for '{name}': "
            f"expected '<short>{USAGE_DELIMITER}<long>'.",
        )
    return CommandText(short=parts[0], long=parts[1])


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise LocaleError(f"Missing usage file: {path}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise LocaleError(f"Cannot read usage file {path}: {exc}") from exc


def load_locale(app_path: Path, lang: str, names: Iterable[str]) -> LocaleBundle:
    """Load the usage template and the text for every command in *names*."""
    directory = locale_dir(app_path, lang)
    if not directory.is_dir():
        raise LocaleError(
            f"No usage text for language '{lang}' (looked in {directory}).",
            hint="Check 'user_language' in conf/gpm.toml.",
        )

    usage_template = _read_text(directory / "usage.tpl")
    texts: dict[str, CommandText] = {}
    for name in names:
        texts[name] = split_usage_text(name, _read_text(directory / f"usage_{name}.txt"))

    logger.debug("loaded %d command text(s) for %s", len(texts), lang)
    return LocaleBundle(lang=lang, usage_template=usage_template, texts=texts)
