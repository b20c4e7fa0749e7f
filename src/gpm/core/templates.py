"""Usage and help rendering on top of Jinja2.

Templates see two helper filters (also available as functions):

* ``trim`` — strip leading and trailing whitespace.
* ``capitalize`` — title-case the first character only, leaving the
  rest of the string untouched (unlike Jinja's built-in filter, which
  lower-cases the remainder).

Rendering happens fully in memory; callers write the finished text, so
a failing template never emits partial output.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from jinja2 import Environment, StrictUndefined, TemplateError

from gpm.exceptions import TemplateRenderError

HELP_TEMPLATE: str = """\
{% if command.runnable %}usage: gpm {{ command.usage_line }}

{% endif %}{{ command.long | trim }}
"""
"""Per-command help: the invocation line is omitted for help topics."""


def trim(s: str) -> str:
    return s.strip()


def capitalize(s: str) -> str:
    """Title-case the first character of *s*.

    >>> capitalize("go")
    'Go'
    >>> capitalize("")
    ''
    """
    if not s:
        return s
    head = s[0].title()
    # Keep characters whose title case is more than one code point.
    if len(head) != 1:
        head = s[0]
    return head + s[1:]


class TemplateEngine:
    """Compile and execute text templates with the gpm helpers installed."""

    def __init__(self) -> None:
        self._env = Environment(
            undefined=StrictUndefined,
            autoescape=False,
            keep_trailing_newline=True,
        )
        helpers = {"trim": trim, "capitalize": capitalize}
        self._env.filters.update(helpers)
        self._env.globals.update(helpers)

    def render(self, text: str, data: Mapping[str, Any]) -> str:
        """Render *text* against *data* and return the result.

        Raises
        ------
        TemplateRenderError
            On syntax errors or when the template references data that
            does not exist.
        """
        try:
            template = self._env.from_string(text)
            return template.render(**data)
        except TemplateError as exc:
            raise TemplateRenderError(f"Failed to render template: {exc}") from exc


_default_engine: TemplateEngine | None = None


def render(text: str, data: Mapping[str, Any]) -> str:
    """Render with a lazily created shared :class:`TemplateEngine`."""
    global _default_engine
    if _default_engine is None:
        _default_engine = TemplateEngine()
    return _default_engine.render(text, data)
