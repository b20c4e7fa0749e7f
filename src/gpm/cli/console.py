"""CLI console helpers with optional Rich support.

This module avoids module-level imports of Rich so bootstrap paths
(``--version``, usage errors) keep working even when Rich is not
installed.  All human-facing messages go to stderr.
"""

from __future__ import annotations

import sys
from typing import Any

from gpm.exceptions import GpmError, InitializationError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``InitializationError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise InitializationError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console() -> Any:
	"""Create a Rich console instance targeting stderr."""
	console_class = _load_rich_console_class()
	return console_class(stderr=True, soft_wrap=True)


def escape(text: str) -> str:
	"""Escape *text* so Rich prints square brackets literally."""
	try:
		from rich.markup import escape as rich_escape
	except ModuleNotFoundError:
		return text
	return rich_escape(text)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain stderr print."""
		try:
			rich_console = get_rich_console()
		except InitializationError:
			print(*(_strip_markup(obj) for obj in objects), file=sys.stderr)
			return
		rich_console.print(*objects)


def _strip_markup(obj: object) -> object:
	if not isinstance(obj, str):
		return obj
	for tag in ("[bold red]", "[/bold red]", "[yellow]", "[/yellow]", "[bold]", "[/bold]"):
		obj = obj.replace(tag, "")
	return obj


console = _ConsoleProxy()


def report_error(exc: GpmError) -> None:
	"""Print *exc* and its hint, if any, to stderr."""
	console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
	if exc.hint:
		console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
