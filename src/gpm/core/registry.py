"""Ordered, immutable catalog of commands and help topics."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Iterator, Mapping

from gpm.core.models import Command, CommandText


class CommandRegistry:
    """Commands in listing order.

    The registry is fixed at construction; lookups are a linear scan by
    derived name and the first match wins.  Duplicate names are a
    configuration mistake and are not checked here.
    """

    __slots__ = ("_commands",)

    def __init__(self, commands: Iterable[Command]) -> None:
        self._commands: tuple[Command, ...] = tuple(commands)

    @property
    def commands(self) -> tuple[Command, ...]:
        return self._commands

    def __iter__(self) -> Iterator[Command]:
        return iter(self._commands)

    def __len__(self) -> int:
        return len(self._commands)

    def names(self) -> list[str]:
        return [cmd.name for cmd in self._commands]

    def lookup(self, name: str) -> Command | None:
        """Return the command whose derived name equals *name* exactly."""
        return next((cmd for cmd in self._commands if cmd.name == name), None)

    def localized(self, texts: Mapping[str, CommandText]) -> CommandRegistry:
        """Return a new registry with descriptions replaced from *texts*.

        Commands without an entry in *texts* keep their current text.
        """
        localized: list[Command] = []
        for cmd in self._commands:
            text = texts.get(cmd.name)
            if text is None:
                localized.append(cmd)
            else:
                localized.append(
                    dataclasses.replace(cmd, short=text.short, long=text.long)
                )
        return CommandRegistry(localized)
