"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol


class ProcessRelay(Protocol):
    """Contract for running an external program with live output."""

    def run(self, name: str, args: Sequence[str]) -> int | None:
        """Run *name* with *args*, forwarding its stdout and stderr.

        Returns the child's exit code once the process has exited and
        both output streams have been drained, or ``None`` when the
        process could not be started.  Spawn failures are reported by
        the implementation and never raised; deciding whether a failure
        changes the exit status is the caller's job.
        """
        ...  # pragma: no cover
