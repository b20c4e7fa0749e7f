"""Process-wide exit status and ordered cleanup chain.

A :class:`Lifecycle` is created once at process start and handed to
every component that needs to raise the exit status or register
teardown work.  It moves from ``RUNNING`` to ``TERMINATING`` exactly
once; :meth:`Lifecycle.shutdown` is the single point that ends the
process.
"""

from __future__ import annotations

import enum
import logging
import sys
import threading
from collections.abc import Callable
from typing import NoReturn

from gpm.exceptions import LifecycleError

logger = logging.getLogger(__name__)


class LifecycleState(enum.Enum):
    RUNNING = "running"
    TERMINATING = "terminating"


class Lifecycle:
    """Max-wins exit status plus one-shot cleanups run in registration order."""

    def __init__(self) -> None:
        self._status: int = 0
        self._status_lock = threading.Lock()
        self._cleanups: list[Callable[[], object]] = []
        self._state = LifecycleState.RUNNING

    @property
    def state(self) -> LifecycleState:
        return self._state

    @property
    def status(self) -> int:
        with self._status_lock:
            return self._status

    def raise_status(self, code: int) -> None:
        """Set the exit status to ``max(current, code)``.  Thread-safe."""
        with self._status_lock:
            if self._status < code:
                logger.debug("exit status raised %d -> %d", self._status, code)
                self._status = code

    def register_cleanup(self, action: Callable[[], object]) -> None:
        """Append *action* to the cleanup chain.

        Raises
        ------
        LifecycleError
            If shutdown has already begun.
        """
        if self._state is not LifecycleState.RUNNING:
            raise LifecycleError("Cannot register a cleanup action during shutdown.")
        self._cleanups.append(action)

    def finalize(self) -> int:
        """Run every cleanup once, in order, and return the final status.

        An exception raised by a cleanup action propagates after the
        remaining actions have run.
        """
        if self._state is not LifecycleState.RUNNING:
            raise LifecycleError("Shutdown has already run.")
        self._state = LifecycleState.TERMINATING

        cleanups, self._cleanups = self._cleanups, []
        logger.debug("running %d cleanup action(s)", len(cleanups))
        first_error: BaseException | None = None
        for action in cleanups:
            try:
                action()
            except Exception as exc:
                logger.debug("cleanup %r failed: %s", action, exc)
                if first_error is None:
                    first_error = exc
        if first_error is not None:
            raise first_error
        return self.status

    def shutdown(self) -> NoReturn:
        """Run cleanups and terminate the process with the aggregated status."""
        sys.exit(self.finalize())
