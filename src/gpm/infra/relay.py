"""Subprocess-backed implementation of :class:`~gpm.core.protocols.ProcessRelay`.

This module is the **only** place in the codebase that spawns external
programs.  The child's stdout and stderr are pumped by two threads into
the corresponding sinks while the calling thread waits for the child;
both pumps are joined before :meth:`SubprocessRelay.run` returns so no
trailing output is lost.
"""

from __future__ import annotations

import codecs
import io
import logging
import subprocess
import sys
import threading
from collections.abc import Callable, Sequence
from typing import IO, Any

from gpm.exceptions import GpmError, SpawnError

logger = logging.getLogger(__name__)

CHUNK_SIZE: int = 64 * 1024

Reporter = Callable[[GpmError], None]


def _log_report(exc: GpmError) -> None:
    logger.error("%s", exc)


class _TextSink:
    """Byte sink decoding into a text stream that has no binary buffer."""

    def __init__(self, stream: IO[str]) -> None:
        self._stream = stream
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")

    def write(self, data: bytes) -> int:
        self._stream.write(self._decoder.decode(data))
        return len(data)

    def flush(self) -> None:
        self._stream.flush()

    def finish(self) -> None:
        """Write out any incomplete trailing sequence as a replacement character."""
        self._stream.write(self._decoder.decode(b"", final=True))
        self._stream.flush()


def _binary_sink(stream: Any) -> IO[bytes]:
    """Return a byte-oriented view of *stream*.

    Text streams are flushed first so that text already written ahead of
    the child's output keeps its place.
    """
    if isinstance(stream, io.TextIOBase):
        stream.flush()
        buffer = getattr(stream, "buffer", None)
        if buffer is None:
            return _TextSink(stream)  # type: ignore[return-value]
        return buffer  # type: ignore[no-any-return]
    return stream  # type: ignore[no-any-return]


class _Pump(threading.Thread):
    """Copy one pipe to one sink until end of stream."""

    def __init__(self, label: str, source: IO[bytes], sink: IO[bytes]) -> None:
        super().__init__(name=f"gpm-relay-{label}", daemon=True)
        self.label = label
        self._source = source
        self._sink = sink
        self.copied: int = 0
        self.error: BaseException | None = None

    def run(self) -> None:
        try:
            while True:
                chunk = self._source.read1(CHUNK_SIZE)  # type: ignore[attr-defined]
                if not chunk:
                    break
                if self.error is not None:
                    # Keep draining so the child never blocks on a full pipe.
                    continue
                try:
                    self._sink.write(chunk)
                    self._sink.flush()
                except Exception as exc:
                    self.error = exc
                    continue
                self.copied += len(chunk)
            if self.error is None and isinstance(self._sink, _TextSink):
                try:
                    self._sink.finish()
                except Exception as exc:
                    self.error = exc
        except OSError as exc:
            self.error = exc


class SubprocessRelay:
    """Run a program and forward its output streams live.

    Parameters
    ----------
    stdout, stderr:
        Destination streams.  When ``None`` the current process's
        ``sys.stdout`` / ``sys.stderr`` are used, looked up at run time.
    report:
        Callable receiving a :class:`~gpm.exceptions.GpmError` describing
        a spawn or relay failure.  Defaults to logging it.
    """

    def __init__(
        self,
        stdout: IO[Any] | None = None,
        stderr: IO[Any] | None = None,
        report: Reporter | None = None,
    ) -> None:
        self._stdout = stdout
        self._stderr = stderr
        self._report: Reporter = report if report is not None else _log_report

    def run(self, name: str, args: Sequence[str]) -> int | None:
        """Run *name* with *args*; return its exit code or ``None``."""
        argv = [name, *args]
        out_sink = _binary_sink(self._stdout if self._stdout is not None else sys.stdout)
        err_sink = _binary_sink(self._stderr if self._stderr is not None else sys.stderr)

        logger.debug("spawning %s", argv)
        try:
            proc = subprocess.Popen(
                argv,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
            )
        except FileNotFoundError as exc:
            self._report(
                SpawnError(
                    f"{name}: executable not found",
                    hint=f"Make sure '{name}' is installed and on your PATH.",
                )
            )
            logger.debug("spawn failed: %s", exc)
            return None
        except PermissionError as exc:
            self._report(SpawnError(f"{name}: permission denied"))
            logger.debug("spawn failed: %s", exc)
            return None
        except OSError as exc:
            self._report(SpawnError(f"{name}: failed to start: {exc}"))
            return None

        with proc:
            if proc.stdout is None or proc.stderr is None:
                proc.kill()
                proc.wait()
                self._report(SpawnError(f"{name}: could not open output pipes"))
                return None

            pumps = (
                _Pump("stdout", proc.stdout, out_sink),
                _Pump("stderr", proc.stderr, err_sink),
            )
            for pump in pumps:
                pump.start()

            returncode = proc.wait()
            for pump in pumps:
                pump.join()

        for pump in pumps:
            if pump.error is not None:
                self._report(
                    GpmError(f"{name}: failed to relay {pump.label}: {pump.error}")
                )
        logger.debug(
            "%s exited with %d (stdout %d bytes, stderr %d bytes)",
            name,
            returncode,
            pumps[0].copied,
            pumps[1].copied,
        )
        return returncode
