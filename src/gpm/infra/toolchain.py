"""Infrastructure: executable detection and platform install guidance.

Locates programs such as the Go toolchain on the system PATH and
provides platform-specific installation commands when one is missing.

Rules
-----
* Detection via :func:`shutil.which` only — no subprocess.
* No automatic installation.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import platform
import shutil
from dataclasses import dataclass
from pathlib import Path


# ---------------------------------------------------------------------------
# Detection result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ToolchainStatus:
    """Result of a PATH lookup for one executable.

    Attributes
    ----------
    name : str
        Executable that was looked up.
    found : bool
        Whether it was located on PATH.
    path : Path | None
        Absolute path to the binary, or ``None``.
    install_commands : tuple[str, ...]
        Suggested shell commands for installing it on the current
        platform.  Empty when the executable is present.
    """

    name: str
    found: bool
    path: Path | None
    install_commands: tuple[str, ...]


# ---------------------------------------------------------------------------
# Detection logic
# ---------------------------------------------------------------------------

def detect_toolchain(name: str = "go") -> ToolchainStatus:
    """Look up *name* on PATH.

    Returns a :class:`ToolchainStatus` regardless of whether the program
    is present — the caller decides whether to abort or merely warn.
    """
    result = shutil.which(name)

    if result is not None:
        return ToolchainStatus(
            name=name,
            found=True,
            path=Path(result).resolve(),
            install_commands=(),
        )

    return ToolchainStatus(
        name=name,
        found=False,
        path=None,
        install_commands=_platform_install_commands() if name == "go" else (),
    )


# ---------------------------------------------------------------------------
# Platform-specific install guidance
# ---------------------------------------------------------------------------

def _platform_install_commands() -> tuple[str, ...]:
    """Return Go install commands appropriate for the current OS."""
    system = platform.system().lower()
    if system == "windows":
        return (
            "winget install GoLang.Go",
            "choco install golang",
        )
    if system == "linux":
        return (
            "sudo apt install golang-go",
            "sudo dnf install golang",
            "sudo pacman -S go",
        )
    if system == "darwin":
        return ("brew install go",)
    return ("Please install Go from https://go.dev/dl/",)
