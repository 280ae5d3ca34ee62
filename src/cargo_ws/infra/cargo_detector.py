"""Locate the ``cargo`` executable and suggest how to install it."""

from __future__ import annotations

import platform
import shutil
from dataclasses import dataclass
from pathlib import Path

from cargo_ws.exceptions import BuildToolNotFoundError

_RUSTUP_SCRIPT = "curl --proto '=https' --tlsv1.2 -sSf https://sh.rustup.rs | sh"


@dataclass(frozen=True, slots=True)
class CargoStatus:
    """Outcome of looking up ``cargo`` on PATH.

    ``install_commands`` is empty whenever ``path`` is set.
    """

    found: bool
    path: Path | None
    install_commands: tuple[str, ...]


def detect_cargo() -> CargoStatus:
    """Look up ``cargo`` on PATH without running it."""
    located = shutil.which("cargo")
    if located is None:
        return CargoStatus(False, None, _platform_install_commands())
    return CargoStatus(True, Path(located).resolve(), ())


def require_cargo() -> Path:
    """Return the cargo path, or raise :class:`BuildToolNotFoundError` with install hints."""
    status = detect_cargo()
    if status.path is not None:
        return status.path
    hint = "\n".join(
        ["Install the Rust toolchain using one of:"]
        + [f"  {cmd}" for cmd in status.install_commands]
    )
    raise BuildToolNotFoundError("cargo is not installed or not on PATH.", hint=hint)


def _platform_install_commands() -> tuple[str, ...]:
    system = platform.system()
    if system == "Windows":
        return ("winget install Rustlang.Rustup", "choco install rustup.install")
    if system in ("Linux", "Darwin"):
        return (_RUSTUP_SCRIPT,)
    return ("Please install Rust from https://rustup.rs",)
