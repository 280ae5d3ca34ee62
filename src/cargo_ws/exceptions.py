"""Custom exception hierarchy for cargo-ws.

All exceptions that cross layer boundaries must inherit from
:class:`CargoWsError`.  Raw ``OSError`` instances raised by the
filesystem or by ``subprocess`` must NEVER propagate beyond the
infrastructure layer — they are caught and re-raised as a typed
subclass defined here.

Hierarchy
---------
CargoWsError
├── InvalidProjectNameError
├── InitError
│   ├── ToolFailureError
│   └── ProjectIOError
└── MissingDependencyError
    └── BuildToolNotFoundError
"""

from __future__ import annotations

from pathlib import Path


class CargoWsError(Exception):
    """Base exception for all cargo-ws errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Input validation ------------------------------------------------------

class InvalidProjectNameError(CargoWsError):
    """Raised when the requested project name is empty."""


# --- Initialization pipeline -----------------------------------------------

class InitError(CargoWsError):
    """Base class for failures of the ``init`` pipeline."""


class ToolFailureError(InitError):
    """Raised when a ``cargo`` invocation exits with a non-zero status.

    ``label`` names the pipeline step that invoked the tool
    (``"create project"``, ``"create member project"`` or
    ``"add dependencies"``).
    """

    def __init__(
        self,
        label: str,
        *,
        returncode: int | None = None,
        hint: str | None = None,
    ) -> None:
        message = f"Failed to {label}"
        if returncode is not None:
            message = f"{message} (cargo exited with status {returncode})"
        super().__init__(message, hint=hint)
        self.label: str = label
        self.returncode: int | None = returncode


class ProjectIOError(InitError):
    """Raised when a local file or directory operation fails."""

    def __init__(
        self,
        message: str,
        *,
        path: Path | None = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.path: Path | None = path


# --- Environment / tooling -------------------------------------------------

class MissingDependencyError(CargoWsError):
    """Raised when a required runtime dependency is not available."""


class BuildToolNotFoundError(MissingDependencyError):
    """Raised when ``cargo`` cannot be located on the system PATH."""
