"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — preserving the dependency inversion principle.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Protocol


class BuildTool(Protocol):
    """Contract for the external build tool (``cargo``).

    Methods return the tool's exit status; the caller decides what a
    non-zero status means.  Implementations must map spawn failures to
    :class:`~cargo_ws.exceptions.CargoWsError` subclasses.
    """

    def new_project(
        self,
        name: str,
        *,
        cwd: Path | None = None,
        binary: bool = False,
    ) -> int:
        """Create a new package directory *name* inside *cwd*.

        Parameters
        ----------
        name:
            Package and directory name.
        cwd:
            Working directory for the invocation.  ``None`` means the
            current process working directory.
        binary:
            Request the executable-program template explicitly.
        """
        ...  # pragma: no cover

    def add_dependencies(
        self,
        dependencies: Sequence[str],
        *,
        cwd: Path,
    ) -> int:
        """Declare *dependencies* on the package resolved from *cwd*."""
        ...  # pragma: no cover


class ProjectWriter(Protocol):
    """Contract for local filesystem writes.

    Implementations must raise
    :class:`~cargo_ws.exceptions.ProjectIOError` on any OS failure.
    """

    def write_file(self, path: Path, content: str) -> None:
        """Create or truncate *path* and write *content* to it."""
        ...  # pragma: no cover

    def create_directory(self, path: Path) -> None:
        """Create *path*; fail if it already exists."""
        ...  # pragma: no cover
