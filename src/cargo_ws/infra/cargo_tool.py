"""cargo backed implementation of :class:`~cargo_ws.core.protocols.BuildTool`.

This module is the **only** place in the codebase that spawns ``cargo``.
Output is inherited from the parent process and never parsed; only the
exit status is returned.  Spawn failures are re-raised as
:class:`~cargo_ws.exceptions.ProjectIOError`.
"""

from __future__ import annotations

import subprocess
from collections.abc import Sequence
from pathlib import Path

from cargo_ws.exceptions import ProjectIOError
from cargo_ws.infra.cargo_detector import require_cargo


class CargoBuildTool:
    """Concrete :class:`BuildTool` backed by the ``cargo`` executable.

    This class satisfies the :class:`~cargo_ws.core.protocols.BuildTool`
    protocol structurally — no explicit inheritance required.

    Parameters
    ----------
    executable:
        Path to cargo.  When ``None`` it is located on PATH on first use
        via :func:`~cargo_ws.infra.cargo_detector.require_cargo`.
    """

    def __init__(self, executable: Path | str | None = None) -> None:
        self._executable: Path | str | None = executable

    @property
    def executable(self) -> Path | str:
        if self._executable is None:
            self._executable = require_cargo()
        return self._executable

    # ------------------------------------------------------------------
    # Command construction (pure)
    # ------------------------------------------------------------------

    @staticmethod
    def build_new_args(name: str, *, binary: bool = False) -> list[str]:
        """Return ``cargo`` arguments for creating package *name*."""
        args = ["new"]
        if binary:
            args.append("--bin")
        args.append(name)
        return args

    @staticmethod
    def build_add_args(dependencies: Sequence[str]) -> list[str]:
        """Return ``cargo`` arguments for adding *dependencies*."""
        return ["add", *dependencies]

    # ------------------------------------------------------------------
    # Protocol methods
    # ------------------------------------------------------------------

    def new_project(
        self,
        name: str,
        *,
        cwd: Path | None = None,
        binary: bool = False,
    ) -> int:
        return self._run(self.build_new_args(name, binary=binary), cwd=cwd)

    def add_dependencies(
        self,
        dependencies: Sequence[str],
        *,
        cwd: Path,
    ) -> int:
        return self._run(self.build_add_args(dependencies), cwd=cwd)

    # ------------------------------------------------------------------
    # Process execution
    # ------------------------------------------------------------------

    def _run(self, args: list[str], *, cwd: Path | None) -> int:
        """Run ``cargo <args>`` in *cwd* and return its exit status.

        Raises
        ------
        ProjectIOError
            When the process cannot be spawned (missing binary, bad
            working directory, permissions).
        """
        command = [str(self.executable), *args]
        try:
            completed = subprocess.run(command, cwd=cwd, check=False)
        except OSError as exc:
            raise ProjectIOError(
                f"Could not run `cargo {' '.join(args)}`: {exc}",
                path=cwd,
            ) from exc
        return completed.returncode
