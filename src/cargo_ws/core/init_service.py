"""Core init service — orchestrates the workspace scaffolding pipeline.

This service delegates process execution to a
:class:`~cargo_ws.core.protocols.BuildTool` and file writes to a
:class:`~cargo_ws.core.protocols.ProjectWriter`, both injected at
construction time.  It is responsible for:

* Running the six pipeline steps in order.
* Halting at the first failure, without retries and without rollback.
* Ensuring only :class:`~cargo_ws.exceptions.CargoWsError` subclasses
  escape.

Guarantees
----------
* Pure orchestration — no ``print()``, no direct filesystem access.
* No subprocess import.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from cargo_ws.core.models import InitRequest, InitStep
from cargo_ws.core.protocols import BuildTool, ProjectWriter
from cargo_ws.core.templates import (
    DEFAULT_DEPENDENCIES,
    MEMBER_NAME,
    RUSTFMT_CONFIG,
    WORKSPACE_MANIFEST,
)
from cargo_ws.exceptions import CargoWsError, ProjectIOError, ToolFailureError

StepCallback = Callable[[InitStep], None]


class ProjectInitializer:
    """Stateless service that drives the ``init`` pipeline.

    Parameters
    ----------
    build_tool:
        Any object satisfying the :class:`BuildTool` protocol.
    writer:
        Any object satisfying the :class:`ProjectWriter` protocol.
    """

    def __init__(self, build_tool: BuildTool, writer: ProjectWriter) -> None:
        self._build_tool: BuildTool = build_tool
        self._writer: ProjectWriter = writer

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def initialize(
        self,
        request: InitRequest,
        *,
        on_step: StepCallback | None = None,
    ) -> None:
        """Scaffold a workspace project for *request*.

        Partially created directories and files are left on disk when a
        step fails.

        Parameters
        ----------
        request:
            The project to create.
        on_step:
            Optional callable invoked with each :class:`InitStep` once
            that step has completed.

        Raises
        ------
        ToolFailureError
            When a ``cargo`` invocation exits with a non-zero status.
        ProjectIOError
            When a local file or directory operation fails.
        """
        self._run_tool(
            InitStep.CREATE_PROJECT,
            lambda: self._build_tool.new_project(request.name),
        )
        _notify(on_step, InitStep.CREATE_PROJECT)

        self._write(request.manifest_path, WORKSPACE_MANIFEST)
        _notify(on_step, InitStep.WRITE_MANIFEST)

        self._write(request.rustfmt_path, RUSTFMT_CONFIG)
        _notify(on_step, InitStep.WRITE_RUSTFMT)

        self._mkdir(request.members_dir)
        _notify(on_step, InitStep.CREATE_MEMBERS_DIR)

        self._run_tool(
            InitStep.CREATE_MEMBER,
            lambda: self._build_tool.new_project(
                MEMBER_NAME,
                cwd=request.members_dir,
                binary=True,
            ),
        )
        _notify(on_step, InitStep.CREATE_MEMBER)

        self._run_tool(
            InitStep.ADD_DEPENDENCIES,
            lambda: self._build_tool.add_dependencies(
                DEFAULT_DEPENDENCIES,
                cwd=request.project_dir,
            ),
        )
        _notify(on_step, InitStep.ADD_DEPENDENCIES)

    # ------------------------------------------------------------------
    # Step helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _run_tool(step: InitStep, invoke: Callable[[], int]) -> None:
        try:
            returncode = invoke()
        except CargoWsError:
            # Already one of ours — propagate unchanged.
            raise
        except OSError as exc:
            raise ProjectIOError(
                f"Could not run cargo to {step.value}: {exc}",
            ) from exc
        if returncode != 0:
            raise ToolFailureError(step.value, returncode=returncode)

    def _write(self, path: Path, content: str) -> None:
        try:
            self._writer.write_file(path, content)
        except CargoWsError:
            raise
        except OSError as exc:
            raise ProjectIOError(f"Could not write {path}: {exc}", path=path) from exc

    def _mkdir(self, path: Path) -> None:
        try:
            self._writer.create_directory(path)
        except CargoWsError:
            raise
        except OSError as exc:
            raise ProjectIOError(
                f"Could not create directory {path}: {exc}", path=path,
            ) from exc


def _notify(callback: StepCallback | None, step: InitStep) -> None:
    if callback is not None:
        callback(step)
