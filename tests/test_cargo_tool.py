"""Tests for the subprocess-backed build tool (infra/cargo_tool.py).

:func:`subprocess.run` is mocked — cargo is never executed.
"""

from __future__ import annotations

import subprocess
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from cargo_ws.exceptions import BuildToolNotFoundError, ProjectIOError
from cargo_ws.infra.cargo_tool import CargoBuildTool


def _completed(returncode: int) -> subprocess.CompletedProcess[bytes]:
    return subprocess.CompletedProcess(args=[], returncode=returncode)


# ---------------------------------------------------------------------------
# Argument construction (pure)
# ---------------------------------------------------------------------------

class TestBuildArgs:
    def test_plain_new(self) -> None:
        assert CargoBuildTool.build_new_args("demo") == ["new", "demo"]

    def test_binary_new(self) -> None:
        assert CargoBuildTool.build_new_args("app", binary=True) == ["new", "--bin", "app"]

    def test_add_keeps_order(self) -> None:
        assert CargoBuildTool.build_add_args(["b", "a"]) == ["add", "b", "a"]


# ---------------------------------------------------------------------------
# Process execution
# ---------------------------------------------------------------------------

class TestRun:
    @patch("cargo_ws.infra.cargo_tool.subprocess.run")
    def test_new_project_runs_in_cwd(self, mock_run: MagicMock) -> None:
        mock_run.return_value = _completed(0)
        tool = CargoBuildTool("/opt/cargo")

        code = tool.new_project("app", cwd=Path("demo/crates"), binary=True)

        assert code == 0
        mock_run.assert_called_once_with(
            ["/opt/cargo", "new", "--bin", "app"],
            cwd=Path("demo/crates"),
            check=False,
        )

    @patch("cargo_ws.infra.cargo_tool.subprocess.run")
    def test_new_project_default_cwd_is_none(self, mock_run: MagicMock) -> None:
        mock_run.return_value = _completed(0)
        CargoBuildTool("cargo").new_project("demo")
        assert mock_run.call_args.kwargs["cwd"] is None

    @patch("cargo_ws.infra.cargo_tool.subprocess.run")
    def test_add_dependencies(self, mock_run: MagicMock) -> None:
        mock_run.return_value = _completed(0)
        CargoBuildTool("cargo").add_dependencies(["snafu", "tracing"], cwd=Path("demo"))
        mock_run.assert_called_once_with(
            ["cargo", "add", "snafu", "tracing"],
            cwd=Path("demo"),
            check=False,
        )

    @patch("cargo_ws.infra.cargo_tool.subprocess.run")
    def test_nonzero_status_is_returned(self, mock_run: MagicMock) -> None:
        mock_run.return_value = _completed(101)
        assert CargoBuildTool("cargo").new_project("demo") == 101

    @patch("cargo_ws.infra.cargo_tool.subprocess.run")
    def test_spawn_failure_raises_io_error(self, mock_run: MagicMock) -> None:
        original = FileNotFoundError(2, "No such file or directory")
        mock_run.side_effect = original

        with pytest.raises(ProjectIOError, match="cargo new demo") as exc_info:
            CargoBuildTool("cargo").new_project("demo")
        assert exc_info.value.__cause__ is original


# ---------------------------------------------------------------------------
# Executable resolution
# ---------------------------------------------------------------------------

class TestExecutable:
    @patch("cargo_ws.infra.cargo_tool.require_cargo", return_value=Path("/usr/bin/cargo"))
    def test_resolved_lazily_once(self, mock_require: MagicMock) -> None:
        tool = CargoBuildTool()
        mock_require.assert_not_called()

        assert tool.executable == Path("/usr/bin/cargo")
        assert tool.executable == Path("/usr/bin/cargo")
        mock_require.assert_called_once()

    @patch("cargo_ws.infra.cargo_tool.subprocess.run")
    @patch(
        "cargo_ws.infra.cargo_tool.require_cargo",
        side_effect=BuildToolNotFoundError("cargo is not installed or not on PATH."),
    )
    def test_missing_cargo_propagates(
        self, _mock_require: MagicMock, mock_run: MagicMock,
    ) -> None:
        with pytest.raises(BuildToolNotFoundError):
            CargoBuildTool().new_project("demo")
        mock_run.assert_not_called()
