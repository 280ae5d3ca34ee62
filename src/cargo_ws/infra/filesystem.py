"""Local-disk implementation of :class:`~cargo_ws.core.protocols.ProjectWriter`.

Every ``OSError`` is re-raised as
:class:`~cargo_ws.exceptions.ProjectIOError` carrying the offending path.
"""

from __future__ import annotations

from pathlib import Path

from cargo_ws.exceptions import ProjectIOError


class LocalProjectWriter:
    """Concrete :class:`ProjectWriter` writing straight to the filesystem."""

    def write_file(self, path: Path, content: str) -> None:
        try:
            with path.open("w", encoding="utf-8", newline="\n") as f:
                f.write(content)
        except OSError as exc:
            raise ProjectIOError(
                f"Could not write {path}: {exc.strerror or exc}",
                path=path,
            ) from exc

    def create_directory(self, path: Path) -> None:
        """Create *path*; an existing directory is an error."""
        try:
            path.mkdir()
        except FileExistsError as exc:
            raise ProjectIOError(
                f"Directory already exists: {path}",
                path=path,
                hint="Remove it or choose a different project name.",
            ) from exc
        except OSError as exc:
            raise ProjectIOError(
                f"Could not create directory {path}: {exc.strerror or exc}",
                path=path,
            ) from exc
