"""Domain models for cargo-ws.

All models are **frozen** value objects with no behaviour beyond data
access and path derivation.  They carry zero I/O and zero dependencies
on external packages.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from pathlib import Path

from cargo_ws.core.templates import (
    MANIFEST_FILENAME,
    MEMBER_NAME,
    MEMBERS_DIRNAME,
    RUSTFMT_FILENAME,
)
from cargo_ws.exceptions import InvalidProjectNameError


# ---------------------------------------------------------------------------
# Init request
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class InitRequest:
    """A single ``init`` invocation.

    Created by the CLI layer from parsed arguments and consumed once by
    :class:`~cargo_ws.core.init_service.ProjectInitializer`.  Paths are
    relative to the process working directory.
    """

    name: str
    """Name of the new project, used verbatim as its directory name."""

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise InvalidProjectNameError(
                "Project name must not be empty.",
                hint="Usage: cargo-ws init <name>",
            )

    @property
    def project_dir(self) -> Path:
        return Path(self.name)

    @property
    def manifest_path(self) -> Path:
        return self.project_dir / MANIFEST_FILENAME

    @property
    def rustfmt_path(self) -> Path:
        return self.project_dir / RUSTFMT_FILENAME

    @property
    def members_dir(self) -> Path:
        return self.project_dir / MEMBERS_DIRNAME

    @property
    def member_dir(self) -> Path:
        return self.members_dir / MEMBER_NAME


# ---------------------------------------------------------------------------
# Pipeline steps
# ---------------------------------------------------------------------------

class InitStep(enum.Enum):
    """Ordered steps of the ``init`` pipeline."""

    CREATE_PROJECT = "create project"
    WRITE_MANIFEST = "write workspace manifest"
    WRITE_RUSTFMT = "write rustfmt config"
    CREATE_MEMBERS_DIR = "create members directory"
    CREATE_MEMBER = "create member project"
    ADD_DEPENDENCIES = "add dependencies"
