"""Core / service layer — pure orchestration and fixed templates.

Rules
-----
* No ``print()`` calls.
* No direct filesystem or subprocess I/O.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from cargo_ws.core.init_service import ProjectInitializer
from cargo_ws.core.models import InitRequest, InitStep
from cargo_ws.core.protocols import BuildTool, ProjectWriter

__all__: list[str] = [
    "BuildTool",
    "InitRequest",
    "InitStep",
    "ProjectInitializer",
    "ProjectWriter",
]
