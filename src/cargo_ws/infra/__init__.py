"""Infrastructure layer — external system integration.

This layer wraps all interaction with ``cargo`` and the local
filesystem.  Every raw ``OSError`` must be caught here and re-raised as
a :class:`~cargo_ws.exceptions.CargoWsError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from cargo_ws.infra.cargo_detector import CargoStatus, detect_cargo, require_cargo
from cargo_ws.infra.cargo_tool import CargoBuildTool
from cargo_ws.infra.filesystem import LocalProjectWriter

__all__: list[str] = [
    "CargoBuildTool",
    "CargoStatus",
    "LocalProjectWriter",
    "detect_cargo",
    "require_cargo",
]
