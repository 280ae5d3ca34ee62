"""cargo-ws — scaffold Rust projects with a workspace-style layout.

Wraps ``cargo new`` / ``cargo add`` behind a single ``init`` command
with a strict layered architecture.
"""

from cargo_ws.version import __version__

__all__: list[str] = ["__version__"]
