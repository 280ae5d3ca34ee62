"""Allow ``python -m cargo_ws`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m cargo_ws`` behaves identically to the ``cargo-ws``
console script.
"""

from __future__ import annotations

from cargo_ws.cli.app import cli

if __name__ == "__main__":
    cli()
