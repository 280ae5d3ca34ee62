"""CLI application entry point and command routing for cargo-ws.

This module is the **sole error boundary** for the entire application.
It catches :class:`~cargo_ws.exceptions.CargoWsError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages on
stderr and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the core/service
  and infrastructure layers.
* ``print()`` is forbidden outside the CLI layer; the shared console is
  used exclusively.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys

from cargo_ws.cli import exit_codes
from cargo_ws.cli.console import console, escape
from cargo_ws.exceptions import CargoWsError
from cargo_ws.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    * ``cargo-ws init <name>`` — scaffold a workspace project
    * ``cargo-ws --version``
    """
    parser = argparse.ArgumentParser(
        prog="cargo-ws",
        description="Scaffold a Rust project with a workspace-style layout.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="<command>")

    init_parser = subparsers.add_parser(
        "init",
        help="Create a new workspace project.",
        description=(
            "Run `cargo new <name>`, turn it into a workspace and create "
            "the `crates/app` member with the default dependencies."
        ),
    )
    init_parser.add_argument("name", help="Name of the project directory to create.")
    init_parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Report each completed step on stderr.",
    )
    return parser


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse *argv* into a command namespace.

    ``command`` is ``None`` when no subcommand was given.  Missing
    required parameters make argparse print usage and raise
    ``SystemExit(2)``.
    """
    return _build_parser().parse_args(argv)


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_init(name: str, *, verbose: bool = False) -> int:
    """Dispatch the ``init`` command.

    Flow:
    1. Validate the name into an :class:`InitRequest`.
    2. Instantiate infra adapters + the core service.
    3. Run the pipeline, optionally echoing each step.
    """
    from cargo_ws.core.init_service import ProjectInitializer
    from cargo_ws.core.models import InitRequest, InitStep
    from cargo_ws.infra.cargo_tool import CargoBuildTool
    from cargo_ws.infra.filesystem import LocalProjectWriter

    request = InitRequest(name=name)
    initializer = ProjectInitializer(CargoBuildTool(), LocalProjectWriter())

    def _report(step: InitStep) -> None:
        console.print(f"[green]ok[/green]  {step.value}")

    initializer.initialize(request, on_step=_report if verbose else None)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the cargo-ws CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    args = parse_arguments(argv)

    if args.command is None:
        return exit_codes.SUCCESS

    return _handle_init(args.name, verbose=args.verbose)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.  Known errors exit
    with :data:`exit_codes.GENERAL_ERROR`, not 0.
    """
    try:
        code = main()
        sys.exit(code)
    except CargoWsError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(exc)}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(exc)}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
