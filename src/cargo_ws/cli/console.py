"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of optional UI
dependencies so bootstrap paths (``--help``, ``--version``) remain
functional even when Rich is not installed.
"""

from __future__ import annotations

import re
import sys
from typing import Any

from cargo_ws.exceptions import MissingDependencyError

# Only the styles the CLI itself emits; user text is escaped, never stripped.
_OWN_MARKUP = re.compile(r"\[/?(?:bold red|bold green|green|yellow)\]")


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``MissingDependencyError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise MissingDependencyError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console() -> Any:
    """Create a Rich console targeting stderr that never hard-wraps lines."""
    console_class = _load_rich_console_class()
    return console_class(stderr=True, highlight=False, soft_wrap=True)


def escape(text: object) -> str:
    """Escape *text* so Rich renders square brackets literally."""
    try:
        from rich.markup import escape as rich_escape
    except ModuleNotFoundError:
        # Plain output never interprets markup.
        return str(text)
    return rich_escape(str(text))


def strip_markup(text: str) -> str:
    """Drop the CLI's own style tags and undo :func:`escape`."""
    return _OWN_MARKUP.sub("", text).replace("\\[", "[")


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with Rich fallback."""

    def print(self, *objects: object) -> None:
        """Render with Rich when available, else plain stderr print."""
        try:
            rich_console = get_rich_console()
        except MissingDependencyError:
            print(*(strip_markup(str(obj)) for obj in objects), file=sys.stderr)
            return
        rich_console.print(*objects)


console = _ConsoleProxy()
