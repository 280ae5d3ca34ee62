"""Fixed file templates and names written by ``cargo-ws init``.

Template contents are byte-exact: the generated files must match them
verbatim, including the trailing newline.
"""

from __future__ import annotations

MANIFEST_FILENAME: str = "Cargo.toml"
RUSTFMT_FILENAME: str = "rustfmt.toml"
MEMBERS_DIRNAME: str = "crates"
MEMBER_NAME: str = "app"

WORKSPACE_MANIFEST: str = (
    "[workspace]\n"
    'members = ["crates/*"]\n'
    'resolver = "2"\n'
)
"""Replaces the package manifest generated by ``cargo new``."""

RUSTFMT_CONFIG: str = (
    'imports_granularity="Crate"\n'
    "wrap_comments=true\n"
    "comment_width=100\n"
    'group_imports="StdExternalCrate"\n'
)

DEFAULT_DEPENDENCIES: tuple[str, ...] = (
    "snafu",
    "tracing",
    "tracing-subscriber",
    "ir_aquila",
)
"""Crates added to the member project, in ``cargo add`` argument order."""
