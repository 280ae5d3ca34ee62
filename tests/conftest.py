"""Shared pytest fixtures and configuration for the cargo-ws test suite.

Guidelines
----------
* No real ``cargo`` invocation in any test.
* ``cargo`` is replaced at the infra boundary by :class:`FakeCargo`.
* Filesystem effects happen only under ``tmp_path``.
* Tests must not depend on OS state.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import pytest


class FakeCargo:
    """In-process stand-in for ``cargo new`` / ``cargo add``.

    Mimics the on-disk effects that the pipeline relies on and records
    every call.  ``fail_on`` maps a call kind (``"new"``, ``"new --bin"``,
    ``"add"``) to the exit status that call should return.
    """

    def __init__(self, fail_on: dict[str, int] | None = None) -> None:
        self.calls: list[tuple[str, tuple[str, ...], Path | None]] = []
        self.fail_on: dict[str, int] = dict(fail_on or {})

    def new_project(
        self,
        name: str,
        *,
        cwd: Path | None = None,
        binary: bool = False,
    ) -> int:
        kind = "new --bin" if binary else "new"
        self.calls.append((kind, (name,), cwd))
        if kind in self.fail_on:
            return self.fail_on[kind]

        target = (cwd or Path.cwd()) / name
        if target.exists():
            return 101
        (target / "src").mkdir(parents=True)
        (target / "Cargo.toml").write_text(
            f'[package]\nname = "{name}"\nversion = "0.1.0"\nedition = "2021"\n\n'
            "[dependencies]\n",
            encoding="utf-8",
        )
        (target / "src" / "main.rs").write_text(
            'fn main() {\n    println!("Hello, world!");\n}\n',
            encoding="utf-8",
        )
        return 0

    def add_dependencies(self, dependencies: Sequence[str], *, cwd: Path) -> int:
        self.calls.append(("add", tuple(dependencies), cwd))
        if "add" in self.fail_on:
            return self.fail_on["add"]

        members = sorted(cwd.glob("crates/*/Cargo.toml"))
        if len(members) != 1:
            return 101
        manifest = members[0]
        with manifest.open("a", encoding="utf-8") as f:
            for dep in dependencies:
                f.write(f'{dep} = "*"\n')
        return 0

    @property
    def kinds(self) -> list[str]:
        return [kind for kind, _, _ in self.calls]


@pytest.fixture
def fake_cargo() -> FakeCargo:
    return FakeCargo()


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test with ``tmp_path`` as the process working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def failing_cargo() -> type[FakeCargo]:
    """Return the :class:`FakeCargo` class for tests that set ``fail_on``."""
    return FakeCargo
