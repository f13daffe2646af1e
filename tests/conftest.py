"""
Shared fixtures for include-code tests.
"""

import textwrap
from collections.abc import Callable
from pathlib import Path

import pytest

from hother.include_code import IncludeCodeConfig


@pytest.fixture
def write_source(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write a dedented source file below tmp_path and return its path."""

    def _write(relative_path: str, content: str) -> Path:
        path = tmp_path / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(content).lstrip("\n"), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def config(tmp_path: Path) -> IncludeCodeConfig:
    """Resolver configuration rooted at tmp_path."""
    return IncludeCodeConfig(root_dir=tmp_path)


@pytest.fixture
def counter_source(write_source) -> Path:
    """A TypeScript file with an outer snippet wrapping an inner one."""
    return write_source(
        "src/counter.ts",
        """
        import { Counter } from "./lib";

        // docs:start:foo
        let x = 1; // highlight-next-line:foo
        let y = 2; // docs:start:bar
        let z = 3; // docs:end:bar
        // docs:end:foo
        """,
    )
