"""Shared pytest fixtures for the node-typescript-scaffold test suite.

Provides reusable fixtures for:
- Temporary output directories
- ProjectOptions factories
- A default ProjectScaffolder
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from node_scaffold.scaffolder import ProjectOptions, ProjectScaffolder


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Parent directory that generated projects are written into."""
    out = tmp_path / "output"
    out.mkdir()
    return out


# ---------------------------------------------------------------------------
# Options
# ---------------------------------------------------------------------------

@pytest.fixture
def make_options(output_dir: Path) -> Callable[..., ProjectOptions]:
    """Factory for ``ProjectOptions`` rooted in ``output_dir``.

    Usage:
        def test_something(make_options):
            options = make_options(template="cli", include_tests=False)
    """
    def factory(**overrides: Any) -> ProjectOptions:
        fields: dict[str, Any] = {
            "project_name": "demo",
            "project_path": str(output_dir),
        }
        fields.update(overrides)
        return ProjectOptions(**fields)

    return factory


@pytest.fixture
def bare_options(make_options) -> Callable[..., ProjectOptions]:
    """Factory for options with tests, linting and .gitignore all disabled."""
    def factory(**overrides: Any) -> ProjectOptions:
        fields: dict[str, Any] = {
            "include_tests": False,
            "include_linting": False,
            "include_gitignore": False,
        }
        fields.update(overrides)
        return make_options(**fields)

    return factory


# ---------------------------------------------------------------------------
# Scaffolder
# ---------------------------------------------------------------------------

@pytest.fixture
def scaffolder() -> ProjectScaffolder:
    """A scaffolder using the built-in registry and templates."""
    return ProjectScaffolder()
