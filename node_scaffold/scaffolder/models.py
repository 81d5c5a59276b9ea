"""Data model for project scaffolding.

Options come in, a ``ProjectResult`` goes out.  Templates are described by
immutable ``TemplateDescriptor`` records whose file bodies are either literal
text or a pure function of the options (see ``FileContent``).
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .templates import TemplateRenderer, default_renderer


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class ProjectTemplate(str, Enum):
    """Built-in project templates."""
    BASIC = "basic"
    EXPRESS = "express"
    CLI = "cli"
    LIBRARY = "library"


class PackageManager(str, Enum):
    """Package manager used in generated README commands."""
    NPM = "npm"
    YARN = "yarn"
    PNPM = "pnpm"


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class ScaffoldError(Exception):
    """Base class for every error raised while scaffolding a project."""


class TemplateNotFoundError(ScaffoldError):
    """Raised when a template identifier is not in the registry."""

    def __init__(self, template: str, available: list[str] | None = None) -> None:
        self.template = template
        self.available = list(available or [])
        super().__init__(f'Template "{template}" not found')


class FilesystemError(ScaffoldError):
    """Raised when a directory or file of the project cannot be written."""

    def __init__(self, path: Path, error: OSError | ValueError) -> None:
        self.path = path
        self.error = error
        reason = getattr(error, "strerror", None) or str(error)
        super().__init__(f"Failed to write {path}: {reason}")


# ---------------------------------------------------------------------------
# Options & result
# ---------------------------------------------------------------------------


class ProjectOptions(BaseModel):
    """Everything needed to materialise one project.

    ``template`` stays a plain string: unknown identifiers are rejected by
    the registry at lookup time, not by validation.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    project_name: str = Field(..., description="The name of the project")
    project_path: str = Field(..., description="The path where the project should be created")
    template: str = Field(default=ProjectTemplate.BASIC.value, description="The project template to use")
    package_manager: PackageManager = Field(
        default=PackageManager.NPM, description="The package manager to use"
    )
    include_tests: bool = Field(default=True, description="Whether to include test configuration")
    include_linting: bool = Field(default=True, description="Whether to include ESLint and Prettier")
    include_gitignore: bool = Field(default=True, description="Whether to include .gitignore file")

    def template_context(self) -> dict[str, Any]:
        """Return the Jinja2 rendering context for these options."""
        return {
            "project_name": self.project_name,
            "template": self.template,
            "package_manager": self.package_manager.value,
            "include_tests": self.include_tests,
            "include_linting": self.include_linting,
            "include_gitignore": self.include_gitignore,
        }


class ProjectResult(BaseModel):
    """Outcome of a successful ``create_project`` call."""

    project_path: Path
    template: str
    files_created: list[str] = Field(default_factory=list)

    def summary(self, project_name: str, package_manager: PackageManager | str) -> str:
        """Human-readable report with next steps and the created files."""
        pm = package_manager.value if isinstance(package_manager, PackageManager) else package_manager
        files = "\n".join(f"- {name}" for name in self.files_created)
        return (
            "Project created successfully!\n\n"
            f"Project: {project_name}\n"
            f"Path: {self.project_path}\n"
            f"Template: {self.template}\n\n"
            "Next steps:\n"
            f"1. cd {self.project_path}\n"
            f"2. {pm} install\n"
            f"3. {pm} run dev\n\n"
            f"Files created:\n{files}"
        )


# ---------------------------------------------------------------------------
# File content variants
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class LiteralContent:
    """A file body that is the same for every project."""

    text: str

    def resolve(
        self, options: ProjectOptions, renderer: TemplateRenderer | None = None
    ) -> str:
        return self.text


@dataclass(frozen=True)
class GeneratedContent:
    """A file body computed from the options by a pure function.

    ``render`` receives the renderer of the scaffolder doing the write, so an
    injected ``TemplateRenderer`` reaches every generated body.
    """

    render: Callable[[ProjectOptions, TemplateRenderer], str]

    def resolve(
        self, options: ProjectOptions, renderer: TemplateRenderer | None = None
    ) -> str:
        return self.render(options, default_renderer if renderer is None else renderer)


FileContent = Union[LiteralContent, GeneratedContent]


# ---------------------------------------------------------------------------
# Template descriptor
# ---------------------------------------------------------------------------


@dataclass(frozen=True, eq=False)
class TemplateDescriptor:
    """Static description of one project template.

    ``files`` preserves declaration order; it is wrapped in a read-only
    mapping at construction.  Descriptors compare and hash by identity.
    """

    name: str
    description: str
    files: Mapping[str, FileContent]
    dependencies: tuple[str, ...] = field(default_factory=tuple)
    dev_dependencies: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "files", MappingProxyType(dict(self.files)))
        object.__setattr__(self, "dependencies", tuple(self.dependencies))
        object.__setattr__(self, "dev_dependencies", tuple(self.dev_dependencies))

    def render_files(
        self, options: ProjectOptions, renderer: TemplateRenderer | None = None
    ) -> dict[str, str]:
        """Resolve every file body for *options*, keeping declaration order."""
        return {
            path: content.resolve(options, renderer)
            for path, content in self.files.items()
        }
