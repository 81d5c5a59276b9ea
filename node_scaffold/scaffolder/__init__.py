"""Node.js + TypeScript project scaffolder.

Turns a ``ProjectOptions`` record into a project directory for one of the
built-in templates (``basic``, ``express``, ``cli``, ``library``).

Quick usage::

    from node_scaffold.scaffolder import ProjectOptions, ProjectScaffolder

    options = ProjectOptions(
        project_name="demo",
        project_path="/tmp",
        template="express",
    )
    result = await ProjectScaffolder().create_project(options)
    print(result.files_created)
"""

from node_scaffold.scaffolder.generator import ProjectScaffolder
from node_scaffold.scaffolder.models import (
    FilesystemError,
    PackageManager,
    ProjectOptions,
    ProjectResult,
    ProjectTemplate,
    ScaffoldError,
    TemplateDescriptor,
    TemplateNotFoundError,
)
from node_scaffold.scaffolder.registry import DEFAULT_REGISTRY, TemplateRegistry
from node_scaffold.scaffolder.templates import TemplateRenderer

__all__ = [
    "DEFAULT_REGISTRY",
    "FilesystemError",
    "PackageManager",
    "ProjectOptions",
    "ProjectResult",
    "ProjectScaffolder",
    "ProjectTemplate",
    "ScaffoldError",
    "TemplateDescriptor",
    "TemplateNotFoundError",
    "TemplateRegistry",
    "TemplateRenderer",
]
