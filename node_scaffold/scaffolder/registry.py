"""Built-in project templates and the read-only registry that serves them.

Each template maps relative output paths to a ``FileContent``.  Generated
bodies are rendered with the calling scaffolder's Jinja2 renderer and the
options' context, so they only ever read ``ProjectOptions`` fields.
"""

from __future__ import annotations

from collections.abc import Iterable
from types import MappingProxyType

from .models import (
    GeneratedContent,
    LiteralContent,
    ProjectOptions,
    ProjectTemplate,
    TemplateDescriptor,
    TemplateNotFoundError,
)
from .templates import TemplateRenderer


def _jinja(template_path: str) -> GeneratedContent:
    """Bind a packaged Jinja2 template as a generated file body."""

    def render(options: ProjectOptions, renderer: TemplateRenderer) -> str:
        return renderer.render(template_path, options.template_context())

    return GeneratedContent(render=render)


README = _jinja("README.md.j2")


# ---------------------------------------------------------------------------
# Built-in templates
# ---------------------------------------------------------------------------

BUILTIN_TEMPLATES: tuple[TemplateDescriptor, ...] = (
    TemplateDescriptor(
        name=ProjectTemplate.BASIC.value,
        description="Basic Node.js TypeScript project with minimal setup",
        files={
            "src/index.ts": LiteralContent('console.log("Hello, TypeScript!");'),
            "README.md": README,
        },
        dependencies=(),
        dev_dependencies=("typescript", "@types/node"),
    ),
    TemplateDescriptor(
        name=ProjectTemplate.EXPRESS.value,
        description="Express.js web server with TypeScript",
        files={
            "src/index.ts": _jinja("express/index.ts.j2"),
            "src/routes/index.ts": _jinja("express/routes.ts.j2"),
            "README.md": README,
        },
        dependencies=("express",),
        dev_dependencies=("typescript", "@types/node", "@types/express"),
    ),
    TemplateDescriptor(
        name=ProjectTemplate.CLI.value,
        description="Command-line interface application with TypeScript",
        files={
            "src/index.ts": _jinja("cli/index.ts.j2"),
            "src/commands/index.ts": _jinja("cli/commands.ts.j2"),
            "README.md": README,
        },
        dependencies=("commander",),
        dev_dependencies=("typescript", "@types/node"),
    ),
    TemplateDescriptor(
        name=ProjectTemplate.LIBRARY.value,
        description="TypeScript library with proper build configuration",
        files={
            "src/index.ts": _jinja("library/index.ts.j2"),
            "src/lib/example.ts": _jinja("library/example.ts.j2"),
            "README.md": README,
        },
        dependencies=(),
        dev_dependencies=("typescript", "@types/node"),
    ),
)


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------


class TemplateRegistry:
    """Immutable lookup table of template descriptors, in declaration order."""

    def __init__(self, templates: Iterable[TemplateDescriptor]) -> None:
        self._templates = MappingProxyType({t.name: t for t in templates})

    def lookup(self, template_id: ProjectTemplate | str) -> TemplateDescriptor:
        """Return the descriptor for *template_id*.

        Raises:
            TemplateNotFoundError: If the identifier is not registered.
        """
        key = template_id.value if isinstance(template_id, ProjectTemplate) else template_id
        try:
            return self._templates[key]
        except KeyError:
            raise TemplateNotFoundError(str(key), self.names()) from None

    def list_all(self) -> list[TemplateDescriptor]:
        """Return every descriptor in registration order."""
        return list(self._templates.values())

    def names(self) -> list[str]:
        return list(self._templates)

    def __contains__(self, template_id: object) -> bool:
        if isinstance(template_id, ProjectTemplate):
            template_id = template_id.value
        return template_id in self._templates

    def __len__(self) -> int:
        return len(self._templates)


DEFAULT_REGISTRY = TemplateRegistry(BUILTIN_TEMPLATES)
