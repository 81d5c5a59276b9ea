"""Main scaffolding orchestrator.

Takes a ``ProjectOptions`` and writes a Node.js + TypeScript project directory
for one of the built-in templates: manifest, compiler configuration, the
template's own sources, and optional ignore, lint and test tooling.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from .manifest import (
    build_eslint_config,
    build_package_json,
    build_prettier_config,
    build_tsconfig,
    dump_json,
)
from .models import FilesystemError, ProjectOptions, ProjectResult
from .registry import DEFAULT_REGISTRY, TemplateRegistry
from .templates import TemplateRenderer, default_renderer


# Relative path of the sample test written when tests are enabled.
SAMPLE_TEST_PATH = "src/__tests__/index.test.ts"


class ProjectScaffolder:
    """Materialises a project template on disk.

    The scaffolder holds no per-project state, so one instance can serve any
    number of ``create_project`` calls.  Calls that target different
    directories are independent; calls that target the same directory are
    not synchronised.
    """

    def __init__(
        self,
        registry: TemplateRegistry | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.registry = DEFAULT_REGISTRY if registry is None else registry
        self.renderer = default_renderer if renderer is None else renderer

    # -- Public API --------------------------------------------------------

    async def create_project(self, options: ProjectOptions) -> ProjectResult:
        """Generate the project described by *options*.

        The template is looked up before anything touches the filesystem.
        Writes happen one at a time, in a fixed order, and are not rolled
        back if a later write fails.

        Returns:
            A ``ProjectResult`` with the absolute project path and the
            relative paths written, in write order.

        Raises:
            TemplateNotFoundError: If ``options.template`` is not registered.
            FilesystemError: If the project path is invalid or a directory or
                file cannot be written.
        """
        template = self.registry.lookup(options.template)

        project_root = await self._resolve_root(options)
        files_created: list[str] = []

        await self._make_dirs(project_root)

        # 1. Manifest and compiler configuration
        await self._write(
            project_root, "package.json",
            dump_json(build_package_json(options, template)), files_created,
        )
        await self._write(
            project_root, "tsconfig.json",
            dump_json(build_tsconfig(options)), files_created,
        )

        # 2. Template sources, in declaration order
        for rel_path, content in template.files.items():
            await self._write(
                project_root, rel_path,
                content.resolve(options, self.renderer), files_created,
            )

        context = options.template_context()

        # 3. Optional extras
        if options.include_gitignore:
            await self._write(
                project_root, ".gitignore",
                self.renderer.render("gitignore.j2", context), files_created,
            )

        if options.include_linting:
            await self._write(
                project_root, ".eslintrc.json",
                dump_json(build_eslint_config()), files_created,
            )
            await self._write(
                project_root, ".prettierrc",
                dump_json(build_prettier_config()), files_created,
            )

        if options.include_tests:
            await self._write(
                project_root, "jest.config.js",
                self.renderer.render("jest.config.js.j2", context), files_created,
            )
            await self._write(
                project_root, SAMPLE_TEST_PATH,
                self.renderer.render("index.test.ts.j2", context), files_created,
            )

        return ProjectResult(
            project_path=project_root,
            template=template.name,
            files_created=files_created,
        )

    # -- Internal helpers --------------------------------------------------

    async def _resolve_root(self, options: ProjectOptions) -> Path:
        candidate = Path(options.project_path, options.project_name)
        try:
            return await asyncio.to_thread(candidate.resolve)
        except (OSError, ValueError) as exc:
            raise FilesystemError(candidate, exc) from exc

    async def _make_dirs(self, directory: Path) -> None:
        try:
            await asyncio.to_thread(directory.mkdir, parents=True, exist_ok=True)
        except (OSError, ValueError) as exc:
            raise FilesystemError(directory, exc) from exc

    async def _write(
        self,
        project_root: Path,
        rel_path: str,
        content: str,
        files_created: list[str],
    ) -> None:
        """Write one file below *project_root* and record its relative path."""
        target = project_root / rel_path
        await self._make_dirs(target.parent)
        try:
            await asyncio.to_thread(target.write_text, content, encoding="utf-8")
        except (OSError, ValueError) as exc:
            raise FilesystemError(target, exc) from exc
        files_created.append(rel_path)
