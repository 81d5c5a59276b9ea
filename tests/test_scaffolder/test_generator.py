"""Tests for the ProjectScaffolder.

Covers:
- Write order and the files recorded for each flag combination
- Template lookup before any filesystem access
- Idempotent re-runs against an existing directory
- Path resolution for relative destinations
- Written file contents (JSON documents, template sources)
- Generated bodies rendered through an injected TemplateRenderer
- Filesystem and invalid-path errors surfacing as FilesystemError
"""

from __future__ import annotations

import asyncio
import json
import os
from pathlib import Path
from unittest.mock import patch

import pytest

from node_scaffold.scaffolder.generator import SAMPLE_TEST_PATH, ProjectScaffolder
from node_scaffold.scaffolder.models import FilesystemError, TemplateNotFoundError
from node_scaffold.scaffolder.templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Markers
# ---------------------------------------------------------------------------

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Files created
# ---------------------------------------------------------------------------


class TestFilesCreated:
    async def test_all_flags_order(self, scaffolder, make_options):
        result = await scaffolder.create_project(make_options(template="library"))
        assert result.files_created == [
            "package.json",
            "tsconfig.json",
            "src/index.ts",
            "src/lib/example.ts",
            "README.md",
            ".gitignore",
            ".eslintrc.json",
            ".prettierrc",
            "jest.config.js",
            "src/__tests__/index.test.ts",
        ]
        assert result.template == "library"

    async def test_no_tests(self, scaffolder, make_options):
        result = await scaffolder.create_project(make_options(include_tests=False))
        assert "jest.config.js" not in result.files_created
        assert SAMPLE_TEST_PATH not in result.files_created
        assert not (result.project_path / "jest.config.js").exists()
        assert not (result.project_path / "src" / "__tests__").exists()

    async def test_no_linting(self, scaffolder, make_options):
        result = await scaffolder.create_project(make_options(include_linting=False))
        assert ".eslintrc.json" not in result.files_created
        assert ".prettierrc" not in result.files_created
        assert not (result.project_path / ".eslintrc.json").exists()

    async def test_no_gitignore(self, scaffolder, make_options):
        result = await scaffolder.create_project(make_options(include_gitignore=False))
        assert ".gitignore" not in result.files_created
        assert not (result.project_path / ".gitignore").exists()

    async def test_cli_bare(self, scaffolder, bare_options):
        result = await scaffolder.create_project(bare_options(template="cli"))
        assert result.files_created == [
            "package.json",
            "tsconfig.json",
            "src/index.ts",
            "src/commands/index.ts",
            "README.md",
        ]

    async def test_every_recorded_file_exists(self, scaffolder, make_options):
        result = await scaffolder.create_project(make_options(template="express"))
        for rel_path in result.files_created:
            assert (result.project_path / rel_path).is_file(), rel_path


# ---------------------------------------------------------------------------
# Template lookup
# ---------------------------------------------------------------------------


class TestUnknownTemplate:
    async def test_raises_before_io(self, scaffolder, make_options, output_dir):
        options = make_options(template="react")
        with pytest.raises(TemplateNotFoundError, match='Template "react" not found'):
            await scaffolder.create_project(options)
        assert not (output_dir / "demo").exists()
        assert list(output_dir.iterdir()) == []

    async def test_no_mkdir_called(self, scaffolder, make_options):
        with patch.object(Path, "mkdir") as mkdir:
            with pytest.raises(TemplateNotFoundError):
                await scaffolder.create_project(make_options(template="vue"))
        mkdir.assert_not_called()


# ---------------------------------------------------------------------------
# Directories & paths
# ---------------------------------------------------------------------------


class TestDirectories:
    async def test_existing_empty_directory(self, scaffolder, make_options, output_dir):
        (output_dir / "demo").mkdir()
        options = make_options()
        first = await scaffolder.create_project(options)
        second = await scaffolder.create_project(options)
        assert first.files_created == second.files_created

    async def test_creates_missing_parents(self, scaffolder, make_options, output_dir):
        nested = output_dir / "a" / "b"
        result = await scaffolder.create_project(make_options(project_path=str(nested)))
        assert result.project_path == (nested / "demo").resolve()
        assert (nested / "demo" / "package.json").is_file()

    async def test_relative_path_resolved_against_cwd(
        self, scaffolder, make_options, output_dir, monkeypatch
    ):
        monkeypatch.chdir(output_dir)
        result = await scaffolder.create_project(make_options(project_path="projects"))
        assert result.project_path.is_absolute()
        assert result.project_path == (output_dir / "projects" / "demo").resolve()

    async def test_dot_segments_normalised(self, scaffolder, make_options, output_dir):
        options = make_options(project_path=str(output_dir / "x" / ".."))
        result = await scaffolder.create_project(options)
        assert result.project_path == (output_dir / "demo").resolve()


# ---------------------------------------------------------------------------
# Contents
# ---------------------------------------------------------------------------


class TestContents:
    async def test_package_json_written(self, scaffolder, make_options):
        result = await scaffolder.create_project(make_options(project_name="tool", template="cli"))
        package = json.loads((result.project_path / "package.json").read_text(encoding="utf-8"))
        assert package["name"] == "tool"
        assert package["bin"] == {"tool": "./dist/index.js"}

    async def test_tsconfig_written(self, scaffolder, make_options):
        result = await scaffolder.create_project(make_options(template="library"))
        tsconfig = json.loads((result.project_path / "tsconfig.json").read_text(encoding="utf-8"))
        assert tsconfig["compilerOptions"]["declaration"] is True

    async def test_basic_index_literal(self, scaffolder, bare_options):
        result = await scaffolder.create_project(bare_options())
        index = (result.project_path / "src" / "index.ts").read_text(encoding="utf-8")
        assert index == 'console.log("Hello, TypeScript!");'

    async def test_sample_test_embeds_name(self, scaffolder, make_options):
        result = await scaffolder.create_project(make_options(project_name="widget"))
        body = (result.project_path / SAMPLE_TEST_PATH).read_text(encoding="utf-8")
        assert "describe('widget'" in body

    async def test_lint_configs_are_json(self, scaffolder, make_options):
        result = await scaffolder.create_project(make_options())
        eslint = json.loads((result.project_path / ".eslintrc.json").read_text(encoding="utf-8"))
        prettier = json.loads((result.project_path / ".prettierrc").read_text(encoding="utf-8"))
        assert eslint["parser"] == "@typescript-eslint/parser"
        assert prettier["singleQuote"] is True

    async def test_overwrites_existing_files(self, scaffolder, make_options, output_dir):
        target = output_dir / "demo"
        target.mkdir()
        (target / "package.json").write_text("stale", encoding="utf-8")
        await scaffolder.create_project(make_options())
        assert (target / "package.json").read_text(encoding="utf-8") != "stale"


# Injected renderer
# ---------------------------------------------------------------------------


class TestInjectedRenderer:
    @pytest.fixture
    def custom_renderer(self, tmp_path: Path) -> TemplateRenderer:
        template_dir = tmp_path / "custom-templates"
        for name in (
            "README.md.j2",
            "express/index.ts.j2",
            "express/routes.ts.j2",
            "gitignore.j2",
            "jest.config.js.j2",
            "index.test.ts.j2",
        ):
            target = template_dir / name
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text("custom {{ project_name }}\n", encoding="utf-8")
        return TemplateRenderer(template_dir)

    async def test_every_generated_body_uses_injected_renderer(
        self, make_options, output_dir, custom_renderer
    ):
        scaffolder = ProjectScaffolder(renderer=custom_renderer)
        await scaffolder.create_project(make_options(template="express"))
        project = output_dir / "demo"
        for rel_path in (
            "README.md",
            "src/index.ts",
            "src/routes/index.ts",
            ".gitignore",
            "jest.config.js",
            SAMPLE_TEST_PATH,
        ):
            assert (project / rel_path).read_text(encoding="utf-8") == "custom demo\n"

    async def test_literal_bodies_unaffected(self, bare_options, output_dir, custom_renderer):
        scaffolder = ProjectScaffolder(renderer=custom_renderer)
        await scaffolder.create_project(bare_options())
        project = output_dir / "demo"
        assert (project / "src" / "index.ts").read_text(encoding="utf-8") == (
            'console.log("Hello, TypeScript!");'
        )
        assert (project / "README.md").read_text(encoding="utf-8") == "custom demo\n"


# ---------------------------------------------------------------------------
# Failures
# ---------------------------------------------------------------------------


class TestFilesystemFailures:
    async def test_write_error_wrapped(self, scaffolder, make_options):
        with patch.object(Path, "write_text", side_effect=OSError(28, "No space left on device")):
            with pytest.raises(FilesystemError, match="No space left on device") as exc_info:
                await scaffolder.create_project(make_options())
        assert exc_info.value.path.name == "package.json"
        assert isinstance(exc_info.value.__cause__, OSError)

    async def test_partial_tree_left_on_later_failure(self, scaffolder, make_options, output_dir):
        real_write_text = Path.write_text

        def failing_write(self, *args, **kwargs):
            if self.name == "README.md":
                raise PermissionError(13, "Permission denied")
            return real_write_text(self, *args, **kwargs)

        with patch.object(Path, "write_text", failing_write):
            with pytest.raises(FilesystemError, match="Permission denied"):
                await scaffolder.create_project(make_options())

        project = output_dir / "demo"
        assert (project / "package.json").is_file()
        assert (project / "tsconfig.json").is_file()
        assert (project / "src" / "index.ts").is_file()
        assert not (project / "README.md").exists()

    async def test_destination_is_a_file(self, scaffolder, make_options, output_dir):
        (output_dir / "demo").write_text("not a directory", encoding="utf-8")
        with pytest.raises(FilesystemError):
            await scaffolder.create_project(make_options())

    @pytest.mark.skipif(
        os.name == "nt" or (hasattr(os, "geteuid") and os.geteuid() == 0),
        reason="permission bits are not enforced for this user",
    )
    async def test_read_only_parent(self, scaffolder, make_options, output_dir):
        locked = output_dir / "locked"
        locked.mkdir()
        locked.chmod(0o500)
        try:
            with pytest.raises(FilesystemError):
                await scaffolder.create_project(make_options(project_path=str(locked)))
        finally:
            locked.chmod(0o700)

    async def test_invalid_path_wrapped(self, scaffolder, make_options, output_dir):
        with pytest.raises(FilesystemError, match="null byte") as exc_info:
            await scaffolder.create_project(make_options(project_name="de\x00mo"))
        assert isinstance(exc_info.value.__cause__, ValueError)
        assert list(output_dir.iterdir()) == []


class TestConcurrency:
    async def test_different_destinations_independent(self, make_options):
        scaffolder = ProjectScaffolder()
        results = await asyncio.gather(
            scaffolder.create_project(make_options(project_name="one", template="express")),
            scaffolder.create_project(make_options(project_name="two", template="cli")),
        )
        assert results[0].project_path.name == "one"
        assert "src/routes/index.ts" in results[0].files_created
        assert results[1].project_path.name == "two"
        assert "src/commands/index.ts" in results[1].files_created
