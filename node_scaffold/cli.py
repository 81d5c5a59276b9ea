"""Command-line interface for node-typescript-scaffold.

Usage::

    node-scaffold create my-app --path ./projects --template express
    node-scaffold create my-lib -t library --no-tests --no-linting
    node-scaffold templates
    node-scaffold serve
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from node_scaffold import __version__
from node_scaffold.config import ScaffoldConfig
from node_scaffold.scaffolder import (
    DEFAULT_REGISTRY,
    PackageManager,
    ProjectOptions,
    ProjectScaffolder,
    ScaffoldError,
)
from node_scaffold.utils import (
    console,
    print_error,
    print_success,
    print_summary_table,
    print_templates_table,
    print_warning,
)


def build_parser(config: ScaffoldConfig) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="node-scaffold",
        description="Scaffold Node.js TypeScript projects from built-in templates",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  node-scaffold create my-app --template express\n"
            "  node-scaffold create my-lib -t library -p ./packages --no-tests\n"
            "  node-scaffold templates\n"
        ),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    sub = parser.add_subparsers(dest="command", required=True)

    create = sub.add_parser("create", help="Create a new project")
    create.add_argument("project_name", help="The name of the project")
    create.add_argument(
        "--path", "-p",
        default=str(config.default_project_path),
        help=f"Parent directory for the project (default: {config.default_project_path})",
    )
    create.add_argument(
        "--template", "-t",
        choices=DEFAULT_REGISTRY.names(),
        default=config.default_template.value,
        help=f"Project template (default: {config.default_template.value})",
    )
    create.add_argument(
        "--package-manager", "-m",
        choices=[pm.value for pm in PackageManager],
        default=config.default_package_manager.value,
        help=f"Package manager (default: {config.default_package_manager.value})",
    )
    create.add_argument("--no-tests", action="store_true", help="Skip Jest configuration")
    create.add_argument("--no-linting", action="store_true", help="Skip ESLint and Prettier")
    create.add_argument("--no-gitignore", action="store_true", help="Skip .gitignore")

    sub.add_parser("templates", help="List the available templates")
    sub.add_parser("serve", help="Run the MCP server on stdio")
    return parser


def _create(args: argparse.Namespace) -> int:
    options = ProjectOptions(
        project_name=args.project_name,
        project_path=args.path,
        template=args.template,
        package_manager=args.package_manager,
        include_tests=not args.no_tests,
        include_linting=not args.no_linting,
        include_gitignore=not args.no_gitignore,
    )

    target = Path(options.project_path, options.project_name)
    if target.is_dir() and any(target.iterdir()):
        print_warning(f"{target} is not empty; existing files may be overwritten.")

    try:
        result = asyncio.run(ProjectScaffolder().create_project(options))
    except ScaffoldError as exc:
        print_error(f"Error creating project: {exc}")
        return 1

    print_success(f"Project {options.project_name} created successfully!")
    print_summary_table(
        {
            "Path": str(result.project_path),
            "Template": result.template,
            "Files": str(len(result.files_created)),
        },
        title="Project",
    )
    for rel_path in result.files_created:
        console.print(f"  [green]+[/green] {rel_path}")
    pm = options.package_manager.value
    console.print(
        f"\nNext steps:\n  cd {result.project_path}\n  {pm} install\n  {pm} run dev"
    )
    return 0


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for ``node-scaffold``."""
    config = ScaffoldConfig.from_env()
    args = build_parser(config).parse_args(argv)

    if args.command == "create":
        return _create(args)
    if args.command == "templates":
        print_templates_table(DEFAULT_REGISTRY.list_all())
        return 0
    if args.command == "serve":
        from node_scaffold.server import main as serve

        serve()
        return 0
    return 2


if __name__ == "__main__":
    sys.exit(main())
