"""MCP server exposing project scaffolding as tools.

Tools:
    create-node-project -- scaffold a Node.js + TypeScript project.
    list-templates      -- describe the built-in templates.

Transports: stdio.  Stdout belongs to the protocol, so status output goes to
stderr.

Usage::

    node-scaffold-mcp
    python -m node_scaffold.server
"""

from __future__ import annotations

from typing import Annotated, Literal

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from pydantic import Field

from node_scaffold.config import ScaffoldConfig
from node_scaffold.scaffolder import (
    DEFAULT_REGISTRY,
    ProjectOptions,
    ProjectScaffolder,
    ScaffoldError,
    TemplateRegistry,
)
from node_scaffold.utils import err_console, print_error

TemplateName = Literal["basic", "express", "cli", "library"]
PackageManagerName = Literal["npm", "yarn", "pnpm"]


# ---------------------------------------------------------------------------
# Tool implementations
# ---------------------------------------------------------------------------


async def create_node_project(
    options: ProjectOptions,
    scaffolder: ProjectScaffolder | None = None,
) -> str:
    """Scaffold a project and return the success summary.

    Raises:
        ToolError: If scaffolding fails; the MCP client receives an error
            result carrying the message.
    """
    scaffolder = scaffolder or ProjectScaffolder()
    try:
        result = await scaffolder.create_project(options)
    except ScaffoldError as exc:
        raise ToolError(f"Error creating project: {exc}") from exc
    return result.summary(options.project_name, options.package_manager)


def list_templates(registry: TemplateRegistry | None = None) -> str:
    """Return a text listing of every template and its description."""
    if registry is None:
        registry = DEFAULT_REGISTRY
    entries = "\n".join(
        f"**{t.name}**\n{t.description}\n" for t in registry.list_all()
    )
    return f"Available templates:\n\n{entries}"


# ---------------------------------------------------------------------------
# Server factory
# ---------------------------------------------------------------------------


def create_server(config: ScaffoldConfig | None = None) -> FastMCP:
    """Create and configure the FastMCP server instance."""
    config = config or ScaffoldConfig()
    scaffolder = ProjectScaffolder()

    mcp = FastMCP(
        name=config.server_name,
        instructions=(
            "Scaffolds Node.js TypeScript projects from built-in templates "
            "(basic, express, cli, library) with optional Jest, ESLint/Prettier "
            "and .gitignore."
        ),
    )

    @mcp.tool(
        name="create-node-project",
        description="Create a new Node.js TypeScript project with common configurations",
    )
    async def create_node_project_tool(
        projectName: Annotated[str, Field(description="The name of the project")],
        projectPath: Annotated[
            str, Field(description="The path where the project should be created")
        ] = str(config.default_project_path),
        template: Annotated[
            TemplateName, Field(description="The project template to use")
        ] = config.default_template.value,
        packageManager: Annotated[
            PackageManagerName, Field(description="The package manager to use")
        ] = config.default_package_manager.value,
        includeTests: Annotated[
            bool, Field(description="Whether to include test configuration")
        ] = True,
        includeLinting: Annotated[
            bool, Field(description="Whether to include ESLint and Prettier")
        ] = True,
        includeGitignore: Annotated[
            bool, Field(description="Whether to include .gitignore file")
        ] = True,
    ) -> str:
        options = ProjectOptions(
            projectName=projectName,
            projectPath=projectPath,
            template=template,
            packageManager=packageManager,
            includeTests=includeTests,
            includeLinting=includeLinting,
            includeGitignore=includeGitignore,
        )
        return await create_node_project(options, scaffolder)

    @mcp.tool(
        name="list-templates",
        description="List the available project templates with descriptions",
    )
    def list_templates_tool() -> str:
        return list_templates(scaffolder.registry)

    return mcp


def main() -> None:
    """Entry point for the ``node-scaffold-mcp`` command."""
    config = ScaffoldConfig.from_env()
    server = create_server(config)
    err_console.print(
        f"[bold cyan]{config.server_name}[/bold cyan] v{config.server_version} "
        "running on stdio"
    )
    try:
        server.run()
    except KeyboardInterrupt:
        print_error("Server interrupted", out=err_console)


if __name__ == "__main__":
    main()
