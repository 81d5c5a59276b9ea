"""node-typescript-scaffold configuration.

Typed settings for the MCP server and the CLI.  All settings use Pydantic v2
models so they can be validated at construction time and serialised to/from
JSON or environment variables without boiler-plate.  The scaffolder core
never reads configuration; the entry points use it to fill in defaults.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from node_scaffold import __version__
from node_scaffold.scaffolder.models import PackageManager, ProjectTemplate


class ScaffoldConfig(BaseModel):
    """Defaults and identity for the server and command-line entry points."""

    server_name: str = Field(default="node-typescript-scaffold")
    server_version: str = Field(default=__version__)
    default_project_path: Path = Field(
        default=Path("."), description="Parent directory used when none is given"
    )
    default_template: ProjectTemplate = Field(default=ProjectTemplate.BASIC)
    default_package_manager: PackageManager = Field(default=PackageManager.NPM)

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Returns:
            The path where the file was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "ScaffoldConfig":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "ScaffoldConfig":
        """Build a ``ScaffoldConfig`` from environment variables.

        Recognised variables (all optional):
            NODE_SCAFFOLD_SERVER_NAME, NODE_SCAFFOLD_PROJECT_PATH,
            NODE_SCAFFOLD_TEMPLATE, NODE_SCAFFOLD_PACKAGE_MANAGER.

        Invalid template or package-manager values raise
        ``pydantic.ValidationError``.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("NODE_SCAFFOLD_SERVER_NAME"):
            kwargs["server_name"] = os.environ["NODE_SCAFFOLD_SERVER_NAME"]
        if os.environ.get("NODE_SCAFFOLD_PROJECT_PATH"):
            kwargs["default_project_path"] = Path(os.environ["NODE_SCAFFOLD_PROJECT_PATH"])
        if os.environ.get("NODE_SCAFFOLD_TEMPLATE"):
            kwargs["default_template"] = os.environ["NODE_SCAFFOLD_TEMPLATE"]
        if os.environ.get("NODE_SCAFFOLD_PACKAGE_MANAGER"):
            kwargs["default_package_manager"] = os.environ["NODE_SCAFFOLD_PACKAGE_MANAGER"]
        return cls(**kwargs)
