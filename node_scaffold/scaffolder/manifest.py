"""JSON configuration documents for a generated project.

Builds ``package.json``, ``tsconfig.json``, ``.eslintrc.json`` and
``.prettierrc`` as plain dicts.  Every builder is a pure function of its
arguments and returns a fresh object on each call.
"""

from __future__ import annotations

import json
from typing import Any

from .models import ProjectOptions, ProjectTemplate, TemplateDescriptor


# Floating version pin written for every dependency.  Generated projects are
# therefore not reproducible across installs.
LATEST_VERSION = "latest"

TEST_DEV_DEPENDENCIES: tuple[str, ...] = ("jest", "@types/jest", "ts-jest")

LINT_DEV_DEPENDENCIES: tuple[str, ...] = (
    "eslint",
    "@typescript-eslint/parser",
    "@typescript-eslint/eslint-plugin",
    "prettier",
)


# ---------------------------------------------------------------------------
# package.json
# ---------------------------------------------------------------------------


def build_package_json(
    options: ProjectOptions, template: TemplateDescriptor
) -> dict[str, Any]:
    """Return the ``package.json`` document for *options*.

    Template dependencies are pinned to ``LATEST_VERSION``.  Test tooling,
    lint tooling and the CLI ``bin`` entry are added in that order when the
    options ask for them.
    """
    package: dict[str, Any] = {
        "name": options.project_name,
        "version": "1.0.0",
        "description": "",
        "main": "dist/index.js",
        "scripts": {
            "build": "tsc",
            "dev": "tsc --watch",
            "start": "node dist/index.js",
        },
        "keywords": [],
        "author": "",
        "license": "ISC",
        "dependencies": {},
        "devDependencies": {},
    }

    for dep in template.dependencies:
        package["dependencies"][dep] = LATEST_VERSION
    for dep in template.dev_dependencies:
        package["devDependencies"][dep] = LATEST_VERSION

    if options.include_tests:
        for dep in TEST_DEV_DEPENDENCIES:
            package["devDependencies"][dep] = LATEST_VERSION
        package["scripts"]["test"] = "jest"
        package["scripts"]["test:watch"] = "jest --watch"

    if options.include_linting:
        for dep in LINT_DEV_DEPENDENCIES:
            package["devDependencies"][dep] = LATEST_VERSION
        package["scripts"]["lint"] = "eslint src/**/*.ts"
        package["scripts"]["lint:fix"] = "eslint src/**/*.ts --fix"
        package["scripts"]["format"] = "prettier --write src/**/*.ts"

    if options.template == ProjectTemplate.CLI.value:
        package["bin"] = {options.project_name: "./dist/index.js"}

    return package


# ---------------------------------------------------------------------------
# tsconfig.json
# ---------------------------------------------------------------------------


def build_tsconfig(options: ProjectOptions) -> dict[str, Any]:
    """Return the TypeScript compiler configuration.

    Only the ``library`` template emits declaration files and maps.
    """
    is_library = options.template == ProjectTemplate.LIBRARY.value
    return {
        "compilerOptions": {
            "target": "ES2020",
            "module": "commonjs",
            "lib": ["ES2020"],
            "outDir": "./dist",
            "rootDir": "./src",
            "strict": True,
            "esModuleInterop": True,
            "skipLibCheck": True,
            "forceConsistentCasingInFileNames": True,
            "declaration": is_library,
            "declarationMap": is_library,
            "sourceMap": True,
        },
        "include": ["src/**/*"],
        "exclude": ["node_modules", "dist"],
    }


# ---------------------------------------------------------------------------
# Lint / format tooling
# ---------------------------------------------------------------------------


def build_eslint_config() -> dict[str, Any]:
    return {
        "parser": "@typescript-eslint/parser",
        "extends": [
            "eslint:recommended",
            "@typescript-eslint/recommended",
        ],
        "parserOptions": {
            "ecmaVersion": 2020,
            "sourceType": "module",
        },
        "rules": {
            "@typescript-eslint/no-unused-vars": "error",
            "@typescript-eslint/explicit-function-return-type": "warn",
            "@typescript-eslint/no-explicit-any": "warn",
        },
    }


def build_prettier_config() -> dict[str, Any]:
    return {
        "semi": True,
        "trailingComma": "es5",
        "singleQuote": True,
        "printWidth": 80,
        "tabWidth": 2,
    }


def dump_json(data: dict[str, Any]) -> str:
    """Serialise *data* with two-space indentation and no trailing newline."""
    return json.dumps(data, indent=2, ensure_ascii=False)
