"""node-typescript-scaffold: generate Node.js + TypeScript projects from templates."""

__version__ = "1.0.0"
