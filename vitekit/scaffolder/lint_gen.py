"""Prettier formatting setup.

Installs Prettier (plus the Svelte plugin for svelte projects), writes
``.prettierrc`` and ``.prettierignore``, and merges ``format`` scripts into
``package.json``.  Existing scripts are never replaced.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any

from ..choices import Feature, Framework
from ..utils import load_json, save_json
from .steps import StepContext, StepOutcome, TemplateStep

FORMAT_SCRIPTS: dict[str, str] = {
    "format": "prettier --write .",
    "format:check": "prettier --check .",
}

_BASE_PRETTIER_CONFIG: dict[str, Any] = {
    "semi": False,
    "singleQuote": True,
    "trailingComma": "all",
    "printWidth": 100,
}

# Extra Prettier plugins a framework needs to format its own file type.
FORMATTER_PLUGINS: dict[Framework, list[str]] = {
    Framework.REACT: [],
    Framework.VUE: [],
    Framework.SVELTE: ["prettier-plugin-svelte"],
    Framework.PREACT: [],
    Framework.LIT: [],
    Framework.VANILLA: [],
}


def prettier_config(framework: Framework) -> dict[str, Any]:
    """Return the ``.prettierrc`` document for *framework*."""
    config = dict(_BASE_PRETTIER_CONFIG)
    plugins = FORMATTER_PLUGINS[framework]
    if plugins:
        config["plugins"] = list(plugins)
    return config


def merge_scripts(manifest_path: Path, scripts: dict[str, str]) -> list[str]:
    """Add *scripts* to ``package.json`` without touching existing entries.

    Returns the names of the scripts that were added.

    Raises:
        FileNotFoundError: If the manifest does not exist.
        ValueError: If the manifest is not valid JSON, is not a JSON object,
            or holds a ``scripts`` entry that is not an object.
    """
    manifest = load_json(manifest_path)
    if not isinstance(manifest, dict):
        raise ValueError("package.json must hold a JSON object")
    existing = manifest.get("scripts")
    if existing is None:
        existing = manifest["scripts"] = {}
    elif not isinstance(existing, dict):
        raise ValueError('"scripts" in package.json must be an object')
    added = []
    for key, command in scripts.items():
        if key not in existing:
            existing[key] = command
            added.append(key)
    if added:
        save_json(manifest, manifest_path)
    return added


class LintGenerator(TemplateStep):
    """Adds Prettier with a project config and ``format`` scripts."""

    name = "linting"
    title = "Prettier setup"
    feature = Feature.LINTING
    hint = 'Install Prettier manually and add "format": "prettier --write ." to package.json'

    async def execute(self, ctx: StepContext) -> StepOutcome:
        framework = ctx.choices.framework
        packages = ["prettier@latest", *(f"{p}@latest" for p in FORMATTER_PLUGINS[framework])]
        await ctx.runner.check(
            ctx.package_manager.add_command(packages, dev=True), ctx.project_root
        )

        rc_path = ctx.path(".prettierrc")
        await asyncio.to_thread(save_json, prettier_config(framework), rc_path)
        ignore_path = await self.renderer.render_to_file(
            "linting/prettierignore.j2", ctx.path(".prettierignore"), ctx.template_context()
        )

        manifest = ctx.path("package.json")
        try:
            added = await asyncio.to_thread(merge_scripts, manifest, FORMAT_SCRIPTS)
        except ValueError as exc:
            return StepOutcome.warning(
                self.name,
                f"Prettier installed but package.json scripts could not be updated: {exc}",
                hint=self.hint,
                files=[rc_path, ignore_path],
            )

        message = "Prettier configured"
        if added:
            message += f" (scripts: {', '.join(added)})"
        return StepOutcome.success(self.name, message, files=[rc_path, ignore_path, manifest])
